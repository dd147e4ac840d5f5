"""
Failure kinds for the division demo — one closed enumeration per operation family.
"""

from __future__ import annotations

from typed_result.failure import FailureKind


class DivisionFailure(FailureKind):
    """Ways an integer division can fail."""

    ZERO_DIVISOR = (
        "zero_divisor",
        "Division by zero is quite problematic. "
        "(https://en.wikipedia.org/wiki/Division_by_zero)",
    )


class ParseFailure(FailureKind):
    """Ways turning text into an integer can fail."""

    NOT_A_NUMBER = ("not_a_number", "Input is not a valid integer.")
