"""
Failure kinds — closed, enumerable reasons a fallible operation can fail.

Each operation family declares ONE FailureKind subclass listing every way it
can fail. New reasons are added by extending the enumeration, never by
raising arbitrary exceptions:

    class DivisionFailure(FailureKind):
        ZERO_DIVISOR = ("zero_divisor", "Division by zero is quite problematic.")

    DivisionFailure.ZERO_DIVISOR.value        # 'zero_divisor'
    DivisionFailure.ZERO_DIVISOR.description  # 'Division by zero is quite problematic.'
    str(DivisionFailure.ZERO_DIVISOR)         # same as .description

Enum gives us singleton members (compare with `is`), exhaustive iteration,
and a type that a checker can enumerate in match/case.
"""

from __future__ import annotations

from enum import Enum


class FailureKind(Enum):
    """
    Base for failure-kind enumerations.

    Members are declared as ``NAME = (code, description)``. The code becomes
    the member's ``value``; the description is the fixed human-readable text.
    """

    description: str

    def __new__(cls, code: str, description: str) -> FailureKind:
        member = object.__new__(cls)
        member._value_ = code
        member.description = description
        return member

    @property
    def code(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.description

    def __repr__(self) -> str:
        return f"<{type(self).__name__}.{self.name}: {self.value!r}>"
