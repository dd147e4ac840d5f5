"""
Arithmetic — fallible integer operations returning Result.

Domain layer — pure logic, no I/O, no logging. Every failure is returned as
a Failure value; nothing here raises for bad input.

    divide(7, 2)    # → Success(3)
    divide(-7, 2)   # → Success(-3)    truncates toward zero, not floor
    divide(10, 0)   # → Failure(DivisionFailure.ZERO_DIVISOR)
"""

from __future__ import annotations

from typed_result.completion import CompletionHandler
from typed_result.result import Failure, Result, Success, catching

from division_demo.failures import DivisionFailure, ParseFailure


def _truncating_quotient(x: int, y: int) -> int:
    """Integer quotient rounded toward zero, exact for arbitrarily large ints."""
    quotient = abs(x) // abs(y)
    return quotient if (x < 0) == (y < 0) else -quotient


def divide(x: int, y: int) -> Result[int, DivisionFailure]:
    """Divide ``x`` by ``y`` with truncating integer division."""
    if y == 0:
        return Failure(DivisionFailure.ZERO_DIVISOR)
    return Success(_truncating_quotient(x, y))


def divide_with_completion(
    x: int,
    y: int,
    completion: CompletionHandler[int, DivisionFailure],
) -> None:
    """
    Callback-shaped divide: delivers the Result to ``completion`` exactly once.

    Runs synchronously; wrap it with complete_on() to run it on a worker.
    """
    completion(divide(x, y))


def parse_int(text: str) -> Result[int, ParseFailure]:
    """
    Parse a base-10 integer.

        parse_int("6")             # → Success(6)
        parse_int("not a number")  # → Failure(ParseFailure.NOT_A_NUMBER)
    """
    return catching(lambda: int(text.strip()), ValueError, ParseFailure.NOT_A_NUMBER)
