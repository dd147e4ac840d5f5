"""
Test assertions for Result values.

Expressive assert helpers with clear failure messages:

    from typed_result import ResultAssertions

    def test_divide_by_zero():
        result = divide(10, 0)
        ResultAssertions.assert_failure(result, DivisionFailure.ZERO_DIVISOR)
        ResultAssertions.assert_failure_description_contains(result, "division by zero")
"""

from __future__ import annotations

from typing import Any, TypeVar

from typed_result.failure import FailureKind
from typed_result.result import Failure, Result, Success

V = TypeVar("V")
E = TypeVar("E", bound=FailureKind)


class ResultAssertions:
    """Expressive test assertions for Result values."""

    @staticmethod
    def assert_success(result: Result[V, E], message: str = "") -> V:
        """
        Assert the Result is a Success and return the value.

            value = ResultAssertions.assert_success(result)
        """
        context = f" — {message}" if message else ""
        match result:
            case Success(v):
                return v
            case Failure(err):
                raise AssertionError(
                    f"Expected Success but got Failure({err.name}: {err.description!r}){context}"
                )
        raise AssertionError(f"Expected a Result but got {result!r}{context}")

    @staticmethod
    def assert_failure(
        result: Result[V, E],
        expected: E | None = None,
        message: str = "",
    ) -> E:
        """
        Assert the Result is a Failure, optionally of a specific kind.

            kind = ResultAssertions.assert_failure(result, DivisionFailure.ZERO_DIVISOR)
        """
        context = f" — {message}" if message else ""
        match result:
            case Success(v):
                raise AssertionError(f"Expected Failure but got Success({v!r}){context}")
            case Failure(err):
                if expected is not None and err is not expected:
                    raise AssertionError(
                        f"Expected failure {expected.name} but got {err.name}{context}"
                    )
                return err
        raise AssertionError(f"Expected a Result but got {result!r}{context}")

    @staticmethod
    def assert_failure_description_contains(result: Result[V, E], substring: str) -> None:
        """Assert the failure description contains ``substring`` (case-insensitive)."""
        err = ResultAssertions.assert_failure(result)
        assert substring.lower() in err.description.lower(), (
            f"Expected failure description to contain {substring!r} "
            f"but description was: {err.description!r}"
        )

    @staticmethod
    def assert_success_value(result: Result[V, E], expected_value: Any) -> None:
        """Assert the Result is a Success with the specific value."""
        value = ResultAssertions.assert_success(result)
        assert value == expected_value, (
            f"Expected success value {expected_value!r} but got {value!r}"
        )
