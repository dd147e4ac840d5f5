"""
typed_result — explicit, typed error propagation without exceptions.

A fallible operation returns Success(value) or Failure(kind), where kind is a
member of a closed FailureKind enumeration:

    from typed_result import Failure, FailureKind, Result, Success

    class DivisionFailure(FailureKind):
        ZERO_DIVISOR = ("zero_divisor", "Division by zero is quite problematic.")

    def floor_divide(x: int, y: int) -> Result[int, DivisionFailure]:
        if y == 0:
            return Failure(DivisionFailure.ZERO_DIVISOR)
        return Success(x // y)

    floor_divide(10, 5).map(lambda q: q * 3)  # → Success(6)
"""

from typed_result.assertions import ResultAssertions
from typed_result.completion import (
    Completion,
    complete_on,
    from_completion,
    to_completion,
    wait_for_completion,
)
from typed_result.errors import (
    CompletionAlreadyDeliveredError,
    CompletionNotDeliveredError,
    TypedResultError,
    UnwrapError,
)
from typed_result.execution import (
    ComposableExecutionContext,
    ExecutionContext,
    LoggingExecutionContext,
    NoOpExecutionContext,
    with_context,
)
from typed_result.failure import FailureKind
from typed_result.generics import Ref, swap, swap_items
from typed_result.result import (
    Failure,
    Result,
    Success,
    Tag,
    all_of,
    catching,
    combine,
    failure,
    from_optional,
    inspect,
    success,
)

__all__ = [
    "Result",
    "Success",
    "Failure",
    "Tag",
    "inspect",
    "success",
    "failure",
    "from_optional",
    "catching",
    "combine",
    "all_of",
    "FailureKind",
    "TypedResultError",
    "UnwrapError",
    "CompletionAlreadyDeliveredError",
    "CompletionNotDeliveredError",
    "Completion",
    "to_completion",
    "from_completion",
    "wait_for_completion",
    "complete_on",
    "ExecutionContext",
    "NoOpExecutionContext",
    "LoggingExecutionContext",
    "ComposableExecutionContext",
    "with_context",
    "ResultAssertions",
    "Ref",
    "swap",
    "swap_items",
]

__version__ = "1.0.0"
