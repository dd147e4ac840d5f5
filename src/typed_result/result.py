"""
Result — a closed tagged union of Success(value) or Failure(error).

A Result[V, E] is exactly one of:
  - Success(value: V)  — the operation produced a value
  - Failure(error: E)  — the operation failed for a reason drawn from the
                         closed FailureKind enumeration E

Failures are ordinary return values. Nothing here raises for a domain
failure, and a Result never conflates "no value" with "no error" the way a
bare Optional does.

    ┌───────────┐    map / flat_map     ┌───────────┐    map / flat_map    ┌──────────┐
    │  divide   │──Success(v)───────────│  derive   │──Success(v)──────────│ consumer │
    │           │                       │           │                      │          │
    └─────┬─────┘                       └─────┬─────┘                      └─────┬────┘
          │ Failure(e)                        │ Failure(e)                       │
          └───────────────────────────────────┴──────────────────────────────────┴──→ match

Exhaustive consumption uses match/case closed by assert_never, so a type
checker rejects any consumer that forgets a variant:

    match divide(10, 5):
        case Success(quotient):
            print(quotient)
        case Failure(reason):
            print(reason.description)
        case unreachable:
            assert_never(unreachable)
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, TypeVar, final

from typed_result.errors import UnwrapError
from typed_result.failure import FailureKind

if TYPE_CHECKING:
    from typed_result.execution import ExecutionContext

V = TypeVar("V")
U = TypeVar("U")
A = TypeVar("A")
B = TypeVar("B")
R = TypeVar("R")
E = TypeVar("E", bound=FailureKind)
F = TypeVar("F", bound=FailureKind)


class Tag(Enum):
    """Which variant of a Result is active."""

    SUCCESS = "success"
    FAILURE = "failure"


class _ResultOps(Generic[V, E]):
    """
    Operations shared by both variants.

    Every transformation matches on the concrete variant and short-circuits
    on Failure, so callers only write the success path.
    """

    __slots__ = ()

    # ──────────────────────── Introspection ────────────────────────

    @property
    def tag(self) -> Tag:
        """The active variant."""
        match self:
            case Success():
                return Tag.SUCCESS
            case Failure():
                return Tag.FAILURE
        raise TypeError("unreachable")  # pragma: no cover

    def is_success(self) -> bool:
        return isinstance(self, Success)

    def is_failure(self) -> bool:
        return isinstance(self, Failure)

    def value_or_none(self) -> V | None:
        """The success value, or None on Failure. Prefer match/case."""
        match self:
            case Success(v):
                return v
        return None

    def error_or_none(self) -> E | None:
        """The failure kind, or None on Success. Prefer match/case."""
        match self:
            case Failure(err):
                return err
        return None

    # ──────────────────────── Core Transformations ────────────────────────

    def either(self, on_success: Callable[[V], R], on_failure: Callable[[E], R]) -> R:
        """
        Apply one of two functions depending on the active variant.

            divide(10, 0).either(str, lambda reason: reason.description)
        """
        match self:
            case Success(v):
                return on_success(v)
            case Failure(err):
                return on_failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    def map(self, mapper: Callable[[V], U]) -> Result[U, E]:
        """
        Transform the success value. Failure passes through unchanged.

            Success(5).map(lambda x: x * 2)   # → Success(10)
            Failure(kind).map(lambda x: x * 2)  # → Failure(kind), mapper never runs
        """
        match self:
            case Success(v):
                return Success(mapper(v))
            case Failure(err):
                return Failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    def map_failure(self, mapper: Callable[[E], F]) -> Result[V, F]:
        """Translate the failure kind into another family. Success passes through."""
        match self:
            case Success(v):
                return Success(v)
            case Failure(err):
                return Failure(mapper(err))
        raise TypeError("unreachable")  # pragma: no cover

    def flat_map(self, mapper: Callable[[V], Result[U, E]]) -> Result[U, E]:
        """
        Chain a Result-returning function. Short-circuits on failure.

            divide(100, 5).flat_map(lambda q: divide(q, 0))  # → Failure(ZERO_DIVISOR)
        """
        match self:
            case Success(v):
                return mapper(v)
            case Failure(err):
                return Failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    def ensure(self, predicate: Callable[[V], bool], kind: E) -> Result[V, E]:
        """Turn a Success into Failure(kind) when the predicate rejects its value."""
        return self.flat_map(lambda v: Success(v) if predicate(v) else Failure(kind))

    # ──────────────────────── Side Effects ────────────────────────

    def peek(self, action: Callable[[V], Any]) -> Result[V, E]:
        """Run a side effect on the success value; returns self unchanged."""
        match self:
            case Success(v):
                action(v)
        return self  # type: ignore[return-value]

    def peek_failure(self, action: Callable[[E], Any]) -> Result[V, E]:
        """Run a side effect on the failure kind; returns self unchanged."""
        match self:
            case Failure(err):
                action(err)
        return self  # type: ignore[return-value]

    # ──────────────────────── Recovery & Extraction ────────────────────────

    def recover(self, recovery_fn: Callable[[E], V]) -> Result[V, E]:
        """Replace a Failure with a Success computed from its kind."""
        match self:
            case Success(_):
                return self  # type: ignore[return-value]
            case Failure(err):
                return Success(recovery_fn(err))
        raise TypeError("unreachable")  # pragma: no cover

    def get_or_else(self, default: V) -> V:
        match self:
            case Success(v):
                return v
            case _:
                return default

    def get_or_else_get(self, fallback: Callable[[E], V]) -> V:
        return self.either(lambda v: v, fallback)

    def unwrap(self) -> V:
        """
        Return the success value, asserting that no failure occurred.

        This is the explicit "cannot fail here" path. A Failure reaching it is
        a programming error and raises UnwrapError rather than being returned.
        """
        return self.expect("Called unwrap() on a Failure")

    def expect(self, message: str) -> V:
        """Like unwrap(), with a caller-supplied message."""
        match self:
            case Success(v):
                return v
            case Failure(err):
                raise UnwrapError(f"{message}: {err.description}", self)
        raise TypeError("unreachable")  # pragma: no cover

    def unwrap_error(self) -> E:
        """Return the failure kind, asserting that the operation failed."""
        match self:
            case Failure(err):
                return err
            case Success(v):
                raise UnwrapError(f"Called unwrap_error() on a Success: {v!r}", self)
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Completion & Execution ────────────────────────

    def to_completion(self, handler: Callable[[Result[V, E]], Any]) -> None:
        """Deliver this result to a single-shot completion handler."""
        from typed_result.completion import to_completion

        to_completion(self, handler)  # type: ignore[arg-type]

    def within(self, execution_context: ExecutionContext) -> Result[V, E]:
        """
        Hand this result to an execution context (logging, timing).

            divide(10, 5).within(LoggingExecutionContext(operation="divide"))
        """
        return execution_context.execute(lambda: self)  # type: ignore[arg-type,return-value]

    # ──────────────────────── Async Support ────────────────────────

    async def map_async(self, mapper: Callable[[V], Awaitable[U]]) -> Result[U, E]:
        """Await an async mapper over the success value. Failure passes through."""
        match self:
            case Success(v):
                return Success(await mapper(v))
            case Failure(err):
                return Failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    async def flat_map_async(
        self, mapper: Callable[[V], Awaitable[Result[U, E]]]
    ) -> Result[U, E]:
        """Await an async Result-returning function. Short-circuits on failure."""
        match self:
            case Success(v):
                return await mapper(v)
            case Failure(err):
                return Failure(err)
        raise TypeError("unreachable")  # pragma: no cover


@final
@dataclass(frozen=True, slots=True, repr=False)
class Success(_ResultOps[V, E]):
    """The success variant — wraps a value of type V (None included)."""

    value: V

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@final
@dataclass(frozen=True, slots=True, repr=False)
class Failure(_ResultOps[V, E]):
    """The failure variant — wraps one member of a FailureKind enumeration."""

    error: E

    def __post_init__(self) -> None:
        if not isinstance(self.error, FailureKind):
            raise TypeError(
                f"Failure error must be a FailureKind member, got {type(self.error).__name__}"
            )

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"Failure({type(self.error).__name__}.{self.error.name})"


type Result[V, E: FailureKind] = Success[V, E] | Failure[V, E]


# ──────────────────────── Module-level API ────────────────────────


def inspect(result: Result[V, E]) -> Tag:
    """Return which variant of ``result`` is active."""
    return result.tag


def success(value: V) -> Result[V, Any]:
    """Create a Success wrapping ``value``."""
    return Success(value)


def failure(kind: E) -> Result[Any, E]:
    """Create a Failure carrying ``kind``."""
    return Failure(kind)


def from_optional(value: V | None, kind: E) -> Result[V, E]:
    """
    Lift an optional value into a Result: None becomes Failure(kind).

        from_optional(os.environ.get("PORT"), ConfigFailure.MISSING_PORT)
    """
    if value is None:
        return Failure(kind)
    return Success(value)


def catching(
    computation: Callable[[], V],
    exceptions: type[BaseException] | tuple[type[BaseException], ...],
    kind: E,
) -> Result[V, E]:
    """
    Run a computation that signals failure by raising, and return a Result.

    Only the listed exception types become Failure(kind); anything else is a
    bug and propagates.

        catching(lambda: int(text), ValueError, ParseFailure.NOT_A_NUMBER)
    """
    try:
        return Success(computation())
    except exceptions:
        return Failure(kind)


def combine(ra: Result[A, E], rb: Result[B, E], combiner: Callable[[A, B], R]) -> Result[R, E]:
    """Combine two Results. Both must succeed; the first failure wins."""
    return ra.flat_map(lambda a: rb.map(lambda b: combiner(a, b)))


def all_of(results: Iterable[Result[V, E]]) -> Result[list[V], E]:
    """
    Collect Results into a Result of list.

    Returns the first Failure encountered, or Success with every value in order.
    """
    values: list[V] = []
    for r in results:
        match r:
            case Success(v):
                values.append(v)
            case Failure(err):
                return Failure(err)
            case other:
                raise TypeError(f"all_of expects Success or Failure, got {type(other).__name__}")
    return Success(values)
