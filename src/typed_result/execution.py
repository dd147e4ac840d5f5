"""
Execution contexts — separate WHAT (pure logic) from HOW it is observed.

Pure functions describe WHAT happens and return Result[V, E]. An execution
context describes HOW the computation runs: logging, timing, composition.
They are never mixed — divide() knows nothing about logging.

    ctx = LoggingExecutionContext(operation="divide")
    result = ctx.execute(lambda: divide(10, 0))

    # or, on an already computed Result
    result = divide(10, 0).within(ctx)

    # or as a decorator
    @with_context(ctx)
    def halve(x: int) -> Result[int, DivisionFailure]:
        return divide(x, 2)

A computation that RAISES is not a failure, it is a bug. Contexts log it
and let it propagate; they never convert it into a Failure.
"""

from __future__ import annotations

import functools
import logging
import time
from collections.abc import Callable
from typing import Any, Protocol, TypeVar, runtime_checkable

import structlog

from typed_result.failure import FailureKind
from typed_result.result import Failure, Result, Success

V = TypeVar("V")
E = TypeVar("E", bound=FailureKind)

log = structlog.get_logger()


# ──────────────────────── Protocol (Interface) ────────────────────────


@runtime_checkable
class ExecutionContext(Protocol):
    """
    Anything with execute(computation) is an execution context —
    structural typing, no inheritance needed.
    """

    def execute(self, computation: Callable[[], Result[V, E]]) -> Result[V, E]:
        """Execute a Result-returning computation within this context."""
        ...


# ──────────────────────── NoOp (Testing) ────────────────────────


class NoOpExecutionContext:
    """Passthrough context — runs the computation with no wrapper."""

    def execute(self, computation: Callable[[], Result[V, E]]) -> Result[V, E]:
        return computation()


# ──────────────────────── Logging ────────────────────────


class LoggingExecutionContext:
    """
    Logs entry, outcome and duration of a computation.

    Wraps another context (decorator pattern), defaulting to NoOp:

        ctx = LoggingExecutionContext(operation="divide", log_level=logging.DEBUG)
    """

    def __init__(
        self,
        inner: ExecutionContext | None = None,
        operation: str = "unknown",
        log_level: int = logging.INFO,
    ) -> None:
        self._inner = inner or NoOpExecutionContext()
        self._operation = operation
        self._log_level = log_level

    def execute(self, computation: Callable[[], Result[V, E]]) -> Result[V, E]:
        log.log(self._log_level, "execution.started", operation=self._operation)
        start = time.monotonic()

        try:
            result = self._inner.execute(computation)
        except Exception as e:
            log.error(
                "execution.raised",
                operation=self._operation,
                elapsed=round(time.monotonic() - start, 6),
                error=str(e),
            )
            raise

        elapsed = round(time.monotonic() - start, 6)
        match result:
            case Success(_):
                log.log(
                    self._log_level,
                    "execution.completed",
                    operation=self._operation,
                    outcome="SUCCESS",
                    elapsed=elapsed,
                )
            case Failure(err):
                log.log(
                    self._log_level,
                    "execution.completed",
                    operation=self._operation,
                    outcome="FAILURE",
                    failure=err.code,
                    description=err.description,
                    elapsed=elapsed,
                )
        return result


# ──────────────────────── Composable ────────────────────────


class ComposableExecutionContext:
    """
    Compose several contexts into one. The first context is the outermost:

        composed = ComposableExecutionContext(
            LoggingExecutionContext(operation="outer"),
            LoggingExecutionContext(operation="inner"),
        )
    """

    def __init__(self, *contexts: ExecutionContext) -> None:
        if not contexts:
            raise ValueError("At least one execution context is required")
        self._contexts = list(contexts)

    def execute(self, computation: Callable[[], Result[V, E]]) -> Result[V, E]:
        wrapped = computation
        for ctx in reversed(self._contexts):
            prev = wrapped
            wrapped = lambda _ctx=ctx, _prev=prev: _ctx.execute(_prev)  # noqa: E731
        return wrapped()


# ──────────────────────── Decorator Helper ────────────────────────


def with_context(ctx: ExecutionContext) -> Callable:
    """Decorator running every call of a Result-returning function inside ``ctx``."""

    def decorator(fn: Callable[..., Result[V, E]]) -> Callable[..., Result[V, E]]:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Result[V, E]:
            return ctx.execute(lambda: fn(*args, **kwargs))

        return wrapper

    return decorator
