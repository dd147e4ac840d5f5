"""
Completion bridge — deliver Results to callback-style completion handlers.

An asynchronous fallible operation reports its outcome by calling a
completion handler with a fully-formed Result:

    def divide_with_completion(x, y, completion):
        completion(divide(x, y))

The contract, enforced by Completion:
  - exactly once: a second delivery raises CompletionAlreadyDeliveredError
  - never absent: delivering None (or anything that is not a Result) raises TypeError
  - one parameter: the Result already distinguishes value from failure, so
    there is no separate optional-error argument

Bridges in both directions:

    to_completion(result, handler)             Result   → callback
    from_completion(start)                     callback → Result (synchronous delivery)
    await wait_for_completion(start)           callback → Result (any thread, asyncio)
    complete_on(executor, operation, handler)  run on a worker, deliver from there
"""

from __future__ import annotations

import asyncio
import threading
from collections.abc import Callable
from concurrent.futures import Executor, Future
from typing import Any, Generic, TypeVar

import structlog

from typed_result.errors import CompletionAlreadyDeliveredError, CompletionNotDeliveredError
from typed_result.failure import FailureKind
from typed_result.result import Failure, Result, Success

V = TypeVar("V")
E = TypeVar("E", bound=FailureKind)

log = structlog.get_logger()

type CompletionHandler[V, E: FailureKind] = Callable[[Result[V, E]], Any]
type StartFn[V, E: FailureKind] = Callable[[CompletionHandler[V, E]], Any]


class Completion(Generic[V, E]):
    """
    Single-shot wrapper around a completion handler.

    Thread-safe: concurrent deliveries race for one lock, exactly one reaches
    the handler, the rest raise CompletionAlreadyDeliveredError.
    """

    def __init__(self, handler: CompletionHandler[V, E]) -> None:
        self._handler = handler
        self._lock = threading.Lock()
        self._delivered = False

    @property
    def delivered(self) -> bool:
        return self._delivered

    def __call__(self, result: Result[V, E]) -> None:
        if not isinstance(result, (Success, Failure)):
            raise TypeError(
                f"Completion requires a Success or Failure, got {type(result).__name__}"
            )
        with self._lock:
            if self._delivered:
                raise CompletionAlreadyDeliveredError(
                    f"Completion already delivered; rejected second result {result!r}"
                )
            self._delivered = True
        self._handler(result)


def to_completion(result: Result[V, E], handler: CompletionHandler[V, E]) -> None:
    """Deliver ``result`` to ``handler`` exactly once."""
    Completion(handler)(result)


def from_completion(start: StartFn[V, E]) -> Result[V, E]:
    """
    Run a callback-style operation that completes synchronously and return
    the Result it delivered.

        result = from_completion(lambda done: divide_with_completion(10, 5, done))

    Raises CompletionNotDeliveredError if ``start`` returns without delivering.
    """
    delivered: list[Result[V, E]] = []
    completion: Completion[V, E] = Completion(delivered.append)
    start(completion)
    if not completion.delivered:
        raise CompletionNotDeliveredError(
            "Operation returned without delivering a result to its completion"
        )
    return delivered[0]


async def wait_for_completion(start: StartFn[V, E]) -> Result[V, E]:
    """
    Await a callback-style operation from asyncio.

    The completion may be invoked from any thread; delivery is marshalled onto
    the running loop. Cancelling the awaiting task does not stop the operation;
    a delivery that arrives afterwards is dropped.
    """
    loop = asyncio.get_running_loop()
    future: asyncio.Future[Result[V, E]] = loop.create_future()

    def _set(result: Result[V, E]) -> None:
        if not future.done():
            future.set_result(result)

    def _resolve(result: Result[V, E]) -> None:
        loop.call_soon_threadsafe(_set, result)

    start(Completion(_resolve))
    return await future


def complete_on(
    executor: Executor,
    operation: Callable[[], Result[V, E]],
    handler: CompletionHandler[V, E],
) -> Future[None]:
    """
    Run ``operation`` on ``executor`` and deliver its Result to ``handler``
    from the worker thread.

    The returned Future resolves once the handler has run. If the operation
    raises, or returns something that is not a Result, that is a bug: it is
    logged and left on the Future, and the handler is not invoked.
    """
    completion: Completion[V, E] = Completion(handler)

    def _run() -> None:
        try:
            result = operation()
        except Exception as e:
            log.error("completion.operation_raised", error=str(e), exc_info=True)
            raise
        if not isinstance(result, (Success, Failure)):
            log.error(
                "completion.operation_returned_non_result",
                returned=type(result).__name__,
            )
        completion(result)

    return executor.submit(_run)
