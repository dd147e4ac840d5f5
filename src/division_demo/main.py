"""
Application entry point — configures logging and runs the demonstration.

Composition root: loads settings, configures structlog, then walks through
the ways a caller consumes fallible operations:

  1. Generic swap of two cells (ints, then strings)
  2. Optional-style parsing bridged into Result
  3. Synchronous divide() consumed with exhaustive match/case
  4. Callback-shaped divide delivered synchronously and from a thread pool

    python -m division_demo.main
"""

from __future__ import annotations

import logging
import sys
from concurrent.futures import ThreadPoolExecutor
from typing import assert_never

import structlog
from typed_result.completion import complete_on, from_completion
from typed_result.execution import LoggingExecutionContext
from typed_result.generics import Ref, swap
from typed_result.result import Failure, Result, Success

from division_demo.arithmetic import divide, divide_with_completion, parse_int
from division_demo.config import DemoSettings
from division_demo.failures import DivisionFailure

log = structlog.get_logger()


def configure_structlog(log_level: str = "INFO", json_logs: bool = False) -> None:
    """
    Configure structlog.

    json_logs=True renders JSON lines (machine-readable); otherwise colored,
    human-readable console output. Unknown level names fall back to INFO.
    """
    renderer = (
        structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def describe(result: Result[int, DivisionFailure]) -> str:
    """Render a division outcome: the quotient, or the failure description."""
    match result:
        case Success(quotient):
            return str(quotient)
        case Failure(reason):
            return reason.description
        case unreachable:
            assert_never(unreachable)


def _demo_swap() -> None:
    some_int, another_int = Ref(3), Ref(107)
    swap(some_int, another_int)
    log.info("demo.swapped", some_int=some_int.value, another_int=another_int.value)

    some_string, another_string = Ref("hello"), Ref("world")
    swap(some_string, another_string)
    log.info(
        "demo.swapped",
        some_string=some_string.value,
        another_string=another_string.value,
    )


def _demo_parsing() -> None:
    number = parse_int("6").unwrap()
    log.info("demo.parsed", number=number)
    parse_int("not a number").peek_failure(
        lambda reason: log.info("demo.parse_failed", failure=reason.code)
    )


def _demo_sync(dividend: int, divisors: list[int]) -> list[Result[int, DivisionFailure]]:
    ctx = LoggingExecutionContext(operation="divide", log_level=logging.DEBUG)
    results = []
    for divisor in divisors:
        result = ctx.execute(lambda d=divisor: divide(dividend, d))
        match result:
            case Success(quotient):
                log.info("demo.quotient", dividend=dividend, divisor=divisor, quotient=quotient)
            case Failure(reason):
                log.warning(
                    "demo.division_failed",
                    dividend=dividend,
                    divisor=divisor,
                    description=reason.description,
                )
            case unreachable:
                assert_never(unreachable)
        results.append(result)
    return results


def _demo_completions(dividend: int, divisors: list[int], worker_threads: int) -> None:
    for divisor in divisors:
        result = from_completion(lambda done, d=divisor: divide_with_completion(dividend, d, done))
        log.info("demo.completed_inline", divisor=divisor, outcome=describe(result))

    delivered: list[Result[int, DivisionFailure]] = []

    def _on_complete(result: Result[int, DivisionFailure]) -> None:
        log.info("demo.completed_on_worker", outcome=describe(result))
        delivered.append(result)

    with ThreadPoolExecutor(max_workers=worker_threads) as executor:
        futures = [
            complete_on(executor, lambda d=divisor: divide(dividend, d), _on_complete)
            for divisor in divisors
        ]
    for future in futures:
        future.result()
    log.info("demo.completions_delivered", count=len(delivered))


def run_demo(settings: DemoSettings) -> list[Result[int, DivisionFailure]]:
    """Run every demonstration step; returns the synchronous division results."""
    _demo_swap()
    _demo_parsing()
    results = _demo_sync(settings.dividend, settings.divisors)
    _demo_completions(settings.dividend, settings.divisors, settings.worker_threads)
    return results


def main() -> None:
    """Load settings, configure logging and run the demonstration."""
    try:
        settings = DemoSettings()
    except Exception as e:
        print(f"FATAL: Configuration error — {e}", file=sys.stderr)  # noqa: T201
        sys.exit(1)

    configure_structlog(settings.log_level, settings.json_logs)
    log.info("app.starting", dividend=settings.dividend, divisors=settings.divisors)

    results = run_demo(settings)

    failures = sum(1 for r in results if r.is_failure())
    log.info("app.finished", divisions=len(results), failures=failures)


if __name__ == "__main__":
    main()
