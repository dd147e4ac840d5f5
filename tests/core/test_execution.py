"""Tests for ExecutionContext implementations."""

from __future__ import annotations

import logging

import pytest
from structlog.testing import capture_logs

from typed_result import (
    ComposableExecutionContext,
    ExecutionContext,
    Failure,
    FailureKind,
    LoggingExecutionContext,
    NoOpExecutionContext,
    Result,
    Success,
    with_context,
)


class Oops(FailureKind):
    BROKEN = ("broken", "Something broke.")


class TestNoOpExecutionContext:
    def test_passthrough(self):
        assert NoOpExecutionContext().execute(lambda: Success(42)) == Success(42)

    def test_passthrough_failure(self):
        assert NoOpExecutionContext().execute(lambda: Failure(Oops.BROKEN)) == Failure(Oops.BROKEN)

    def test_satisfies_protocol(self):
        assert isinstance(NoOpExecutionContext(), ExecutionContext)


class TestLoggingExecutionContext:
    def test_logs_success(self):
        ctx = LoggingExecutionContext(operation="TestOp")
        with capture_logs() as logs:
            result = ctx.execute(lambda: Success("ok"))

        assert result == Success("ok")
        events = [entry["event"] for entry in logs]
        assert events == ["execution.started", "execution.completed"]
        assert logs[1]["operation"] == "TestOp"
        assert logs[1]["outcome"] == "SUCCESS"

    def test_logs_failure_with_description(self):
        ctx = LoggingExecutionContext(operation="TestOp")
        with capture_logs() as logs:
            result = ctx.execute(lambda: Failure(Oops.BROKEN))

        assert result == Failure(Oops.BROKEN)
        completed = logs[-1]
        assert completed["outcome"] == "FAILURE"
        assert completed["failure"] == "broken"
        assert completed["description"] == "Something broke."

    def test_uses_configured_level(self):
        ctx = LoggingExecutionContext(operation="Quiet", log_level=logging.DEBUG)
        with capture_logs() as logs:
            ctx.execute(lambda: Success(1))
        assert {entry["log_level"] for entry in logs} == {"debug"}

    def test_exception_is_logged_and_reraised(self):
        ctx = LoggingExecutionContext(operation="Boom")

        def failing() -> Result[int, Oops]:
            raise RuntimeError("exploded")

        with capture_logs() as logs, pytest.raises(RuntimeError, match="exploded"):
            ctx.execute(failing)

        assert logs[-1]["event"] == "execution.raised"
        assert logs[-1]["log_level"] == "error"

    def test_wraps_inner_context(self):
        ctx = LoggingExecutionContext(inner=NoOpExecutionContext(), operation="Wrapped")
        assert ctx.execute(lambda: Success(99)) == Success(99)

    def test_within(self):
        with capture_logs() as logs:
            result = Success(5).within(LoggingExecutionContext(operation="Within"))
        assert result == Success(5)
        assert logs[-1]["operation"] == "Within"


class TestComposableExecutionContext:
    def test_requires_a_context(self):
        with pytest.raises(ValueError, match="At least one"):
            ComposableExecutionContext()

    def test_first_context_is_outermost(self):
        composed = ComposableExecutionContext(
            LoggingExecutionContext(operation="outer"),
            LoggingExecutionContext(operation="inner"),
        )
        with capture_logs() as logs:
            result = composed.execute(lambda: Success(1))

        assert result == Success(1)
        assert [(e["event"], e["operation"]) for e in logs] == [
            ("execution.started", "outer"),
            ("execution.started", "inner"),
            ("execution.completed", "inner"),
            ("execution.completed", "outer"),
        ]


class TestWithContext:
    def test_decorated_function_runs_in_context(self):
        @with_context(LoggingExecutionContext(operation="Decorated"))
        def halve(x: int) -> Result[int, Oops]:
            """Halve even numbers."""
            return Success(x // 2) if x % 2 == 0 else Failure(Oops.BROKEN)

        with capture_logs() as logs:
            assert halve(4) == Success(2)
            assert halve(3) == Failure(Oops.BROKEN)

        assert halve.__name__ == "halve"
        assert halve.__doc__ == "Halve even numbers."
        assert sum(1 for e in logs if e["event"] == "execution.completed") == 2
