"""
Tests for the completion bridge.

Every delivery path must invoke its handler exactly once, with a fully
formed Result, never with None.
"""

from __future__ import annotations

import asyncio
import threading
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock

import pytest
from structlog.testing import capture_logs

from typed_result import (
    Completion,
    CompletionAlreadyDeliveredError,
    CompletionNotDeliveredError,
    Failure,
    FailureKind,
    Success,
    complete_on,
    from_completion,
    to_completion,
    wait_for_completion,
)


class Oops(FailureKind):
    BROKEN = ("broken", "Something broke.")


class TestCompletion:
    def test_delivers_once(self) -> None:
        handler = MagicMock()
        completion = Completion(handler)

        completion(Success(1))

        handler.assert_called_once_with(Success(1))
        assert completion.delivered

    def test_second_delivery_rejected(self) -> None:
        """
        GIVEN a completion that already delivered
        WHEN it is invoked again
        THEN it raises and the handler is not called a second time.
        """
        handler = MagicMock()
        completion = Completion(handler)
        completion(Failure(Oops.BROKEN))

        with pytest.raises(CompletionAlreadyDeliveredError):
            completion(Success(2))

        handler.assert_called_once_with(Failure(Oops.BROKEN))

    def test_none_rejected(self) -> None:
        handler = MagicMock()
        completion = Completion(handler)

        with pytest.raises(TypeError, match="Success or Failure"):
            completion(None)  # type: ignore[arg-type]

        handler.assert_not_called()
        assert not completion.delivered

    def test_concurrent_deliveries_reach_handler_once(self) -> None:
        handler = MagicMock()
        completion = Completion(handler)
        rejected = []
        barrier = threading.Barrier(8)

        def deliver(n: int) -> None:
            barrier.wait()
            try:
                completion(Success(n))
            except CompletionAlreadyDeliveredError:
                rejected.append(n)

        threads = [threading.Thread(target=deliver, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert handler.call_count == 1
        assert len(rejected) == 7


class TestToCompletion:
    def test_passes_identical_result(self) -> None:
        result = Success(2)
        handler = MagicMock()

        to_completion(result, handler)

        handler.assert_called_once()
        assert handler.call_args.args[0] is result

    def test_method_form(self) -> None:
        handler = MagicMock()
        Failure(Oops.BROKEN).to_completion(handler)
        handler.assert_called_once_with(Failure(Oops.BROKEN))


class TestFromCompletion:
    def test_returns_delivered_result(self) -> None:
        assert from_completion(lambda done: done(Success(5))) == Success(5)

    def test_operation_that_never_delivers(self) -> None:
        with pytest.raises(CompletionNotDeliveredError):
            from_completion(lambda done: None)

    def test_operation_that_delivers_twice(self) -> None:
        def twice(done) -> None:
            done(Success(1))
            done(Success(2))

        with pytest.raises(CompletionAlreadyDeliveredError):
            from_completion(twice)


class TestWaitForCompletion:
    @pytest.mark.asyncio
    async def test_same_thread_delivery(self) -> None:
        result = await wait_for_completion(lambda done: done(Failure(Oops.BROKEN)))
        assert result == Failure(Oops.BROKEN)

    @pytest.mark.asyncio
    async def test_delivery_from_another_thread(self) -> None:
        def start(done) -> None:
            threading.Timer(0.01, done, args=(Success("late"),)).start()

        result = await asyncio.wait_for(wait_for_completion(start), timeout=5)
        assert result == Success("late")


class TestCompleteOn:
    def test_delivers_on_worker_thread(self) -> None:
        seen = []
        main_thread = threading.get_ident()

        def handler(result) -> None:
            seen.append((result, threading.get_ident()))

        with ThreadPoolExecutor(max_workers=1) as executor:
            future = complete_on(executor, lambda: Success(3), handler)
            future.result(timeout=5)

        assert len(seen) == 1
        assert seen[0][0] == Success(3)
        assert seen[0][1] != main_thread

    def test_operation_raising_is_not_delivered(self) -> None:
        handler = MagicMock()

        def broken():
            raise RuntimeError("bug")

        with capture_logs() as logs, ThreadPoolExecutor(max_workers=1) as executor:
            future = complete_on(executor, broken, handler)
            with pytest.raises(RuntimeError, match="bug"):
                future.result(timeout=5)

        handler.assert_not_called()
        assert any(entry["event"] == "completion.operation_raised" for entry in logs)

    def test_operation_returning_none_is_logged_and_not_delivered(self) -> None:
        """
        GIVEN an operation that returns None instead of a Result
        WHEN it runs through complete_on
        THEN the handler is not called, the error is logged, and the Future raises.
        """
        handler = MagicMock()

        with capture_logs() as logs, ThreadPoolExecutor(max_workers=1) as executor:
            future = complete_on(executor, lambda: None, handler)
            with pytest.raises(TypeError, match="Success or Failure"):
                future.result(timeout=5)

        handler.assert_not_called()
        returned = [e for e in logs if e["event"] == "completion.operation_returned_non_result"]
        assert len(returned) == 1
        assert returned[0]["returned"] == "NoneType"
        assert returned[0]["log_level"] == "error"


class TestWaitForCompletionCancellation:
    @pytest.mark.asyncio
    async def test_late_delivery_after_cancel_is_dropped(self) -> None:
        captured = []
        loop = asyncio.get_running_loop()
        errors = []
        loop.set_exception_handler(lambda _loop, context: errors.append(context))

        task = asyncio.create_task(wait_for_completion(captured.append))
        await asyncio.sleep(0)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        try:
            captured[0](Success("late"))
            await asyncio.sleep(0.01)
        finally:
            loop.set_exception_handler(None)

        assert errors == []
