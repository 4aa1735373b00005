"""Tests for the bounded fan-out helpers."""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from recipe_crawler.concurrency import CancelScope, gather_results


class TestCancelScope:
    def test_fresh_scope_is_live(self) -> None:
        scope = CancelScope()
        assert scope.cancelled is False
        assert scope.remaining() is None

    def test_cancel_sets_flag(self) -> None:
        scope = CancelScope()
        scope.cancel()
        assert scope.cancelled is True

    def test_external_event(self) -> None:
        event = threading.Event()
        scope = CancelScope(event)
        event.set()
        assert scope.cancelled is True

    def test_deadline(self) -> None:
        scope = CancelScope(timeout=0.05)
        assert scope.cancelled is False
        time.sleep(0.1)
        assert scope.cancelled is True
        assert scope.remaining() == 0.0


class TestGatherResults:
    def test_collects_every_result(self) -> None:
        with ThreadPoolExecutor(max_workers=4) as pool:
            pairs = gather_results(pool, lambda n: n * n, range(6))
        assert sorted(pairs) == [(n, n * n) for n in range(6)]

    def test_cancelled_scope_submits_nothing(self) -> None:
        calls = []
        scope = CancelScope()
        scope.cancel()
        with ThreadPoolExecutor(max_workers=2) as pool:
            assert gather_results(pool, calls.append, [1, 2, 3], scope) == []
        assert calls == []

    def test_cancellation_stops_waiting(self) -> None:
        release = threading.Event()
        scope = CancelScope()

        def work(n: int) -> int:
            if n == 0:
                scope.cancel()
                return n
            release.wait(5)
            return n

        with ThreadPoolExecutor(max_workers=2) as pool:
            started = time.monotonic()
            pairs = gather_results(pool, work, range(4), scope)
            elapsed = time.monotonic() - started
            release.set()

        assert elapsed < 2
        assert len(pairs) < 4

    def test_worker_exception_propagates(self) -> None:
        def boom(_n: int) -> int:
            raise RuntimeError("bug")

        with ThreadPoolExecutor(max_workers=2) as pool:
            with pytest.raises(RuntimeError):
                gather_results(pool, boom, [1])
