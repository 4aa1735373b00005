"""Bounded fan-out over a thread pool, with cooperative cancellation.

A :class:`CancelScope` combines a ``threading.Event`` with an optional
wall-clock deadline.  :func:`gather_results` runs a function over a batch of
items on an executor and stops collecting as soon as the scope is cancelled,
cancelling every future that has not started yet.
"""

from __future__ import annotations

import threading
import time
from concurrent.futures import FIRST_COMPLETED, Executor, Future, ThreadPoolExecutor, wait
from typing import Callable, Dict, Iterable, List, Tuple, TypeVar

T = TypeVar("T")
R = TypeVar("R")

# How often (seconds) a waiting loop re-checks the cancellation event.
_POLL_INTERVAL = 0.1


class CancelScope:
    """Cancellation signal shared by every stage of one crawl or collection.

    Args:
        event: External event; setting it cancels the scope.  A private
            event is created when omitted.
        timeout: Seconds from now after which the scope counts as cancelled.
    """

    def __init__(
        self,
        event: threading.Event | None = None,
        timeout: float | None = None,
    ) -> None:
        self._event = event if event is not None else threading.Event()
        self._deadline = time.monotonic() + timeout if timeout is not None else None

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        if self._event.is_set():
            return True
        return self._deadline is not None and time.monotonic() >= self._deadline

    def remaining(self) -> float | None:
        """Seconds left before the deadline, or ``None`` when there is none."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def poll_timeout(self) -> float:
        remaining = self.remaining()
        if remaining is None:
            return _POLL_INTERVAL
        return min(_POLL_INTERVAL, remaining)


def new_executor(max_workers: int) -> ThreadPoolExecutor:
    return ThreadPoolExecutor(max_workers=max(1, max_workers), thread_name_prefix="recipe-crawler")


def shutdown_executor(executor: ThreadPoolExecutor, scope: CancelScope) -> None:
    """Shut *executor* down, abandoning running tasks when *scope* was cancelled."""
    executor.shutdown(wait=not scope.cancelled, cancel_futures=True)


def gather_results(
    executor: Executor,
    fn: Callable[[T], R],
    items: Iterable[T],
    scope: CancelScope | None = None,
) -> List[Tuple[T, R]]:
    """Run *fn* over *items* on *executor* and return ``(item, result)`` pairs.

    Pairs arrive in completion order.  When *scope* is cancelled the pairs
    finished so far are returned and the remaining futures are cancelled.
    Exceptions raised by *fn* propagate to the caller.
    """
    scope = scope or CancelScope()
    if scope.cancelled:
        return []

    futures: Dict[Future, T] = {executor.submit(fn, item): item for item in items}
    pending = set(futures)
    results: List[Tuple[T, R]] = []
    try:
        while pending and not scope.cancelled:
            done, pending = wait(pending, timeout=scope.poll_timeout(), return_when=FIRST_COMPLETED)
            for future in done:
                results.append((futures[future], future.result()))
    finally:
        for future in pending:
            future.cancel()
    return results
