"""Executors for detached event emission."""

from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import Future
from typing import Any, Callable, Protocol

logger = logging.getLogger(__name__)


class Dispatcher(Protocol):
    def submit(self, fn: Callable[..., Any], /, *args: Any, **kwargs: Any) -> Future: ...


class ThreadDispatcher:
    """Run every submitted job on its own daemon thread.

    There is no pool, queue or upper bound: each job starts immediately.
    Worker threads are tracked only so a process can drain them with
    :meth:`wait_all` before exiting; jobs cannot be cancelled.
    """

    def __init__(self, name: str = "http-event") -> None:
        self._name = name
        self._lock = threading.Lock()
        self._workers: set[threading.Thread] = set()

    def submit(self, fn: Callable[..., Any], /, *args: Any, **kwargs: Any) -> Future:
        future: Future = Future()
        future.set_running_or_notify_cancel()

        def _run() -> None:
            try:
                try:
                    result = fn(*args, **kwargs)
                except BaseException as exc:
                    future.set_exception(exc)
                else:
                    future.set_result(result)
            finally:
                with self._lock:
                    self._workers.discard(threading.current_thread())

        thread = threading.Thread(target=_run, name=f"{self._name}-worker", daemon=True)
        with self._lock:
            self._workers.add(thread)
        thread.start()
        return future

    def pending(self) -> int:
        with self._lock:
            return len(self._workers)

    def wait_all(self, timeout: float | None = None) -> bool:
        """Join every worker, done callbacks included. Returns False on timeout."""
        deadline = None if timeout is None else time.monotonic() + timeout
        with self._lock:
            workers = list(self._workers)
        for thread in workers:
            remaining = None if deadline is None else max(0.0, deadline - time.monotonic())
            thread.join(remaining)
            if thread.is_alive():
                return False
        return True


def log_failure(future: Future) -> None:
    exc = future.exception()
    if exc is not None:
        logger.warning("async event emission failed: %s", exc, exc_info=exc)
