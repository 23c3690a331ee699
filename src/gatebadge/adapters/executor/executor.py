"""Executor adapters implementing ExecutorPort."""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Callable


class SynchronousExecutor:
    """Runs each submitted task immediately in the calling thread."""

    def submit(
        self,
        fn: Callable[..., object],
        *args: object,
        **kwargs: object,
    ) -> Future[object]:
        """Run fn now and return a future that is already resolved."""
        future: Future[object] = Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except Exception as e:
            future.set_exception(e)
        return future

    def __enter__(self) -> SynchronousExecutor:
        return self

    def __exit__(
        self, exc_type: object, exc_val: object, exc_tb: object
    ) -> object | None:
        return None


class ThreadPoolExecutorAdapter:
    """Thread pool executor whose workers are named after badge rendering.

    A new pool is started each time the adapter is entered, so one adapter
    can serve several warm-up runs.
    """

    def __init__(
        self, max_workers: int | None = None, thread_name_prefix: str = "gatebadge"
    ) -> None:
        """Initialize the adapter.

        Args:
            max_workers: Maximum number of worker threads. None uses default.
            thread_name_prefix: Prefix of worker thread names.
        """
        self.max_workers = max_workers
        self.thread_name_prefix = thread_name_prefix
        self._executor: ThreadPoolExecutor | None = None

    def submit(
        self,
        fn: Callable[..., object],
        *args: object,
        **kwargs: object,
    ) -> Future[object]:
        """Submit fn to the running pool.

        Raises:
            RuntimeError: If called outside a ``with`` block.
        """
        if self._executor is None:
            raise RuntimeError("ThreadPoolExecutorAdapter must be entered first")
        return self._executor.submit(fn, *args, **kwargs)

    def __enter__(self) -> ThreadPoolExecutorAdapter:
        self._executor = ThreadPoolExecutor(
            max_workers=self.max_workers,
            thread_name_prefix=self.thread_name_prefix,
        )
        return self

    def __exit__(
        self, exc_type: object, exc_val: object, exc_tb: object
    ) -> object | None:
        executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=True)
        return None
