"""Background to foreground handoff.

Runs producer functions on a serial background worker and delivers their
results to a designated foreground asyncio event loop.
"""
from __future__ import annotations

import asyncio
from collections.abc import Callable
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Any, TypeVar

from fp_utils.exceptions import DispatcherClosedError, InvalidArgumentError
from fp_utils.shared.config import Settings, get_settings
from fp_utils.shared.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class Dispatcher:
    """Two-context handoff between a background worker and a foreground loop.

    Each ``handoff`` is fire-and-forget: no return value, no cancellation and
    no ordering guarantee relative to other handoffs beyond what the serial
    worker provides. A producer has no error channel; to propagate failure
    it should return a Result.

    Example:
        with Dispatcher(asyncio.get_running_loop()) as dispatcher:
            dispatcher.handoff(
                lambda: attempt(load_profile, user_id),
                render_profile,
            )
    """

    def __init__(
        self,
        loop: asyncio.AbstractEventLoop,
        executor: Executor | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize dispatcher.

        Args:
            loop: Foreground event loop that consumers run on
            executor: Background executor; a single-worker pool is created
                and owned by the dispatcher when omitted
            settings: Settings override
        """
        self._settings = settings or get_settings()
        self._loop = loop
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=1,
            thread_name_prefix=self._settings.dispatch_thread_name_prefix,
        )
        self._closed = False

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        """Foreground event loop."""
        return self._loop

    @property
    def closed(self) -> bool:
        return self._closed

    def handoff(self, producer: Callable[[], T], consumer: Callable[[T], Any]) -> None:
        """Run ``producer`` in the background, then ``consumer`` on the loop.

        Args:
            producer: Zero-argument function run on the background worker
            consumer: Receives the producer's return value on the loop

        Raises:
            DispatcherClosedError: If the dispatcher or its executor has been
                shut down
        """
        if self._closed:
            raise DispatcherClosedError()

        try:
            future = self._executor.submit(producer)
        except RuntimeError as e:
            # Executor shut down concurrently or by its owner
            raise DispatcherClosedError() from e
        future.add_done_callback(self._deliver_to(consumer))
        logger.debug(
            "Handoff submitted",
            producer=getattr(producer, "__qualname__", repr(producer)),
        )

    def delay(self, seconds: float, callback: Callable[[], Any]) -> None:
        """Run ``callback`` on the loop after ``seconds``.

        Safe to call from any thread.

        Raises:
            InvalidArgumentError: If ``seconds`` is negative
        """
        if seconds < 0:
            raise InvalidArgumentError("seconds", "must not be negative", seconds)
        self._loop.call_soon_threadsafe(self._loop.call_later, seconds, callback)

    def close(self, wait: bool | None = None) -> None:
        """Stop accepting handoffs and shut down an owned executor.

        Args:
            wait: Wait for pending producers; defaults to settings
        """
        if self._closed:
            return
        self._closed = True

        if self._owns_executor:
            if wait is None:
                wait = self._settings.dispatch_shutdown_wait
            self._executor.shutdown(wait=wait)
        logger.debug("Dispatcher closed")

    def __enter__(self) -> Dispatcher:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _deliver_to(self, consumer: Callable[[T], Any]) -> Callable[[Future[T]], None]:
        def on_done(future: Future[T]) -> None:
            if future.cancelled():
                logger.warning("Handoff cancelled before it ran, dropping it")
                return

            error = future.exception()
            if error is not None:
                logger.error(
                    "Background producer failed",
                    error=str(error),
                    error_type=type(error).__name__,
                    exc_info=error,
                )
                return

            try:
                self._loop.call_soon_threadsafe(consumer, future.result())
            except RuntimeError:
                # Raised by a closed loop
                logger.warning("Foreground loop closed, dropping handoff")

        return on_done
