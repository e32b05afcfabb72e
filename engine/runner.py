"""
runner.py — Background Event Loop
===================================
Flask handles each request on a worker thread, but every SortDriver
lives on one asyncio event loop.  LoopRunner owns that loop on a daemon
thread and is the only bridge between the two worlds:

    runner.call(driver.generate)          # run a plain function on the loop, wait
    runner.submit(driver.start_sorting()) # schedule a coroutine, don't wait

Everything that touches a driver goes through here, so the drivers only
ever see a single thread.
"""

import asyncio
import logging
import threading
from concurrent.futures import Future
from typing import Any, Callable, Coroutine, Optional

logger = logging.getLogger(__name__)


class LoopRunner:
    def __init__(self, name: str = "sort-loop"):
        self._name:   str                               = name
        self._loop:   Optional[asyncio.AbstractEventLoop] = None
        self._thread: Optional[threading.Thread]        = None
        self._ready                                     = threading.Event()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self) -> None:
        if self.is_running:
            return
        self._ready.clear()
        self._thread = threading.Thread(target=self._run, name=self._name, daemon=True)
        self._thread.start()
        self._ready.wait()
        logger.debug("event loop thread %s started", self._name)

    def stop(self, timeout: float = 5.0) -> None:
        if not self.is_running:
            return
        self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join(timeout)
        self._thread = None
        self._loop   = None
        self._ready.clear()

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    # ------------------------------------------------------------------
    # Bridging
    # ------------------------------------------------------------------
    def call(self, fn: Callable[..., Any], *args: Any, timeout: float = 5.0) -> Any:
        """Run a synchronous callable on the loop thread and return its result."""

        async def _invoke() -> Any:
            return fn(*args)

        return self._schedule(_invoke()).result(timeout)

    def submit(self, coro: Coroutine[Any, Any, Any]) -> Future:
        """Schedule a coroutine on the loop; returns a concurrent Future."""
        future = self._schedule(coro)
        future.add_done_callback(self._log_failure)
        return future

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _schedule(self, coro: Coroutine[Any, Any, Any]) -> Future:
        if self._loop is None:
            coro.close()
            raise RuntimeError("LoopRunner is not started; call start() first.")
        return asyncio.run_coroutine_threadsafe(coro, self._loop)

    def _run(self) -> None:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        self._loop = loop
        self._ready.set()
        try:
            loop.run_forever()
        finally:
            loop.close()

    @staticmethod
    def _log_failure(future: Future) -> None:
        if future.cancelled():
            return
        exc = future.exception()
        if exc is not None:
            logger.error("background task failed: %r", exc)
