# DeviceCapabilities/debounce.py

import asyncio
import inspect
import logging
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class Debouncer:
    """
    Runs a callback once input has been quiet for wait_ms.

    Every call cancels the pending one and reschedules with the newest
    arguments. There is no maximum wait, so a steady stream of calls faster
    than wait_ms never fires the callback.

    Coroutine callbacks (e.g. Controller.searchDevices) are run as a task on
    the same loop; the latest task is kept in `task`.
    """

    def __init__(
        self,
        func: Callable[..., Any],
        wait_ms: float,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ):
        self.func = func
        self.wait_ms = wait_ms
        self._loop = loop
        self._handle: Optional[asyncio.TimerHandle] = None
        self.task: Optional[asyncio.Task] = None

    def __call__(self, *args, **kwargs) -> None:
        loop = self._loop or asyncio.get_running_loop()
        if self._handle is not None:
            self._handle.cancel()
        self._handle = loop.call_later(self.wait_ms / 1000, self._fire, loop, args, kwargs)

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def _fire(self, loop: asyncio.AbstractEventLoop, args, kwargs) -> None:
        self._handle = None
        logger.debug(f"Debounced call to {getattr(self.func, '__name__', self.func)}")
        result = self.func(*args, **kwargs)
        if inspect.isawaitable(result):
            self.task = asyncio.ensure_future(result, loop=loop)
            self.task.add_done_callback(self._collect)

    def _collect(self, task: asyncio.Task) -> None:
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error(f"Debounced call to {getattr(self.func, '__name__', self.func)} failed: {error!r}")


def debounce(
    func: Callable[..., Any],
    wait_ms: float,
    loop: Optional[asyncio.AbstractEventLoop] = None,
) -> Debouncer:
    return Debouncer(func, wait_ms, loop=loop)
