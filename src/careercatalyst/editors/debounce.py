"""Cancel-and-reschedule timer used by editors to batch keystrokes."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_DELAY = 0.3


class Debouncer:
    """Runs ``callback`` once input has been quiet for ``delay`` seconds.

    Every :meth:`schedule` call drops the pending commit and arms a new one,
    so only the last call inside the window reaches the callback. There is no
    flush. Must be used from a running event loop.
    """

    def __init__(self, callback: Callable[..., Any], delay: float = DEFAULT_DELAY):
        self.callback = callback
        self.delay = delay
        self._handle: asyncio.TimerHandle | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def schedule(self, *args: Any) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire, args)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, args: tuple) -> None:
        self._handle = None
        logger.debug("Debounce window elapsed, committing")
        self.callback(*args)
