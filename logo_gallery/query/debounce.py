"""Coalescing of rapid updates into a single delayed call."""

from __future__ import annotations

import logging
from threading import Lock, Timer
from typing import Any, Callable

from ..io.models import DEBOUNCE_SECONDS

logger = logging.getLogger(__name__)


class Debouncer:
    """Delay *callback* until *wait* seconds pass without a new call.

    Only the arguments of the latest call are delivered. A pending call can be
    dropped with :meth:`cancel` or run immediately with :meth:`flush`.
    """

    def __init__(self, callback: Callable[..., Any], wait: float = DEBOUNCE_SECONDS) -> None:
        if wait < 0:
            raise ValueError("wait must be non-negative")
        self._callback = callback
        self._wait = wait
        self._lock = Lock()
        self._timer: Timer | None = None
        self._generation = 0
        self._args: tuple[Any, ...] = ()
        self._kwargs: dict[str, Any] = {}

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._args = args
            self._kwargs = kwargs
            self._generation += 1
            timer = Timer(self._wait, self._fire, args=(self._generation,))
            timer.daemon = True
            self._timer = timer
            timer.start()

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def cancel(self) -> None:
        """Drop any scheduled call."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                logger.debug("Cancelled pending debounced call")
            self._timer = None
            self._generation += 1

    def flush(self) -> None:
        """Run a scheduled call now instead of waiting for the timer."""
        with self._lock:
            if self._timer is None:
                return
            self._timer.cancel()
            self._timer = None
            self._generation += 1
            args, kwargs = self._args, self._kwargs
        self._callback(*args, **kwargs)

    def _fire(self, generation: int) -> None:
        # A superseded timer may already be running when it gets cancelled.
        with self._lock:
            if self._timer is None or generation != self._generation:
                return
            self._timer = None
            args, kwargs = self._args, self._kwargs
        self._callback(*args, **kwargs)
