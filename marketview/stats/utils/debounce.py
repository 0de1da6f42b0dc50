"""Debounce primitive: coalesce rapid inputs into the last value.

Each ``submit`` cancels the pending delivery and schedules a new one after
the quiet period. Only the most recent value is ever delivered, queued
intermediate values are dropped. Requires a running asyncio loop.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

from ..core.config import DEFAULT_DEBOUNCE_DELAY

logger = logging.getLogger(__name__)

T = TypeVar("T")

DebouncedCallback = Callable[[T], Awaitable[None]] | Callable[[T], None]

_MISSING = object()


class Debouncer(Generic[T]):
    """Deliver the last submitted value once no new value arrived for ``delay`` seconds."""

    def __init__(self, callback: DebouncedCallback, delay: float = DEFAULT_DEBOUNCE_DELAY) -> None:
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")
        self._callback = callback
        self._delay = delay
        self._task: asyncio.Task[None] | None = None
        self._pending_value: object = _MISSING

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def pending(self) -> bool:
        """Whether a delivery is scheduled."""
        return self._task is not None and not self._task.done()

    def submit(self, value: T) -> None:
        """Schedule ``value`` for delivery, superseding any pending value."""
        self.cancel()
        self._pending_value = value
        self._task = asyncio.get_running_loop().create_task(self._deliver_later(value))

    def cancel(self) -> bool:
        """Drop the pending delivery. Returns True if one was cancelled."""
        task = self._task
        self._task = None
        self._pending_value = _MISSING
        if task is not None and not task.done():
            task.cancel()
            return True
        return False

    async def flush(self) -> bool:
        """Deliver the pending value now instead of waiting. Returns True if delivered.

        Exceptions raised by the callback propagate to the caller.
        """
        value = self._pending_value
        if not self.cancel() or value is _MISSING:
            return False
        await self._invoke(value)  # type: ignore[arg-type]
        return True

    async def _deliver_later(self, value: T) -> None:
        await asyncio.sleep(self._delay)
        # Detach before invoking so a submit from inside the callback is not cancelled with us
        if self._task is asyncio.current_task():
            self._task = None
            self._pending_value = _MISSING
        try:
            await self._invoke(value)
        except Exception:
            # Nothing awaits this task
            logger.exception("debounced_callback_failed", extra={"delay": self._delay})

    async def _invoke(self, value: T) -> None:
        result = self._callback(value)
        if inspect.isawaitable(result):
            await result
