"""Lightweight event bus connecting page state cells to their readers."""

from __future__ import annotations

import asyncio
import logging
import time
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

logger = logging.getLogger(__name__)


class EventType(StrEnum):
    SECTION_ACTIVATED = "section_activated"
    STEP_CHANGED = "step_changed"
    MENU_TOGGLED = "menu_toggled"
    INSIGHT_REQUESTED = "insight_requested"
    INSIGHT_RESOLVED = "insight_resolved"
    INSIGHT_CLOSED = "insight_closed"
    INSIGHT_REOPENED = "insight_reopened"


@dataclass
class Event:
    """A single event in the bus."""

    type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: float = field(default_factory=time.monotonic)


class EventBus:
    """Simple pub/sub event bus supporting both sync and async handlers."""

    def __init__(self) -> None:
        self._subscribers: dict[EventType, list[Callable]] = defaultdict(list)

    def subscribe(self, event_type: EventType, handler: Callable[[Event], None]) -> None:
        """Register a handler for an event type."""
        self._subscribers[event_type].append(handler)

    def subscribe_all(self, handler: Callable[[Event], None]) -> None:
        """Register a handler for every event type."""
        for event_type in EventType:
            self.subscribe(event_type, handler)

    def unsubscribe(self, event_type: EventType, handler: Callable[[Event], None]) -> None:
        handlers = self._subscribers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event: Event) -> None:
        """Emit an event synchronously, calling all registered handlers.

        Coroutines returned by async handlers are scheduled on the running
        loop when there is one.
        """
        for handler in list(self._subscribers.get(event.type, [])):
            try:
                result = handler(event)
                if asyncio.iscoroutine(result):
                    _schedule(result)
            except Exception:
                logger.exception("Error in event handler for %s", event.type)

    async def emit_async(self, event: Event) -> None:
        """Emit an event, awaiting any async handlers."""
        for handler in list(self._subscribers.get(event.type, [])):
            try:
                result = handler(event)
                if asyncio.iscoroutine(result):
                    await result
            except Exception:
                logger.exception("Error in async event handler for %s", event.type)


_background: set[asyncio.Task] = set()


def _schedule(coro: Any) -> None:
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        coro.close()
        logger.debug("Dropped async handler: no running event loop")
        return
    task = loop.create_task(coro)
    _background.add(task)
    task.add_done_callback(_finished)


def _finished(task: asyncio.Task) -> None:
    _background.discard(task)
    if not task.cancelled() and task.exception() is not None:
        logger.error("Async event handler failed", exc_info=task.exception())
