"""InsightModal — request state machine behind the AI insight overlay."""

from __future__ import annotations

import asyncio
import html
import logging
from dataclasses import dataclass
from typing import Protocol

from cvereport.events.bus import Event, EventBus, EventType
from cvereport.insight.client import UNKNOWN_ERROR_MESSAGE, InsightError

logger = logging.getLogger(__name__)


class InsightSource(Protocol):
    async def generate(self, prompt: str) -> str: ...


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Pending:
    pass


@dataclass(frozen=True)
class Ready:
    text: str


@dataclass(frozen=True)
class Failed:
    message: str


InsightState = Idle | Pending | Ready | Failed


def state_name(state: InsightState) -> str:
    return type(state).__name__.lower()


def insight_html(state: InsightState) -> str:
    """Modal body markup: escaped text with line breaks as ``<br>``."""
    if isinstance(state, Ready):
        return html.escape(state.text).replace("\n", "<br>")
    if isinstance(state, Failed):
        return f'<p class="insight-error">Error: {html.escape(state.message)}</p>'
    if isinstance(state, Pending):
        return '<p class="insight-loading">Generating insight...</p>'
    return ""


class InsightModal:
    """Overlay visibility plus ``Idle | Pending | Ready | Failed``.

    :meth:`open` returns immediately with the request task. Closing never
    cancels that task; its result still lands in :attr:`state`. When a newer
    request has been issued, an older one's result is dropped.
    """

    def __init__(self, source: InsightSource, *, bus: EventBus | None = None) -> None:
        self._source = source
        self._bus = bus
        self._state: InsightState = Idle()
        self._open = False
        self._generation = 0
        self._current: asyncio.Task[InsightState] | None = None
        self._tasks: set[asyncio.Task[InsightState]] = set()

    @property
    def state(self) -> InsightState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._open

    def open(self, prompt: str) -> asyncio.Task[InsightState]:
        """Show the overlay in ``Pending`` and start one request.

        Must be called from a running event loop.
        """
        loop = asyncio.get_running_loop()
        self._generation += 1
        self._open = True
        self._set_state(Pending())
        self._emit(EventType.INSIGHT_REQUESTED, {"generation": self._generation})
        task = loop.create_task(self._request(prompt, self._generation))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        self._current = task
        return task

    def close(self) -> None:
        self._open = False
        self._emit(EventType.INSIGHT_CLOSED, {"state": state_name(self._state)})

    def reopen(self) -> asyncio.Task[InsightState] | None:
        """Show the overlay again for the latest request without issuing a new one.

        Returns that request's task, or ``None`` when nothing was ever requested.
        """
        if self._current is None:
            return None
        self._open = True
        self._emit(EventType.INSIGHT_REOPENED, {"state": state_name(self._state)})
        return self._current

    async def _request(self, prompt: str, generation: int) -> InsightState:
        result: InsightState
        try:
            result = Ready(await self._source.generate(prompt))
        except InsightError as exc:
            result = Failed(exc.message or UNKNOWN_ERROR_MESSAGE)
        except OSError as exc:
            result = Failed(str(exc).strip() or UNKNOWN_ERROR_MESSAGE)
        except Exception as exc:
            logger.exception("Insight request failed")
            result = Failed(str(exc).strip() or UNKNOWN_ERROR_MESSAGE)

        if generation != self._generation:
            logger.debug("Dropping superseded insight response #%d", generation)
            return result
        self._set_state(result)
        self._emit(EventType.INSIGHT_RESOLVED, {
            "generation": generation,
            "state": state_name(result),
            "visible": self._open,
        })
        return result

    def _set_state(self, state: InsightState) -> None:
        self._state = state

    def _emit(self, event_type: EventType, data: dict) -> None:
        if self._bus is not None:
            self._bus.emit(Event(event_type, data))
