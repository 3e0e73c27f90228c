"""SessionLogger — subscribes to the page EventBus and writes events.jsonl."""

from __future__ import annotations

import asyncio
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from cvereport.events.bus import Event, EventBus
from cvereport.logging.cleanup import cleanup_old_sessions
from cvereport.logging.writer import JsonlWriter


class SessionLogger:
    """Persistent interaction log for one TUI session.

    Creates ``<log_dir>/YYYYMMDD_HHMMSS_<cve>/events.jsonl`` with one JSON
    object per page event. Events emitted before :meth:`open` are buffered.
    """

    def __init__(
        self,
        log_dir: Path,
        cve_id: str,
        bus: EventBus,
        *,
        max_sessions: int = 20,
    ) -> None:
        stamp = datetime.now(UTC).strftime("%Y%m%d_%H%M%S")
        safe = cve_id.replace(":", "_").replace("/", "_")
        self._session_dir = log_dir / f"{stamp}_{safe}"
        self._session_dir.mkdir(parents=True, exist_ok=True)
        cleanup_old_sessions(log_dir, max_sessions)

        self._writer = JsonlWriter(self._session_dir / "events.jsonl")
        self._opened = False
        self._pending: list[dict[str, Any]] = []
        self._lock = asyncio.Lock()
        bus.subscribe_all(self._on_event)

    @property
    def session_dir(self) -> Path:
        return self._session_dir

    async def open(self) -> None:
        await self._writer.open()
        self._opened = True
        async with self._lock:
            pending, self._pending = self._pending, []
            for record in pending:
                await self._writer.write(record)

    async def close(self) -> None:
        async with self._lock:
            await self._writer.close()
        self._opened = False

    async def _on_event(self, event: Event) -> None:
        record = {
            "ts": datetime.now(UTC).isoformat(),
            "event": event.type.value,
            **event.data,
        }
        if not self._opened:
            self._pending.append(record)
            return
        async with self._lock:
            await self._writer.write(record)
