"""Persistent structured logging for interactive sessions."""

from __future__ import annotations

from cvereport.logging.session_logger import SessionLogger

__all__ = ["SessionLogger"]
