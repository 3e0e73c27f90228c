"""Report file writing — output directory naming and atomic writes."""

from __future__ import annotations

import os
import re
from datetime import UTC, datetime
from pathlib import Path


def _safe_dirname(name: str) -> str:
    """Sanitize a report id for use as directory name."""
    return re.sub(r"[^\w.\-]", "_", name)[:80]


def report_dir_for(cve_id: str, base: Path, *, timestamped: bool = False) -> Path:
    """``base/<cve_id>`` or ``base/<cve_id>_YYYYMMDD_HHMMSS``."""
    dirname = _safe_dirname(cve_id)
    if timestamped:
        ts = datetime.now(tz=UTC).strftime("%Y%m%d_%H%M%S")
        dirname = f"{dirname}_{ts}"
    return base / dirname


def write_atomic(target: Path, content: str) -> Path:
    """Atomic write: tmp file then os.replace."""
    target.parent.mkdir(parents=True, exist_ok=True)
    tmp = target.parent / f".{target.name}.tmp"
    tmp.write_text(content, encoding="utf-8")
    os.replace(tmp, target)
    return target
