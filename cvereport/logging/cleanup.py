"""Session log rotation — remove oldest session directories."""

from __future__ import annotations

import shutil
from pathlib import Path


def cleanup_old_sessions(log_dir: Path, max_sessions: int) -> None:
    """Delete oldest session directories if count exceeds *max_sessions*.

    Directories are named ``YYYYMMDD_HHMMSS_<cve>`` so alphabetical sort
    equals chronological order.
    """
    if not log_dir.is_dir():
        return

    dirs = sorted(
        (d for d in log_dir.iterdir() if d.is_dir()),
        key=lambda d: d.name,
    )

    if len(dirs) <= max_sessions:
        return

    for d in dirs[: len(dirs) - max_sessions]:
        shutil.rmtree(d, ignore_errors=True)
