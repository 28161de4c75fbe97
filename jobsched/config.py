"""Global paths: home directory and user config location."""

from __future__ import annotations

import os
from pathlib import Path


def _resolve_dir(raw: str) -> Path:
    return Path(os.path.expanduser(raw)).expanduser()


def _ensure_writable_dir(path: Path, fallback: Path) -> Path:
    """Ensure directory exists, falling back when creation is denied."""
    try:
        path.mkdir(parents=True, exist_ok=True)
        return path
    except OSError:
        fallback.mkdir(parents=True, exist_ok=True)
        return fallback


JOBSCHED_HOME = _ensure_writable_dir(
    _resolve_dir(os.environ.get("JOBSCHED_HOME") or "~/.jobsched"),
    _resolve_dir("/tmp/jobsched"),
)

USER_CONFIG_PATH = JOBSCHED_HOME / "config.toml"


def resolve_home_path(raw: str) -> Path:
    """Resolve ``raw`` against the home directory unless it is absolute."""
    path = _resolve_dir(raw)
    if path.is_absolute():
        return path
    return JOBSCHED_HOME / path
