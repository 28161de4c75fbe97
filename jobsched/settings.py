"""Typed settings loaded from TOML config with env-var overrides."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from importlib import resources
from pathlib import Path

from .config import USER_CONFIG_PATH, resolve_home_path

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _load_default_toml() -> dict:
    """Load the built-in default_config.toml shipped with the package."""
    ref = resources.files("jobsched").joinpath("default_config.toml")
    return tomllib.loads(ref.read_text(encoding="utf-8"))


def _load_user_toml(path: Path = USER_CONFIG_PATH) -> dict:
    """Load user config if it exists and parses, otherwise empty dict."""
    if not path.is_file():
        return {}
    try:
        parsed = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError):
        return {}
    return parsed if isinstance(parsed, dict) else {}


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge override into base (override wins)."""
    merged = dict(base)
    for key, val in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(val, dict):
            merged[key] = _deep_merge(merged[key], val)
        else:
            merged[key] = val
    return merged


# ── Dataclasses ──────────────────────────────────────────────────────


@dataclass
class LogConfig:
    level: str
    file: Path


@dataclass
class Settings:
    title: str
    theme: str
    log: LogConfig


def load_settings(user_path: Path = USER_CONFIG_PATH) -> Settings:
    """Load settings: defaults ← user TOML ← env vars."""
    raw = _deep_merge(_load_default_toml(), _load_user_toml(user_path))

    app = raw.get("app", {})
    logging_cfg = raw.get("logging", {})

    title = os.environ.get("JOBSCHED_TITLE", app.get("title", "Job Schedule"))
    theme = os.environ.get("JOBSCHED_THEME", app.get("theme", "textual-dark"))

    level = str(
        os.environ.get("JOBSCHED_LOG_LEVEL", logging_cfg.get("level", "WARNING"))
    ).upper()
    if level not in LOG_LEVELS:
        level = "WARNING"

    log = LogConfig(
        level=level,
        file=resolve_home_path(
            os.environ.get("JOBSCHED_LOG_FILE", logging_cfg.get("file", "jobsched.log"))
        ),
    )

    return Settings(title=title, theme=theme, log=log)


# Module-level singleton — loaded once on import.
SETTINGS = load_settings()
