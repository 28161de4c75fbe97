"""Shared test helpers."""

from __future__ import annotations

from typing import Any


def capture_switch_screen(app: Any, monkeypatch: Any) -> list[Any]:
    """Patch app.switch_screen and return the screens it was given."""
    switched: list[Any] = []
    monkeypatch.setattr(app, "switch_screen", lambda screen: switched.append(screen))
    return switched


def capture_exit(app: Any, monkeypatch: Any) -> list[bool]:
    """Patch app.exit and return one entry per call."""
    exits: list[bool] = []
    monkeypatch.setattr(app, "exit", lambda *_args, **_kwargs: exits.append(True))
    return exits
