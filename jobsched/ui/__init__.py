"""Textual front end."""

from .app import JobScheduleApp, cmd_app

__all__ = ["JobScheduleApp", "cmd_app"]
