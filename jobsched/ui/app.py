"""Job schedule TUI — main App class."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
import logging

from textual import events
from textual.app import App
from textual.binding import Binding
from textual.screen import Screen

from ..models import JobNumber
from ..navigation import (
    ConfirmClicked,
    EnterPressed,
    EscapePressed,
    IdentifierEntry,
    InputEvent,
    NavigationController,
    ScheduleView,
    Screen as NavScreen,
)
from ..settings import SETTINGS
from .css import APP_CSS
from .screens import JobNumberScreen, ScheduleScreen

logger = logging.getLogger(__name__)


def build_screen(screen: NavScreen) -> Screen:
    """Create the Textual screen that renders a navigation screen."""
    if isinstance(screen, IdentifierEntry):
        return JobNumberScreen(screen)
    if isinstance(screen, ScheduleView):
        return ScheduleScreen(screen)
    raise TypeError(f"unknown screen: {screen!r}")


class JobScheduleApp(App):
    DEFAULT_CSS = APP_CSS
    ENABLE_COMMAND_PALETTE = False
    BINDINGS = [
        Binding("escape", "escape", "Back / Clear / Quit", priority=True),
    ]

    def __init__(
        self,
        job_number: JobNumber | None = None,
        *,
        title: str | None = None,
        theme: str | None = None,
    ) -> None:
        super().__init__()
        self.controller = NavigationController.from_job_number(job_number)
        self.title = title or SETTINGS.title
        self._theme_name = theme or SETTINGS.theme

    def on_mount(self) -> None:
        if self._theme_name in self.available_themes:
            self.theme = self._theme_name
        else:
            logger.warning("Unknown theme %r, keeping default", self._theme_name)
        logger.info("Starting on %r", self.controller.screen)
        self.push_screen(build_screen(self.controller.screen))

    def on_app_focus(self, event: events.AppFocus | None = None) -> None:
        """Restore input focus when the terminal regains focus."""
        if isinstance(self.screen, JobNumberScreen):
            self.screen.focus_input()

    def action_escape(self) -> None:
        self.dispatch_events([EscapePressed()])

    def dispatch_events(self, tick: Sequence[InputEvent]) -> None:
        """Run one navigation tick and bring the visible screen in line."""
        before = self.controller.screen
        after = self.controller.handle_tick(tick)

        if self.controller.exit_requested:
            logger.info("Exiting")
            self.exit()
            return

        if after is before:
            return

        if isinstance(after, IdentifierEntry) and isinstance(before, IdentifierEntry):
            error = ""
            if after.raw_input and any(
                isinstance(event, (EnterPressed, ConfirmClicked)) for event in tick
            ):
                error = f"Not a valid job number: {after.raw_input}"
            if isinstance(self.screen, JobNumberScreen):
                self.screen.show_entry(after, error)
                return

        self.switch_screen(build_screen(after))


def cmd_app(args: argparse.Namespace | None = None) -> None:
    job_number = getattr(args, "job_number", None) if args is not None else None
    app = JobScheduleApp(job_number)
    app.run()
