"""Screens: job number entry and schedule view."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.screen import Screen
from textual.widgets import Button, Input, Label, Static

from ..navigation import (
    ConfirmClicked,
    EnterPressed,
    IdentifierEntry,
    ScheduleView,
    TextEdited,
)
from .css import JOB_NUMBER_CSS, SCHEDULE_CSS

if TYPE_CHECKING:
    from .app import JobScheduleApp


class _JobSchedScreenMixin:
    """Mixin providing typed access to the JobScheduleApp instance."""

    @property
    def jobsched(self) -> JobScheduleApp:
        return self.app  # type: ignore[return-value, attr-defined]


# ── Job number entry ──────────────────────────────────────────────────

class JobNumberScreen(_JobSchedScreenMixin, Screen):
    CSS = JOB_NUMBER_CSS

    def __init__(self, entry: IdentifierEntry) -> None:
        super().__init__()
        self.entry = entry

    def compose(self) -> ComposeResult:
        with Vertical(id="job-number-panel"):
            yield Label("Job Number", id="job-number-heading")
            yield Input(value=self.entry.raw_input, id="job-number-input")
            yield Button(Text("Enter", style="underline"), id="job-number-enter")
            yield Label("", id="job-number-error")

    @property
    def job_input(self) -> Input:
        return self.query_one("#job-number-input", Input)

    def focus_input(self) -> None:
        """Keep keyboard focus locked on the job number field."""
        if not self.is_current:
            return
        try:
            inp = self.job_input
        except NoMatches:
            return
        if self.focused is not inp:
            inp.focus()

    def show_entry(self, entry: IdentifierEntry, error: str = "") -> None:
        """Bring the field in line with the controller's buffer.

        ``error`` replaces the error line; any other update clears it.
        """
        self.entry = entry
        self.query_one("#job-number-error", Label).update(error)
        inp = self.job_input
        if inp.value != entry.raw_input:
            inp.value = entry.raw_input
            inp.cursor_position = len(entry.raw_input)

    def on_mount(self) -> None:
        self.focus_input()

    def on_screen_resume(self) -> None:
        self.focus_input()

    def on_descendant_blur(self, event: events.DescendantBlur) -> None:
        self.call_after_refresh(self.focus_input)

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "job-number-input":
            self.jobsched.dispatch_events([TextEdited(event.value)])

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "job-number-input":
            self.jobsched.dispatch_events([EnterPressed()])

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "job-number-enter":
            self.jobsched.dispatch_events([ConfirmClicked()])


# ── Schedule view ─────────────────────────────────────────────────────

class ScheduleScreen(_JobSchedScreenMixin, Screen):
    CSS = SCHEDULE_CSS

    def __init__(self, view: ScheduleView) -> None:
        super().__init__()
        self.schedule_view = view

    def compose(self) -> ComposeResult:
        with Vertical(id="schedule-panel"):
            yield Label(f"Job #{self.schedule_view.job_number}", id="schedule-job")
            yield Static(
                self.schedule_view.schedule.describe(),
                id="schedule-body",
                markup=False,
            )
            yield Label("Esc: back to job number", id="schedule-hint")
