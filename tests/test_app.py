"""Tests for the Textual app's event wiring."""

import inspect
from types import SimpleNamespace

import pytest

from jobsched.models import JobNumber, Schedule
from jobsched.navigation import (
    ConfirmClicked,
    EnterPressed,
    EscapePressed,
    IdentifierEntry,
    NavigationController,
    ScheduleView,
    TextEdited,
)
from jobsched.ui.app import JobScheduleApp, build_screen, cmd_app
from jobsched.ui.screens import JobNumberScreen, ScheduleScreen

from tests.helpers import capture_exit, capture_switch_screen


def _on_screen(monkeypatch, screen) -> None:
    monkeypatch.setattr(JobScheduleApp, "screen", property(lambda self: screen))


def _entry_screen(monkeypatch, entry: IdentifierEntry) -> tuple[JobNumberScreen, list]:
    screen = JobNumberScreen(entry)
    shown: list[tuple[IdentifierEntry, str]] = []
    monkeypatch.setattr(
        screen, "show_entry", lambda e, error="": shown.append((e, error))
    )
    return screen, shown


def test_escape_is_a_priority_binding() -> None:
    bindings = {binding.key: binding for binding in JobScheduleApp.BINDINGS}
    assert bindings["escape"].action == "escape"
    assert bindings["escape"].priority is True


def test_command_palette_disabled() -> None:
    assert JobScheduleApp.ENABLE_COMMAND_PALETTE is False


def test_app_starts_on_entry_without_job_number() -> None:
    app = JobScheduleApp()
    assert app.controller.screen == IdentifierEntry("")


def test_app_starts_on_schedule_with_job_number() -> None:
    app = JobScheduleApp(JobNumber(99))
    assert app.controller.screen == ScheduleView(JobNumber(99), Schedule.default())


def test_title_defaults_from_settings_and_can_be_overridden() -> None:
    assert JobScheduleApp().title == "Job Schedule"
    assert JobScheduleApp(title="Bay 3").title == "Bay 3"


def test_build_screen_matches_variant() -> None:
    entry = IdentifierEntry("12")
    view = ScheduleView(JobNumber(12))

    entry_screen = build_screen(entry)
    view_screen = build_screen(view)

    assert isinstance(entry_screen, JobNumberScreen)
    assert entry_screen.entry is entry
    assert isinstance(view_screen, ScheduleScreen)
    assert view_screen.schedule_view is view

    with pytest.raises(TypeError):
        build_screen("nope")  # type: ignore[arg-type]


def test_escape_on_empty_entry_exits(monkeypatch) -> None:
    app = JobScheduleApp()
    exits = capture_exit(app, monkeypatch)
    switched = capture_switch_screen(app, monkeypatch)

    app.action_escape()

    assert exits == [True]
    assert switched == []


def test_escape_on_non_empty_entry_clears_field(monkeypatch) -> None:
    app = JobScheduleApp()
    app.controller = NavigationController(IdentifierEntry("17"))
    screen, shown = _entry_screen(monkeypatch, IdentifierEntry("17"))
    _on_screen(monkeypatch, screen)
    exits = capture_exit(app, monkeypatch)
    switched = capture_switch_screen(app, monkeypatch)

    app.action_escape()

    assert shown == [(IdentifierEntry(""), "")]
    assert exits == []
    assert switched == []


def test_escape_from_schedule_switches_to_empty_entry(monkeypatch) -> None:
    app = JobScheduleApp(JobNumber(4821))
    _on_screen(monkeypatch, ScheduleScreen(app.controller.screen))
    switched = capture_switch_screen(app, monkeypatch)
    exits = capture_exit(app, monkeypatch)

    app.action_escape()

    assert exits == []
    assert len(switched) == 1
    assert isinstance(switched[0], JobNumberScreen)
    assert switched[0].entry == IdentifierEntry("")


def test_text_change_is_sanitized_into_field(monkeypatch) -> None:
    app = JobScheduleApp()
    screen, shown = _entry_screen(monkeypatch, IdentifierEntry(""))
    _on_screen(monkeypatch, screen)
    switched = capture_switch_screen(app, monkeypatch)

    app.dispatch_events([TextEdited("12a")])

    assert shown == [(IdentifierEntry("12"), "")]
    assert switched == []
    assert app.controller.screen == IdentifierEntry("12")


def test_valid_confirm_switches_to_schedule(monkeypatch) -> None:
    app = JobScheduleApp()
    app.controller = NavigationController(IdentifierEntry("4821"))
    switched = capture_switch_screen(app, monkeypatch)

    app.dispatch_events([EnterPressed()])

    assert len(switched) == 1
    assert isinstance(switched[0], ScheduleScreen)
    assert switched[0].schedule_view == ScheduleView(JobNumber(4821), Schedule.default())


def test_invalid_confirm_shows_error_and_keeps_input(monkeypatch) -> None:
    app = JobScheduleApp()
    app.controller = NavigationController(IdentifierEntry("99999999999"))
    screen, shown = _entry_screen(monkeypatch, IdentifierEntry("99999999999"))
    _on_screen(monkeypatch, screen)
    switched = capture_switch_screen(app, monkeypatch)

    app.dispatch_events([ConfirmClicked()])

    assert shown == [
        (IdentifierEntry("99999999999"), "Not a valid job number: 99999999999")
    ]
    assert switched == []


def test_empty_confirm_is_silent(monkeypatch) -> None:
    app = JobScheduleApp()
    screen, shown = _entry_screen(monkeypatch, IdentifierEntry(""))
    _on_screen(monkeypatch, screen)
    switched = capture_switch_screen(app, monkeypatch)

    app.dispatch_events([EnterPressed()])

    assert shown == [(IdentifierEntry(""), "")]
    assert switched == []
    assert app.controller.screen == IdentifierEntry("")


def test_schedule_view_ignores_other_input(monkeypatch) -> None:
    app = JobScheduleApp(JobNumber(5))
    switched = capture_switch_screen(app, monkeypatch)
    exits = capture_exit(app, monkeypatch)

    app.dispatch_events([EnterPressed()])

    assert switched == []
    assert exits == []


def test_dispatch_sends_escape_event(monkeypatch) -> None:
    app = JobScheduleApp()
    ticks: list[list] = []
    monkeypatch.setattr(app, "dispatch_events", lambda tick: ticks.append(list(tick)))

    app.action_escape()

    assert ticks == [[EscapePressed()]]


def test_app_focus_restores_input_focus(monkeypatch) -> None:
    app = JobScheduleApp()
    screen = JobNumberScreen(IdentifierEntry())
    focused: list[bool] = []
    monkeypatch.setattr(screen, "focus_input", lambda: focused.append(True))
    _on_screen(monkeypatch, screen)

    app.on_app_focus()

    assert focused == [True]


def test_cmd_app_runs_with_job_number(monkeypatch) -> None:
    started: list[object] = []
    monkeypatch.setattr(JobScheduleApp, "run", lambda self: started.append(self.controller.screen))

    cmd_app(SimpleNamespace(job_number=JobNumber(3)))
    cmd_app(None)

    assert started == [ScheduleView(JobNumber(3)), IdentifierEntry("")]


def test_constructor_annotations_use_union_syntax() -> None:
    params = inspect.signature(JobScheduleApp.__init__).parameters
    assert params["job_number"].annotation == "JobNumber | None"
    assert params["title"].annotation == "str | None"
