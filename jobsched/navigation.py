"""Navigation state machine: the live screen and how input events move it.

Exactly one screen is live at a time. Each batch of input events the UI
delivers is one tick: escape is checked first and pre-empts everything else,
then the remaining events go to the active screen. A successful confirm on
the entry screen swaps in the schedule view before the next tick.

Escape is two-stage on the entry screen: the first press clears a non-empty
field, the second (on an empty field) quits.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
import logging
from typing import Optional, Union

from .models import JobNumber, Schedule

logger = logging.getLogger(__name__)

_ASCII_DIGITS = frozenset("0123456789")


# ── Screens ──────────────────────────────────────────────────────────


@dataclass
class IdentifierEntry:
    raw_input: str = ""
    parsed: Optional[JobNumber] = None  # set only by a successful confirm


@dataclass(frozen=True)
class ScheduleView:
    job_number: JobNumber
    schedule: Schedule = field(default_factory=Schedule.default)


Screen = Union[IdentifierEntry, ScheduleView]


class Quit:
    """Termination signal returned in place of a screen."""

    _instance: Optional[Quit] = None

    def __new__(cls) -> Quit:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "QUIT"


QUIT = Quit()


# ── Input events ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class TextInserted:
    """Characters typed at the end of the field."""
    text: str


@dataclass(frozen=True)
class TextEdited:
    """The runtime's new whole-field value (paste, backspace, mid-field edit)."""
    value: str


@dataclass(frozen=True)
class EscapePressed:
    pass


@dataclass(frozen=True)
class EnterPressed:
    pass


@dataclass(frozen=True)
class ConfirmClicked:
    pass


InputEvent = Union[TextInserted, TextEdited, EscapePressed, EnterPressed, ConfirmClicked]

_CONFIRM_EVENTS = (EnterPressed, ConfirmClicked)


# ── Per-screen updates ───────────────────────────────────────────────


def sanitize(text: str) -> str:
    """Drop every character that is not an ASCII decimal digit."""
    return "".join(ch for ch in text if ch in _ASCII_DIGITS)


def update_entry(entry: IdentifierEntry, events: Iterable[InputEvent]) -> IdentifierEntry:
    """Apply one tick of events to the entry screen.

    Text events are applied in order and the buffer is re-sanitized after
    each. The first confirm event parses the buffer once; later confirms in
    the same tick are ignored. A failed parse leaves the buffer as typed.
    """
    raw = entry.raw_input
    parsed: Optional[JobNumber] = None
    confirmed = False

    for event in events:
        if isinstance(event, TextInserted):
            raw = sanitize(raw + event.text)
        elif isinstance(event, TextEdited):
            raw = sanitize(event.value)
        elif isinstance(event, _CONFIRM_EVENTS) and not confirmed:
            confirmed = True
            parsed = JobNumber.parse(raw)
            if parsed is None and raw:
                logger.info("Rejected job number %r", raw)

    return IdentifierEntry(raw_input=raw, parsed=parsed)


def update_view(view: ScheduleView, events: Iterable[InputEvent]) -> ScheduleView:
    """The schedule view has no transitions of its own."""
    return view


def _escape(screen: Screen) -> Union[Screen, Quit]:
    if isinstance(screen, ScheduleView):
        return IdentifierEntry()
    if isinstance(screen, IdentifierEntry):
        if screen.raw_input:
            return IdentifierEntry()
        return QUIT
    raise TypeError(f"unknown screen: {screen!r}")


def handle_tick(screen: Screen, events: Iterable[InputEvent]) -> Union[Screen, Quit]:
    """Compute the screen that is live after one tick of ``events``."""
    events = list(events)
    if any(isinstance(event, EscapePressed) for event in events):
        return _escape(screen)

    if isinstance(screen, IdentifierEntry):
        entry = update_entry(screen, events)
        if entry.parsed is not None:
            return ScheduleView(entry.parsed, Schedule.default())
        return entry
    if isinstance(screen, ScheduleView):
        return update_view(screen, events)
    raise TypeError(f"unknown screen: {screen!r}")


def initial_screen(job_number: Optional[JobNumber] = None) -> Screen:
    """Start in the schedule view when a job number is given up front."""
    if job_number is None:
        return IdentifierEntry()
    return ScheduleView(job_number, Schedule.default())


# ── Controller ───────────────────────────────────────────────────────


class NavigationController:
    """Sole owner of the live screen."""

    def __init__(self, screen: Optional[Screen] = None) -> None:
        self._screen: Screen = IdentifierEntry() if screen is None else screen
        self.exit_requested = False

    @classmethod
    def from_job_number(cls, job_number: Optional[JobNumber]) -> NavigationController:
        return cls(initial_screen(job_number))

    @property
    def screen(self) -> Screen:
        return self._screen

    def handle_tick(self, events: Sequence[InputEvent]) -> Screen:
        """Run one tick and return the live screen.

        On quit the screen is left as it was and ``exit_requested`` is set.
        """
        result = handle_tick(self._screen, events)
        if isinstance(result, Quit):
            logger.info("Exit requested from empty job number entry")
            self.exit_requested = True
            return self._screen

        escaped = any(isinstance(event, EscapePressed) for event in events)
        if escaped or type(result) is not type(self._screen):
            logger.debug("Screen %r -> %r", self._screen, result)
        self._screen = result
        return result
