"""Core data types: job numbers and schedules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

JOB_NUMBER_MAX = 2**32 - 1


class InvalidJobNumber(ValueError):
    """Raised when text does not name a job number."""


@dataclass(frozen=True, order=True)
class JobNumber:
    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= JOB_NUMBER_MAX:
            raise InvalidJobNumber(f"job number out of range: {self.value}")

    @classmethod
    def from_str(cls, text: str) -> JobNumber:
        """Parse decimal digits into a job number, raising on anything else."""
        # str.isdigit() also accepts non-ASCII digits like "²" or "٣".
        if not text or not (text.isascii() and text.isdigit()):
            raise InvalidJobNumber(f"not a job number: {text!r}")
        value = int(text)
        if value > JOB_NUMBER_MAX:
            raise InvalidJobNumber(f"job number out of range: {text}")
        return cls(value)

    @classmethod
    def parse(cls, text: str) -> Optional[JobNumber]:
        try:
            return cls.from_str(text)
        except InvalidJobNumber:
            return None

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"JobNumber({self.value})"


@dataclass(frozen=True)
class ScheduleEntry:
    label: str
    start: str = ""
    end: str = ""


@dataclass(frozen=True)
class Schedule:
    entries: tuple[ScheduleEntry, ...] = field(default_factory=tuple)

    @classmethod
    def default(cls) -> Schedule:
        return cls()

    def describe(self) -> str:
        """Render entries one per line, or a placeholder when empty."""
        if not self.entries:
            return "No scheduled items"
        lines: list[str] = []
        for entry in self.entries:
            span = " → ".join(part for part in (entry.start, entry.end) if part)
            lines.append(f"{entry.label}  {span}" if span else entry.label)
        return "\n".join(lines)
