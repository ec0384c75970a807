"""Time providers used to compute validity bounds and two-digit years."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Protocol


class Clock(Protocol):
    def today(self) -> date:
        ...


class SystemClock:
    """Reads the local calendar date on every call."""

    def today(self) -> date:
        return date.today()


@dataclass(frozen=True)
class FixedClock:
    """Always reports the same day. Used by tests and the CLI --today flag."""
    fixed: date

    def today(self) -> date:
        return self.fixed
