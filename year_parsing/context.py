"""Per-call context shared by extractors and orchestrators."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from year_parsing.clock import Clock, SystemClock
from year_parsing.config import YearParsingConfig, load_year_parsing_config


@dataclass(frozen=True)
class ResolveContext:
    """Carries the clock and configuration into every rule.

    Validity bounds are computed from the clock on each call, so a long-lived
    context stays correct across a change of year.
    """
    clock: Clock = field(default_factory=SystemClock)
    config: YearParsingConfig = field(default_factory=load_year_parsing_config)

    def today(self) -> date:
        return self.clock.today()

    @property
    def upper_bound(self) -> int:
        """current year + future slack (exclusive for single years)."""
        return self.today().year + self.config.future_slack

    def is_unknown_date(self, text: str) -> bool:
        return text in self.config.unknown_dates

    def is_valid_year(self, year: object) -> bool:
        """True if year is an int strictly between the lower and upper bounds."""
        if not isinstance(year, int) or isinstance(year, bool):
            return False
        return self.config.lower_bound < year < self.upper_bound

    def is_valid_range(self, first_year: int, last_year: int) -> bool:
        """True if neither year is past the upper bound and first <= last.

        No lower bound applies here; -15000..-14999 is a valid range.
        """
        upper_bound = self.upper_bound
        if first_year > upper_bound or last_year > upper_bound:
            return False
        if first_year > last_year:
            return False
        return True
