"""Dataclass representing the earliest/latest year pair found in a date string."""

from __future__ import annotations

from dataclasses import dataclass

from year_parsing.resolution import YearResolution


@dataclass(frozen=True)
class YearSpan:
    """Earliest and latest resolutions for one date string.

    Either side may be None. A side whose resolution has is_valid False was
    found but rejected; it does not count as resolved.
    """
    text: str | None
    earliest_resolution: YearResolution | None
    latest_resolution: YearResolution | None

    @property
    def earliest(self) -> int | None:
        r = self.earliest_resolution
        return r.year if r is not None and r.is_valid else None

    @property
    def latest(self) -> int | None:
        r = self.latest_resolution
        return r.year if r is not None and r.is_valid else None

    @property
    def is_undated(self) -> bool:
        return self.earliest is None and self.latest is None

    @property
    def rejected_latest(self) -> int | None:
        """The latest-year candidate the cascade found but rejected, if any."""
        r = self.latest_resolution
        return r.year if r is not None and not r.is_valid else None
