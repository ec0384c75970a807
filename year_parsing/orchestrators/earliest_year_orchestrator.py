"""Orchestrator resolving the earliest year a date string can mean."""

from __future__ import annotations

from year_parsing.factory import YearExtractors
from year_parsing.orchestrators.resolve_orchestrator import ResolveOrchestrator
from year_parsing.resolution import YearBound


class EarliestYearOrchestrator(ResolveOrchestrator):
    """Resolves the earliest year, e.g. 1700 for 17uu.

    An invalid candidate (a catalog number read as a year, a year too far in
    the future) is skipped and the next rule gets a chance.
    """

    bound = YearBound.EARLIEST

    def get_bc_extractor_steps(self) -> list[YearExtractors]:
        # Longest B.C. string first
        return [
            YearExtractors.BC_CENTURY_RANGE,
            YearExtractors.BC_BETWEEN,
            YearExtractors.BC_CENTURY,
            YearExtractors.BC_YEAR,
        ]

    def get_extractor_steps(self) -> list[YearExtractors]:
        return [
            # ISO-like intervals contain hyphens, so slashes go first
            YearExtractors.SLASH_RANGE,
            YearExtractors.BETWEEN,
            YearExtractors.YEAR_RANGE,
            YearExtractors.NEGATIVE_LEADING_YEAR,
            YearExtractors.FOUR_DIGIT_YEAR,
            YearExtractors.TWO_DIGIT_CALENDAR_YEAR,
            YearExtractors.DECADE_WILDCARD,
            YearExtractors.CENTURY,
            YearExtractors.EARLY_NUMERIC,
        ]
