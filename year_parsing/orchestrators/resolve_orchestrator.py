"""Base class for orchestrators that resolve one year bound from a date string."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List

from year_parsing.context import ResolveContext
from year_parsing.factory import YearExtractorFactory, YearExtractors
from year_parsing.patterns import BRACKETS_BETWEEN_DIGITS_RE
from year_parsing.resolution import YearBound, YearResolution


logger = logging.getLogger(__name__)


class ResolveOrchestrator(ABC):
    """Base class for resolvers that try multiple extraction rules in order.

    Subclasses define the bound, the rule order, and whether the first
    candidate of the general rules is final even when it fails validity.
    """

    # Brackets are removed all at once, so a second retry could never change anything.
    MAX_BRACKET_RETRIES = 1

    bound: YearBound
    lock_first_candidate: bool = False

    def __init__(self, context: ResolveContext | None = None):
        self.context = context or ResolveContext()

    @abstractmethod
    def get_bc_extractor_steps(self) -> List[YearExtractors]:
        """Return the ordered B.C. rules. Their results skip the validity check."""
        pass

    @abstractmethod
    def get_extractor_steps(self) -> List[YearExtractors]:
        """Return the ordered general rules. Their results must be valid years."""
        pass

    @staticmethod
    def remove_brackets(text: str) -> str | None:
        """Strip brackets if one sits between two digits, as in 169[5] or [18]91.

        Returns:
            The text without any [ or ] characters, or None if no bracket
            sits between digits
        """
        if not BRACKETS_BETWEEN_DIGITS_RE.search(text):
            return None
        return text.replace("[", "").replace("]", "")

    def resolve(self, text: str | None) -> int | None:
        """Resolve a year for this orchestrator's bound, or None."""
        resolution = self.resolve_with_rule(text)
        if resolution is None or not resolution.is_valid:
            return None
        return resolution.year

    def resolve_with_rule(self, text: str | None, _depth: int = 0) -> YearResolution | None:
        """Resolve a year together with the rule that produced it.

        Args:
            text: The raw date string
            _depth: Bracket retries already spent on this call chain

        Returns:
            A YearResolution (is_valid False for a rejected candidate the
            cascade locked onto), or None if no rule matched
        """
        if not text:
            return None
        if self.context.is_unknown_date(text):
            return None

        for step in self.get_bc_extractor_steps():
            year = YearExtractorFactory.get_extractor(step).extract(text, self.bound, self.context)
            if year is not None:
                logger.debug(f"{self.bound.name.lower()} year {year} from {step.name} for '{text}'")
                return YearResolution(year=year, extractor=step, bound=self.bound, text=text)

        resolution = self._run_extractor_steps(text)
        if resolution is not None and resolution.is_valid:
            return resolution

        if _depth < self.MAX_BRACKET_RETRIES:
            cleaned = self.remove_brackets(text)
            if cleaned is not None:
                logger.debug(f"retrying '{text}' without brackets as '{cleaned}'")
                retried = self.resolve_with_rule(cleaned, _depth + 1)
                if retried is not None and (retried.is_valid or resolution is None):
                    return retried

        return resolution

    def _run_extractor_steps(self, text: str) -> YearResolution | None:
        for step in self.get_extractor_steps():
            year = YearExtractorFactory.get_extractor(step).extract(text, self.bound, self.context)
            if year is None:
                continue

            if self.context.is_valid_year(year):
                logger.debug(f"{self.bound.name.lower()} year {year} from {step.name} for '{text}'")
                return YearResolution(year=year, extractor=step, bound=self.bound, text=text)

            if self.lock_first_candidate:
                logger.debug(f"rejected {self.bound.name.lower()} year {year} from {step.name} for '{text}'")
                return YearResolution(year=year, extractor=step, bound=self.bound, text=text, is_valid=False)

        return None
