"""Factory for creating year extractor strategies."""

from enum import Enum, auto

from year_parsing.strategy import YearExtractorStrategy


class YearExtractors(Enum):
    """Enumeration of available year extraction rules."""
    BC_CENTURY_RANGE = auto()
    BC_BETWEEN = auto()
    BC_CENTURY = auto()
    BC_YEAR = auto()
    SLASH_RANGE = auto()
    BETWEEN = auto()
    YEAR_RANGE = auto()
    TWO_DIGIT_TAIL = auto()
    ONE_DIGIT_TAIL = auto()
    CENTURY_RANGE_HYPHEN = auto()
    OR_YEARS = auto()
    NEGATIVE_YEAR_AFTER_HYPHEN = auto()
    NEGATIVE_LEADING_YEAR = auto()
    DECADE_NOTATION = auto()
    FOUR_DIGIT_YEAR = auto()
    TWO_DIGIT_CALENDAR_YEAR = auto()
    DECADE_WILDCARD = auto()
    CENTURY_RANGE = auto()
    CENTURY = auto()
    EARLY_NUMERIC = auto()


class YearExtractorFactory:
    """Factory for creating YearExtractorStrategy instances."""

    @staticmethod
    def get_extractor(strategy: YearExtractors) -> YearExtractorStrategy:
        """Get an extractor instance for the specified rule.

        Args:
            strategy: The rule to create an extractor for

        Returns:
            An instance of the requested extractor strategy

        Raises:
            ValueError: If the rule is unknown
        """
        # Import here to avoid circular dependencies
        from year_parsing.bc_year_extractor import BcYearExtractor
        from year_parsing.between_extractor import BetweenExtractor
        from year_parsing.century_extractor import BcCenturyExtractor, CenturyExtractor
        from year_parsing.century_range_extractor import CenturyRangeExtractor, HyphenCenturyRangeExtractor
        from year_parsing.decade_extractor import DecadeNotationExtractor, DecadeWildcardExtractor
        from year_parsing.early_numeric_extractor import EarlyNumericExtractor
        from year_parsing.four_digit_year_extractor import FourDigitYearExtractor
        from year_parsing.negative_year_extractor import NegativeLeadingYearExtractor, NegativeYearAfterHyphenExtractor
        from year_parsing.or_year_extractor import OrYearExtractor
        from year_parsing.short_year_range_extractor import ShortYearRangeExtractor
        from year_parsing.slash_range_extractor import SlashRangeExtractor
        from year_parsing.two_digit_year_extractor import TwoDigitYearExtractor
        from year_parsing.year_range_extractor import YearRangeExtractor

        if strategy == YearExtractors.BC_CENTURY_RANGE:
            return CenturyRangeExtractor(era_bc=True)
        elif strategy == YearExtractors.BC_BETWEEN:
            return BetweenExtractor(era_bc=True)
        elif strategy == YearExtractors.BC_CENTURY:
            return BcCenturyExtractor()
        elif strategy == YearExtractors.BC_YEAR:
            return BcYearExtractor()
        elif strategy == YearExtractors.SLASH_RANGE:
            return SlashRangeExtractor()
        elif strategy == YearExtractors.BETWEEN:
            return BetweenExtractor()
        elif strategy == YearExtractors.YEAR_RANGE:
            return YearRangeExtractor()
        elif strategy == YearExtractors.TWO_DIGIT_TAIL:
            return ShortYearRangeExtractor(tail_digits=2)
        elif strategy == YearExtractors.ONE_DIGIT_TAIL:
            return ShortYearRangeExtractor(tail_digits=1)
        elif strategy == YearExtractors.CENTURY_RANGE_HYPHEN:
            return HyphenCenturyRangeExtractor()
        elif strategy == YearExtractors.OR_YEARS:
            return OrYearExtractor()
        elif strategy == YearExtractors.NEGATIVE_YEAR_AFTER_HYPHEN:
            return NegativeYearAfterHyphenExtractor()
        elif strategy == YearExtractors.NEGATIVE_LEADING_YEAR:
            return NegativeLeadingYearExtractor()
        elif strategy == YearExtractors.DECADE_NOTATION:
            return DecadeNotationExtractor()
        elif strategy == YearExtractors.FOUR_DIGIT_YEAR:
            return FourDigitYearExtractor()
        elif strategy == YearExtractors.TWO_DIGIT_CALENDAR_YEAR:
            return TwoDigitYearExtractor()
        elif strategy == YearExtractors.DECADE_WILDCARD:
            return DecadeWildcardExtractor()
        elif strategy == YearExtractors.CENTURY_RANGE:
            return CenturyRangeExtractor()
        elif strategy == YearExtractors.CENTURY:
            return CenturyExtractor()
        elif strategy == YearExtractors.EARLY_NUMERIC:
            return EarlyNumericExtractor()
        else:
            raise ValueError(f"Unknown strategy: {strategy}")
