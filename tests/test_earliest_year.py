"""Tests for the earliest-year cascade. Today is pinned to 2020-06-01 by conftest."""

import pytest

from year_parsing.factory import YearExtractors
from year_parsing.orchestrators import EarliestYearOrchestrator

SINGLE_YEARS = {
    "1873.": 1873,
    "[1789]": 1789,
    "1583.": 1583,
    "0700": 700,
    "[ca. 1790]": 1790,
    "ca. 1790": 1790,
    "c1900": 1900,
    "copyright 1855": 1855,
    "Ans. 1656": 1656,
    "a. 1652": 1652,
    "1885-": 1885,
    "[1968?-": 1968,
    "MDCCLII. [1752-": 1752,
    "anno MDCXXXV [1635].": 1635,
    "an 10 (1802)": 1802,
    "Boston, November 25, 1851": 1851,
    "Dec. 10 & 11, 1855": 1855,
    "Sep.tr 15.th 1796": 1796,
    "12th Dec.r 1794": 1794,
    "1975-05": 1975,
    "1888-02-18": 1888,
    "1966-2-5": 1966,
    "5-1-1959": 1959,
    "5-18-2014": 2014,
    "1/1/1961": 1961,
    "10/1/1987": 1987,
    "1966\\4\\11": 1966,
    "2/31/1950": 1950,
    "1869-00-00": 1869,
    "19990211": 1999,
}

DECADES = {
    "156u": 1560,
    "167-?]": 1670,
    "[171-?]": 1710,
    "[189-]": 1890,
    "ca.170-?]": 1700,
    "200-?]": 2000,
    "186?": 1860,
    "195x": 1950,
    "199u": 1990,
    "201?": 2010,
    "202x": 2020,
    "1950s": 1950,
    "1950's": 1950,
    "early 1890s": 1890,
}

CENTURIES = {
    "18th century CE": 1700,
    "17uu": 1700,
    "17--": 1700,
    "17--?]": 1700,
    "17--]": 1700,
    "[17--]": 1700,
    "[17--?]": 1700,
    "7--": 700,
    "5th century": 400,
    "1st century A.D.": 0,
    "2th century CE": 100,
    "11th century?": 1000,
    "17--?-18--?": 1700,
    "12--? -13--?": 1200,
    "17th or 18th century?": 1600,
    "ca. 5th–6th century A.D.": 400,
}

RANGES = {
    "1783-1788": 1783,
    "1640-1645?]": 1640,
    "1698/1715": 1698,
    "[between 1882 and 1887]": 1882,
    "between 1694 and 1799?": 1694,
    "[ca 1789-1791]": 1789,
    "1750?-1867": 1750,
    "between 1750-1800?": 1750,
    "1757-58": 1757,
    "1918-20": 1918,
    "1835 or 1836": 1835,
    "17-- or 18--": 1700,
    "15-- or 16--?": 1500,
    "L'an VII de la République [1798 or 1799]": 1798,
    "between 1 and 5": 1,
}

BC_DATES = {
    "801 B.C.": -801,
    "75 B.C.": -75,
    "8 B.C.": -8,
    "1666 B.C.": -1666,
    "5th century B.C.": -599,
    "7th century B.C.": -799,
    "13th century B.C.": -1399,
    "ca. 9th–8th century B.C.": -999,
    "ca. 13th–12th century B.C.": -1399,
    "between 2000 and 1000 B.C.": -2000,
    "between 300 and 150 B.C.": -300,
    "between 3 and 1 B. C.": -3,
}

EARLY_NUMERICS = {
    "-999": -999,
    "-999?": -999,
    "-914": -914,
    "-18": -18,
    "-1": -1,
    "0": 0,
    "5": 5,
    "33": 33,
    "945": 945,
}

NO_YEAR = [
    None,
    "",
    "0000-00-00",
    "9999",
    "2035",
    "uuuu",
    "1uuu",
    "random text",
    "publiée le 26 germinal an VI",
    "L'AN 2 DE LA // LIBERTÉ",
    "publié en frimaire l'an 3.e de la République française",
    "s.n.]",
    "M. D. LXI",
    "[s.d.]",
    "[]",
    "?",
    "[An 4]",
    "Aug",
]


class TestEarliestYearOrchestrator:
    """Test cases for EarliestYearOrchestrator."""

    @pytest.fixture(autouse=True)
    def _orchestrator(self, context):
        self.orchestrator = EarliestYearOrchestrator(context)

    def test_get_parser_steps_order(self):
        """Range rules run before the broad four-digit scan."""
        assert self.orchestrator.get_bc_extractor_steps() == [
            YearExtractors.BC_CENTURY_RANGE,
            YearExtractors.BC_BETWEEN,
            YearExtractors.BC_CENTURY,
            YearExtractors.BC_YEAR,
        ]
        assert self.orchestrator.get_extractor_steps() == [
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

    @pytest.mark.parametrize("text,expected", list(SINGLE_YEARS.items()))
    def test_single_year(self, text, expected):
        assert self.orchestrator.resolve(text) == expected

    @pytest.mark.parametrize("text,expected", [
        ("1/2/79", 1979),
        ("5-1-59", 1959),
        ("5-1-21", 1921),
        ("2/12/15", 2015),
        ("10/21/08", 2008),
        ("1/2/79?", 1979),
        ("5-1-59]", 1959),
        ("1/2/79.", 1979),
        ("10/21/08/Paris", 2008),
        ("5-1-21 - [171-?]", 1921),
    ])
    def test_two_digit_calendar_year(self, text, expected):
        assert self.orchestrator.resolve(text) == expected

    @pytest.mark.parametrize("text,expected", list(DECADES.items()))
    def test_decade(self, text, expected):
        assert self.orchestrator.resolve(text) == expected

    @pytest.mark.parametrize("text,expected", list(CENTURIES.items()))
    def test_century(self, text, expected):
        assert self.orchestrator.resolve(text) == expected

    @pytest.mark.parametrize("text,expected", list(RANGES.items()))
    def test_range(self, text, expected):
        assert self.orchestrator.resolve(text) == expected

    @pytest.mark.parametrize("text,expected", list(BC_DATES.items()))
    def test_bc_dates_skip_validity(self, text, expected):
        """B.C. years are returned even below the lower bound."""
        assert self.orchestrator.resolve(text) == expected

    @pytest.mark.parametrize("text,expected", list(EARLY_NUMERICS.items()))
    def test_early_numeric(self, text, expected):
        assert self.orchestrator.resolve(text) == expected

    @pytest.mark.parametrize("text", NO_YEAR)
    def test_no_year(self, text):
        assert self.orchestrator.resolve(text) is None

    @pytest.mark.parametrize("text,expected", [
        ("169[5]", 1695),
        ("October 3, [18]91", 1891),
        ("[18]91", 1891),
    ])
    def test_brackets_between_digits(self, text, expected):
        assert self.orchestrator.resolve(text) == expected

    def test_bracket_removal_matches_plain_text(self):
        assert self.orchestrator.resolve("[18]91") == self.orchestrator.resolve("1891")

    def test_invalid_candidate_is_skipped(self):
        """-1666 is below the lower bound, so the four-digit scan reads 1666.

        A bare negative four-digit year only survives when the lower bound
        admits it.
        """
        assert self.orchestrator.resolve("-1666") == 1666

    def test_resolve_with_rule(self):
        resolution = self.orchestrator.resolve_with_rule("17uu")
        assert resolution.year == 1700
        assert resolution.extractor == YearExtractors.CENTURY
        assert resolution.is_valid is True

    def test_resolve_with_rule_after_bracket_retry(self):
        resolution = self.orchestrator.resolve_with_rule("169[5]")
        assert resolution.year == 1695
        assert resolution.extractor == YearExtractors.FOUR_DIGIT_YEAR
        assert resolution.text == "1695"

    def test_bc_rule_is_reported(self):
        resolution = self.orchestrator.resolve_with_rule("5th century B.C.")
        assert resolution.extractor == YearExtractors.BC_CENTURY


class TestRemoveBrackets:
    """Test cases for the bracket fallback helper."""

    @pytest.mark.parametrize("text,expected", [
        ("169[5]", "1695"),
        ("[18]91", "1891"),
        ("October 3, [18]91", "October 3, 1891"),
        ("[1789]", None),
        ("[ca. 1790]", None),
    ])
    def test_remove_brackets(self, text, expected):
        assert EarliestYearOrchestrator.remove_brackets(text) == expected
