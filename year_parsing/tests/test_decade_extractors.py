"""Unit tests for the decade extractors."""

import pytest

from year_parsing.decade_extractor import DecadeNotationExtractor, DecadeWildcardExtractor
from year_parsing.resolution import YearBound

EARLIEST = YearBound.EARLIEST
LATEST = YearBound.LATEST


class TestDecadeWildcardExtractor:
    """Test cases for DecadeWildcardExtractor."""

    def setup_method(self):
        self.extractor = DecadeWildcardExtractor()

    @pytest.mark.parametrize("text,earliest,latest", [
        ("156u", 1560, 1569),
        ("167-?]", 1670, 1679),
        ("[171-?]", 1710, 1719),
        ("[189-]", 1890, 1899),
        ("ca.170-?]", 1700, 1709),
        ("200-?]", 2000, 2009),
        ("186?", 1860, 1869),
        ("195x", 1950, 1959),
        ("195X", 1950, 1959),
        ("199u", 1990, 1999),
        ("200-", 2000, 2009),
        ("201?", 2010, 2019),
        ("115x", 1150, 1159),
    ])
    def test_wildcard_digit(self, context, text, earliest, latest):
        """The wildcard becomes 0 for the earliest year and 9 for the latest."""
        assert self.extractor.extract(text, EARLIEST, context) == earliest
        assert self.extractor.extract(text, LATEST, context) == latest

    @pytest.mark.parametrize("text", [
        "1950s",
        "1950's",
        "early 1890s",
        "1/2/79",
        "5-1-59",
        "17uu",
        "1uuu",
    ])
    def test_no_match(self, context, text):
        assert self.extractor.extract(text, EARLIEST, context) is None
        assert self.extractor.extract(text, LATEST, context) is None


class TestDecadeNotationExtractor:
    """Test cases for DecadeNotationExtractor."""

    def setup_method(self):
        self.extractor = DecadeNotationExtractor()

    @pytest.mark.parametrize("text,expected", [
        ("1950s", 1959),
        ("1950's", 1959),
        ("early 1890s", 1899),
        ("1900s", 1909),
        ("[1860s?]", 1869),
    ])
    def test_latest(self, context, text, expected):
        assert self.extractor.extract(text, LATEST, context) == expected

    def test_earliest_is_left_to_four_digit_rule(self, context):
        assert self.extractor.extract("1950s", EARLIEST, context) is None

    @pytest.mark.parametrize("text", ["1955s", "1990", "199u"])
    def test_no_match(self, context, text):
        assert self.extractor.extract(text, LATEST, context) is None
