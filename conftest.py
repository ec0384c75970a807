"""Shared pytest fixtures: a pinned clock so bounds and two-digit years are deterministic."""

from datetime import date

import pytest

from year_parsing.clock import FixedClock
from year_parsing.config import YearParsingConfig
from year_parsing.context import ResolveContext
from year_parsing.year_parser import YearParser

# Valid single years are below 2022; m/d/21 after June 1 reads as 1921.
TODAY = date(2020, 6, 1)


@pytest.fixture
def context() -> ResolveContext:
    return ResolveContext(clock=FixedClock(TODAY), config=YearParsingConfig())


@pytest.fixture
def year_parser(context: ResolveContext) -> YearParser:
    return YearParser(context)
