"""Exceptions raised by year parsing."""


class YearParsingError(Exception):
    """Base class for year parsing failures."""


class YearRangeError(YearParsingError, ValueError):
    """A first/last year pair was found but does not form a valid range."""


class YearCoercionError(YearParsingError, TypeError):
    """A value handed to range materialization is not a year numeral."""
