"""Compiled patterns recognized by the year extractors.

Every pattern exposes its year fragments through named groups so extractors
never depend on positional indexes. Patterns are searched, not anchored,
unless they carry an explicit ``^``.
"""

import re

_OPTS = re.IGNORECASE | re.DOTALL

# "B.C.", "BC", "B. C.", "BC." ...
BC = r"\s*B\.?\s*C\.?"

# Range separators. Hyphen, en dash and em dash all show up in catalog data.
DASH = r"(?:-|–|—)"
RANGE_SEP = rf"(?:{DASH}|to)"
RANGE_OR_SEP = rf"(?:{DASH}|or|to)"

# yyuu / yy-- century token, and the looser yyxx token used around "or"
YYUU = r"\d{1,2}[u\-]{2}"
YYXX = r"\d{1,2}[u\-\d]{2}"

BRACKETS_BETWEEN_DIGITS_RE = re.compile(r"\d[\[\]]\d")

# --- B.C. forms --------------------------------------------------------------

YEAR_BC_RE = re.compile(r"(?P<year>\d{1,4})" + BC, _OPTS)

CENTURY_RANGE_RE = re.compile(
    r"(?P<first>\d{1,2})[a-z]{2}?\s*" + RANGE_OR_SEP + r"\s*(?P<last>\d{1,2})[a-z]{2}?\s+centur.*",
    _OPTS,
)
CENTURY_RANGE_BC_RE = re.compile(CENTURY_RANGE_RE.pattern + BC, _OPTS)

CENTURY_WORD_RE = re.compile(r"(?P<nth>\d{1,2})[a-z]{2}?\s*century", _OPTS)
CENTURY_BC_RE = re.compile(CENTURY_WORD_RE.pattern + r"\s+" + BC, _OPTS)

BETWEEN_RE = re.compile(
    r"between\s+(?P<first>\d{1,4})\??\s+and\s+(?P<last>\d{1,4})\??",
    _OPTS,
)
BETWEEN_BC_RE = re.compile(BETWEEN_RE.pattern + BC, _OPTS)

# --- century forms -----------------------------------------------------------

CENTURY_4CHAR_RE = re.compile(r"(?P<yy>\d{1,2})[u\-]{2}(?:[^u\-]|$)", _OPTS)

CENTURY_HYPHEN_RANGE_RE = re.compile(
    rf"(?P<first>{YYUU})\??\s*{RANGE_SEP}\s*(?P<last>{YYUU})\??",
    _OPTS,
)

# --- decade forms ------------------------------------------------------------

DECADE_WILDCARD_RE = re.compile(r"(?:^|\D)(?P<decade>\d{3})[u\-?x](?:$|\D)", _OPTS)
DECADE_NOTATION_RE = re.compile(r"(?:^|\D)(?P<decade>\d{3})0'?s(?:$|\D)", _OPTS)

# --- range forms -------------------------------------------------------------

# 2023-01-02T19:20:30+01:00/2025-01-01
SLASH_RANGE_RE = re.compile(r"\b(?P<first>\d{4})\b.*?/.*?\b(?P<last>\d{4})\b", _OPTS)

YEAR_RANGE_RE = re.compile(
    rf"(?P<first>\d{{3,4}})s?\??\s*{RANGE_SEP}\s*(?P<last>\d{{4}}s?)\??",
    re.DOTALL,
)

# The trailing group refuses another digit or hyphen so 1888-02-18 and
# 1966-2-5 read as calendar dates, not ranges.
TWO_DIGIT_TAIL_RE = re.compile(
    rf"(?P<first>\d{{3,4}})\??\s*{RANGE_SEP}\s*(?P<last>\d{{2}})\??(?:[^-0-9].*)?$"
)
ONE_DIGIT_TAIL_RE = re.compile(
    rf"(?P<first>\d{{3,4}})\??\s*{RANGE_SEP}\s*(?P<last>\d)\??(?:[^-0-9].*)?$"
)

OR_YEARS_RE = re.compile(rf"(?P<first>{YYXX})\??\s*or\s*(?P<last>{YYXX})\??", _OPTS)

# --- numeric-context forms ---------------------------------------------------

NEGATIVE_LEADING_YEAR_RE = re.compile(r"^(?P<year>-\d{4})")
NEGATIVE_YEAR_AFTER_HYPHEN_RE = re.compile(rf"-\d{{4}}\s*{RANGE_OR_SEP}\s*(?P<last>-\d{{4}})")

FOUR_DIGITS_RE = re.compile(r"(?P<year>\d{4})")

EARLY_NUMERIC_RE = re.compile(r"^-?\d{1,3}(?:[^\du\[]|$)", _OPTS)
EARLY_NEGATIVE_4DIGIT_RE = re.compile(r"^-\d{4}(?:[^\du\-\[]|$)$")
EARLY_NUMERIC_RANGE_RE = re.compile(
    rf"^(?P<first>-?\d{{1,3}})\??\s*{RANGE_OR_SEP}\s*(?P<last>-?\d{{1,4}})\??(?:[^\du\-\[]|$)",
    _OPTS,
)

LEADING_INT_RE = re.compile(r"^\s*(?P<int>[-+]?\d+)")
NUMERAL_RE = re.compile(r"^-?\d+$")

# --- calendar-style forms ----------------------------------------------------

MONTH_DAY_YY_SLASH_RE = re.compile(r"\d{1,2}/\d{1,2}/\d{2}")
MONTH_DAY_YY_SLASH_FULL_RE = re.compile(r"(?P<month>\d{1,2})/(?P<day>\d{1,2})/(?P<yy>\d{2})")
MONTH_DAY_YY_HYPHEN_RE = re.compile(r"\d{1,2}-\d{1,2}-\d{2}")
MONTH_DAY_YY_HYPHEN_FULL_RE = re.compile(r"(?P<month>\d{1,2})-(?P<day>\d{1,2})-(?P<yy>\d{2})")
