"""Century arithmetic shared by the century extractors.

Ordinal century N spans (N-1)*100 .. (N-1)*100+99, so "1st century" is 0-99.
A 4-character token such as 17uu spans 1700-1799. B.C. centuries mirror the
ordinal form with plain sign negation: "5th century B.C." is -599 .. -500.
"""


def ordinal_century_first_year(nth: int) -> int:
    return (nth - 1) * 100


def ordinal_century_last_year(nth: int) -> int:
    return (nth - 1) * 100 + 99


def token_century_first_year(yy: int) -> int:
    """First year for a yyuu / yy-- token (17uu -> 1700)."""
    return yy * 100


def token_century_last_year(yy: int) -> int:
    """Last year for a yyuu / yy-- token (17uu -> 1799)."""
    return yy * 100 + 99


def bc_century_first_year(nth: int) -> int:
    """Earliest (most negative) year of the nth century B.C."""
    return nth * -100 - 99


def bc_century_last_year(nth: int) -> int:
    """Latest (closest to zero) year of the nth century B.C."""
    return nth * -100
