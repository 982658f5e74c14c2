"""Calendar arithmetic and validation of task dates."""

import re

_THIRTY_ONE_DAY_MONTHS = frozenset({1, 3, 5, 7, 8, 10, 12})
_AT_MOST_THIRTY_DAY_MONTHS = frozenset({2, 4, 6, 9, 11})
_DATE_LENGTH = 10

# Integer, separator character, integer, separator character, integer, each
# optionally preceded by whitespace, as read field by field from a text stream.
_DATE_FIELDS = re.compile(
    r"\s*([+-]?[0-9]+)\s*(\S)\s*([+-]?[0-9]+)\s*(\S)\s*([+-]?[0-9]+)",
    re.ASCII,
)


def is_leap(year):
    """Return True if ``year`` is a Gregorian leap year."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year, month):
    """Return the number of days in ``month`` of ``year``."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    if month == 2:
        return 29 if is_leap(year) else 28
    return 31 if month in _THIRTY_ONE_DAY_MONTHS else 30


def is_valid_date(text):
    """Return True if ``text`` is a task date of the form YYYY/MM/DD.

    The text must be exactly ten characters long with '/' separators, a
    non-negative year, a month in 1..12 and a day in 1..31; months listed as
    short (February, April, June, September, November) reject day 31.
    """
    if len(text) != _DATE_LENGTH:
        return False
    match = _DATE_FIELDS.match(text)
    if match is None:
        return False
    year_text, first_sep, month_text, second_sep, day_text = match.groups()
    if first_sep != "/" or second_sep != "/":
        return False
    year, month, day = int(year_text), int(month_text), int(day_text)
    if year < 0 or not 1 <= month <= 12 or not 1 <= day <= 31:
        return False
    return not (month in _AT_MOST_THIRTY_DAY_MONTHS and day > 30)