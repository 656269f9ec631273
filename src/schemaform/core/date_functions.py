#!/usr/bin/env python3
"""
Purpose:
    Flexible date parsing and token-based date rendering for form values.

    - `find_date`: locate a date-like substring in free text.
    - `string_to_date`: turn a date-like string into a `datetime.date`,
      resolving ambiguous component order.
    - `date_to_string`: render a date with a token template ("MMMM D, YYYY").
    - `ordinal`: English ordinal suffix for a day number.

    None of these raise on bad input; they return None instead.
"""

from __future__ import annotations

import datetime as dt
import logging
import re
from typing import Any, List, Optional

from schemaform.core.constants import (
    DATE_TOKENS,
    LONG_DAYS,
    LONG_MONTHS,
    MAX_DAY,
    MAX_FOUR_DIGIT_YEAR,
    MAX_MONTH,
    MAX_TWO_DIGIT_YEAR,
    MIN_FOUR_DIGIT_YEAR,
    SHORT_DAYS,
    SHORT_MONTHS,
)
from schemaform.core.options import DateFormatOptions

logger = logging.getLogger(__name__)


# --- Patterns --- #

_SEP = r"[-_\\/. ]"
_YEAR4 = r"(?:19|20)\d\d"
_MONTH = r"(?:0?\d|1[012])"
_DAY = r"(?:[012]?\d|3[01])"

# Tried in order; the first match wins
_FIND_DATE_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(p, re.ASCII) for p in (
        # ...YYYY-MM-DD...
        _YEAR4 + _SEP + _MONTH + _SEP + _DAY + r"(?!\d)",
        # ...MM-DD-YYYY...
        _DAY + _SEP + _MONTH + _SEP + _YEAR4 + r"(?!\d)",
        # MM-DD-YY...
        r"^" + _DAY + _SEP + _MONTH + _SEP + r"\d\d(?!\d)",
        # YY-MM-DD...
        r"^\d\d" + _SEP + _DAY + _SEP + _MONTH + r"(?!\d)",
        # YYYYMMDD...
        r"^" + _YEAR4 + r"(?:0\d|1[012])(?:[012]\d|3[01])",
    )
)

_SEPARATED_PARTS_RE = re.compile(r"\d+\D\d+\D\d+", re.ASCII)
_COMPACT_PARTS_RE = re.compile(r"\d{8}", re.ASCII)
_PART_SPLIT_RE = re.compile(r"\D", re.ASCII)

# Case-insensitive, longest token first within each family
_TOKEN_RE = re.compile("|".join(DATE_TOKENS), re.IGNORECASE)


# --- Public API --- #

def find_date(text: Any) -> Optional[str]:
    """
    Return the first date-like substring of `text`, or None.

    Examples
    --------
    >>> find_date("Order placed 2023-11-05 by user")
    '2023-11-05'
    >>> find_date("no date here") is None
    True
    """
    if not isinstance(text, str) or not text:
        return None
    for pattern in _FIND_DATE_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(0)
    return None


def string_to_date(date_string: Any, *, reference_year: Optional[int] = None) -> Optional[dt.date]:
    """
    Convert a date-like string into a `datetime.date`.

    Components are interpreted, in order of preference, as
    [YYYY, MM, DD], [MM, DD, YYYY], [MM, DD, YY], [YY, MM, DD].
    Two-digit years at or below `reference_year`'s last two digits are
    placed in 2000-2099, later ones in 1900-1999.

    Day or month values the month cannot hold roll over into the next
    (or previous) month, e.g. "2023-02-31" -> 2023-03-03.

    Args:
        date_string:    text holding a date
        reference_year: year used for century windowing (defaults to today)

    Returns:
        A `datetime.date`, or None when no interpretation fits.
    """
    found = find_date(date_string)
    if found is None:
        return None

    parts = _split_date_parts(found)
    if len(parts) != 3:
        return None

    if reference_year is None:
        reference_year = _current_year()
    this_year = reference_year % 100
    c0, c1, c2 = parts

    # [YYYY, MM, DD]
    if MIN_FOUR_DIGIT_YEAR < c0 < MAX_FOUR_DIGIT_YEAR and c1 <= MAX_MONTH and c2 <= MAX_DAY:
        return _build_date(c0, c1, c2)
    # [MM, DD, YYYY]
    if c0 <= MAX_MONTH and c1 <= MAX_DAY and MIN_FOUR_DIGIT_YEAR < c2 < MAX_FOUR_DIGIT_YEAR:
        return _build_date(c2, c0, c1)
    # [MM, DD, YY]
    if c0 <= MAX_MONTH and c1 <= MAX_DAY and c2 < MAX_TWO_DIGIT_YEAR:
        return _build_date(_window_year(c2, this_year), c0, c1)
    # [YY, MM, DD]
    if c0 < MAX_TWO_DIGIT_YEAR and c1 <= MAX_MONTH and c2 <= MAX_DAY:
        return _build_date(_window_year(c0, this_year), c1, c2)

    logger.debug("No date interpretation fits %r (parts %r)", found, parts)
    return None


def date_to_string(value: Any, options: Any = None) -> Optional[str]:
    """
    Render a date (or date-like string) using a token template.

    Tokens (case-insensitive):
        YYYY / YY   four-digit / two-digit year
        MMMM / MMM  full / abbreviated month name
        MM / M      zero-padded / plain month number
        DDDD / DDD  full / abbreviated weekday name
        DD / D      zero-padded / plain day of month
        S           ordinal suffix of the day (st, nd, rd, th)

    Tokens are replaced in a single pass, so names produced by one token
    ("November", "Sunday") are never re-read as tokens.

    Args:
        value:   `datetime.date`/`datetime.datetime` or a date-like string
        options: `DateFormatOptions`, a mapping with `dateFormat`, or None

    Returns:
        The rendered string, or None if `value` is not a usable date.
    """
    if isinstance(value, str):
        value = string_to_date(value)
    if not isinstance(value, dt.date):
        return None

    template = DateFormatOptions.coerce(options).date_format
    return _TOKEN_RE.sub(lambda m: _render_token(m.group(0).upper(), value), template)


def ordinal(number: int | str) -> str:
    """
    English ordinal suffix for `number`.

    >>> [ordinal(n) for n in (1, 2, 3, 4, 11, 12, 13, 21, 22, 111)]
    ['st', 'nd', 'rd', 'th', 'th', 'th', 'th', 'st', 'nd', 'th']
    """
    digits = str(number)
    last = digits[-1:]
    next_to_last = digits[-2:-1]
    if next_to_last == "1":
        return "th"
    return {"1": "st", "2": "nd", "3": "rd"}.get(last, "th")


# Names exposed to form renderers
parse_date = string_to_date
format_date = date_to_string


# --- Internals --- #

def _split_date_parts(found: str) -> List[int]:
    """Split x-y-z into [x, y, z], or xxxxyyzz into [xxxx, yy, zz]."""
    if _SEPARATED_PARTS_RE.fullmatch(found):
        return [int(part) for part in _PART_SPLIT_RE.split(found)]
    if _COMPACT_PARTS_RE.fullmatch(found):
        return [int(found[:4]), int(found[4:6]), int(found[6:])]
    return []


def _current_year() -> int:
    return dt.date.today().year


def _window_year(two_digit_year: int, this_year: int) -> int:
    return (2000 if two_digit_year <= this_year else 1900) + two_digit_year


def _build_date(year: int, month: int, day: int) -> Optional[dt.date]:
    """
    Build a date, rolling month/day overflow into neighbouring months.

    Month 0 is December of the previous year; day 0 is the last day of the
    previous month.
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    try:
        return dt.date(year, month, 1) + dt.timedelta(days=day - 1)
    except (ValueError, OverflowError):
        logger.debug("Date out of range: year=%d month=%d day=%d", year, month, day)
        return None


def _render_token(token: str, value: dt.date) -> str:
    if token == "YYYY":
        return str(value.year)
    if token == "YY":
        return str(value.year)[-2:]
    if token == "MMMM":
        return LONG_MONTHS[value.month - 1]
    if token == "MMM":
        return SHORT_MONTHS[value.month - 1]
    if token == "MM":
        return f"{value.month:02d}"
    if token == "M":
        return str(value.month)
    if token == "DDDD":
        return LONG_DAYS[value.isoweekday() % 7]
    if token == "DDD":
        return SHORT_DAYS[value.isoweekday() % 7]
    if token == "DD":
        return f"{value.day:02d}"
    if token == "D":
        return str(value.day)
    return ordinal(value.day)
