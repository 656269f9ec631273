#!/usr/bin/env python3
"""
Core constants used across SchemaForm.

- Date rendering: default token template, English month/weekday name tables.
- Date tokens: the ordered token vocabulary understood by `date_to_string`.
- File handling: default text encoding for configuration files.
"""

from typing import Final, Tuple

# --- Date rendering --- #

# Default template used when no (or a malformed) `dateFormat` option is given
DEFAULT_DATE_FORMAT: Final[str] = "YYYY-MM-DD"

LONG_MONTHS: Final[Tuple[str, ...]] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
SHORT_MONTHS: Final[Tuple[str, ...]] = tuple(m[:3] for m in LONG_MONTHS)

# Sunday-first, indexed by `date.isoweekday() % 7`
LONG_DAYS: Final[Tuple[str, ...]] = (
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
)
SHORT_DAYS: Final[Tuple[str, ...]] = tuple(d[:3] for d in LONG_DAYS)

# Longest token first within each family (YYYY/YY, MMMM..M, DDDD..D)
DATE_TOKENS: Final[Tuple[str, ...]] = (
    "YYYY", "YY", "MMMM", "MMM", "MM", "M", "DDDD", "DDD", "DD", "D", "S",
)

# --- Two-digit year windowing --- #

# Component bounds used when disambiguating [YYYY, MM, DD] style parts
MIN_FOUR_DIGIT_YEAR: Final[int] = 1000   # exclusive
MAX_FOUR_DIGIT_YEAR: Final[int] = 2100   # exclusive
MAX_TWO_DIGIT_YEAR: Final[int] = 100     # exclusive
MAX_MONTH: Final[int] = 12
MAX_DAY: Final[int] = 31

# --- File handling --- #

DEFAULT_TEXT_ENCODING: Final[str] = "utf-8"


# --- Runtime guard --- #
def validate_constants():
    """
    Ensure constants are valid at runtime.
    """
    if len(LONG_MONTHS) != 12 or len(LONG_DAYS) != 7:
        raise RuntimeError("Month/day name tables must hold 12 months and 7 days")
    for i, token in enumerate(DATE_TOKENS):
        shadowed = [t for t in DATE_TOKENS[:i] if token.startswith(t)]
        if shadowed:
            raise RuntimeError(
                f"Date token {token!r} is shadowed by earlier token(s) {shadowed}"
            )

validate_constants()
