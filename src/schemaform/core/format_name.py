#!/usr/bin/env python3
"""
Purpose:
    Defines the FormatName enumeration of JSON Schema string formats checked
    by SchemaForm, along with helpers for parsing and for mapping a format to
    the HTML input type a form renderer should use.
"""

from __future__ import annotations

from enum import Enum


class FormatName(str, Enum):
    """
    JSON Schema string formats with a validator in `FORMAT_TESTS`.

    The set is closed: every member has exactly one matcher.
    """

    DATE = "date"
    TIME = "time"
    DATE_TIME = "date-time"
    EMAIL = "email"
    HOSTNAME = "hostname"
    IPV4 = "ipv4"
    IPV6 = "ipv6"
    URI = "uri"
    URI_REFERENCE = "uri-reference"
    URI_TEMPLATE = "uri-template"
    URL = "url"
    UUID = "uuid"
    COLOR = "color"
    JSON_POINTER = "json-pointer"
    RELATIVE_JSON_POINTER = "relative-json-pointer"
    REGEX = "regex"

    # --- Parsing helpers --- #

    @classmethod
    def parse(cls, value: str | FormatName | None) -> FormatName | None:
        """
        Coerce arbitrary input to a `FormatName`.

        - `FormatName` instance -> returned as-is
        - strings are trimmed and lowercased before lookup
        - `None` or unknown strings -> `None`

        Examples
        --------
        >>> FormatName.parse(" Date-Time ")
        <FormatName.DATE_TIME: 'date-time'>
        >>> FormatName.parse("iso8601") is None
        True
        """
        if isinstance(value, FormatName):
            return value
        if value is None:
            return None
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None

    @classmethod
    def names(cls) -> list[str]:
        """All format names, in declaration order."""
        return [member.value for member in cls]

    # --- Introspection helpers --- #

    def is_temporal(self) -> bool:
        """True for formats a date/time object may satisfy without being a string."""
        return self in {FormatName.DATE, FormatName.TIME, FormatName.DATE_TIME}

    def input_type(self) -> str:
        """HTML input type for a string field carrying this format (`text` by default)."""
        return _INPUT_TYPES.get(self, "text")


_INPUT_TYPES: dict[FormatName, str] = {
    FormatName.COLOR: "color",
    FormatName.DATE: "date",
    FormatName.DATE_TIME: "datetime-local",
    FormatName.EMAIL: "email",
    FormatName.URI: "url",
}
