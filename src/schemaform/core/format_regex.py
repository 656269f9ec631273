#!/usr/bin/env python3
"""
Format tests for JSON Schema string formats.

Updated from AJV's fast format regular expressions:
https://github.com/epoberezkin/ajv/blob/master/lib/compile/formats.js

Each `FormatName` maps to exactly one matcher:
- `PatternMatcher`: a compiled regex applied with `fullmatch` (a trailing
  newline never satisfies `$`).
- `PredicateMatcher`: a function over the string (only `regex` uses one).

All patterns except `url` are compiled with `re.ASCII`, so `\\d` and
case-insensitive matching only consider ASCII characters. Whitespace is
spelled out as `_WS` / `_NON_WS`, which follow the browser definition of
`\\s` (U+00A0, U+2028, U+FEFF, ...).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Union

from schemaform.core.format_name import FormatName


# --- Matcher variants --- #

@dataclass(frozen=True)
class PatternMatcher:
    """Whole-string regular expression test."""
    pattern: re.Pattern[str]

    def matches(self, value: str) -> bool:
        return self.pattern.fullmatch(value) is not None


@dataclass(frozen=True)
class PredicateMatcher:
    """Arbitrary boolean test over the string."""
    predicate: Callable[[str], bool]

    def matches(self, value: str) -> bool:
        return bool(self.predicate(value))


FormatMatcher = Union[PatternMatcher, PredicateMatcher]


def _pattern(source: str, flags: int = 0) -> PatternMatcher:
    return PatternMatcher(re.compile(source, flags | re.ASCII))


# --- Building blocks --- #

# Whitespace as the browser `\s` defines it: Unicode space separators, line
# terminators and BOM. Python's `\s` under re.ASCII stops at ASCII.
_WS_CHARS = r"\t\n\v\f\r \xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
_WS = r"[" + _WS_CHARS + r"]"
_NON_WS = r"[^" + _WS_CHARS + r"]"
# Any character but a line terminator, like the browser `.`
_NON_EOL = r"[^\n\r\u2028\u2029]"

_OCTET = r"(?:25[0-5]|2[0-4]\d|1\d\d|[1-9]?\d)"
_IPV4_TAIL = r"(?:" + _OCTET + r"(?:\." + _OCTET + r"){3})"
_H16 = r"[0-9a-f]{1,4}"


def _ipv6_source() -> str:
    """
    Full IPv6 grammar: uncompressed, `::`-compressed at every position,
    embedded IPv4 tail, optional `%zone` and surrounding whitespace.

    optimized http://stackoverflow.com/questions/53497/regular-expression-that-matches-valid-ipv6-addresses
    """
    groups = [
        r"(?:(?:" + _H16 + r":){7}(?:" + _H16 + r"|:))",
        r"(?:(?:" + _H16 + r":){6}(?::" + _H16 + r"|" + _IPV4_TAIL + r"|:))",
        r"(?:(?:" + _H16 + r":){5}(?:(?:(?::" + _H16 + r"){1,2})|:" + _IPV4_TAIL + r"|:))",
    ]
    # (head groups, max compressed tail groups, max groups before an IPv4 tail)
    for head, tail_max, v4_max in ((4, 3, 1), (3, 4, 2), (2, 5, 3), (1, 6, 4)):
        v4_repeat = "?" if v4_max == 1 else "{0,%d}" % v4_max
        groups.append(
            r"(?:(?:" + _H16 + r":){%d}" % head
            + r"(?:(?:(?::" + _H16 + r"){1,%d})" % tail_max
            + r"|(?:(?::" + _H16 + r")" + v4_repeat + r":" + _IPV4_TAIL + r")"
            + r"|:))"
        )
    groups.append(
        r"(?::(?:(?:(?::" + _H16 + r"){1,7})"
        + r"|(?:(?::" + _H16 + r"){0,5}:" + _IPV4_TAIL + r")"
        + r"|:))"
    )
    return r"^" + _WS + r"*(?:" + "|".join(groups) + r")(?:%" + _NON_EOL + r"+)?" + _WS + r"*$"


# URL pieces (https://gist.github.com/dperini/729294).
# Any non-whitespace code point, as allowed in user info and paths
_URL_CHAR = (
    r"[\x00-\x08\x0e-\x1f!-\x9f\xa1-\u167f\u1681-\u1fff\u200b-\u2027"
    r"\u202a-\u202e\u2030-\u205e\u2060-\u2fff\u3001-\ufefe\uff00-\U0010ffff]"
)
_HOST_CHAR = r"[0-9a-z\xa1-\U0010ffff]"
_TLD_CHAR = r"[a-z\xa1-\U0010ffff]"
_HOST_LABEL = _HOST_CHAR + r"+(?:-" + _HOST_CHAR + r"+)*"
# Private, loopback and link-local networks are rejected as numeric hosts
_PRIVATE_IPV4_GUARD = (
    r"(?!10(?:\.[0-9]{1,3}){3})"
    r"(?!127(?:\.[0-9]{1,3}){3})"
    r"(?!169\.254(?:\.[0-9]{1,3}){2})"
    r"(?!192\.168(?:\.[0-9]{1,3}){2})"
    r"(?!172\.(?:1[6-9]|2[0-9]|3[01])(?:\.[0-9]{1,3}){2})"
)
_PUBLIC_IPV4 = (
    r"(?:[1-9][0-9]?|1[0-9][0-9]|2[01][0-9]|22[0-3])"
    r"(?:\.(?:1?[0-9]{1,2}|2[0-4][0-9]|25[0-5])){2}"
    r"(?:\.(?:[1-9][0-9]?|1[0-9][0-9]|2[0-4][0-9]|25[0-4]))"
)
_URL_SOURCE = (
    r"^(?:(?:http[s\u017f]?|ftp)://)"
    r"(?:" + _URL_CHAR + r"+(?::" + _URL_CHAR + r"*)?@)?"
    r"(?:" + _PRIVATE_IPV4_GUARD + _PUBLIC_IPV4
    + r"|" + _HOST_LABEL + r"(?:\." + _HOST_LABEL + r")*(?:\." + _TLD_CHAR + r"{2,})"
    + r")"
    r"(?::[0-9]{2,5})?"
    r"(?:/" + _URL_CHAR + r"*)?$"
)


# --- Predicates --- #

_UNSUPPORTED_ANCHOR_RE = re.compile(r"[^\\]\\Z")


def _is_supported_regex(value: str) -> bool:
    """
    Reject patterns using the `\\Z` anchor, which the browser regex dialect
    lacks. Other syntax is not checked.
    """
    return _UNSUPPORTED_ANCHOR_RE.search(value) is None


# --- Format table --- #

FORMAT_TESTS: Mapping[FormatName, FormatMatcher] = MappingProxyType({
    FormatName.DATE: _pattern(r"^\d\d\d\d-[0-1]\d-[0-3]\d$"),
    FormatName.TIME: _pattern(
        r"^[0-2]\d:[0-5]\d:[0-5]\d(?:\.\d+)?(?:z|[+-]\d\d:\d\d)?$", re.IGNORECASE
    ),
    # Also accepts incomplete entries such as "2000-03-14T01:59:26.535"
    # (no offset) or "2000-03-14T01:59" (no seconds)
    FormatName.DATE_TIME: _pattern(
        r"^\d\d\d\d-[0-1]\d-[0-3]\d[t" + _WS_CHARS + r"][0-2]\d:[0-5]\d(?::[0-5]\d)?(?:\.\d+)?"
        r"(?:z|[+-]\d\d:\d\d)?$",
        re.IGNORECASE,
    ),
    # http://www.w3.org/TR/html5/forms.html#valid-e-mail-address
    FormatName.EMAIL: _pattern(
        r"^[a-z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?"
        r"(?:\.[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?)*$",
        re.IGNORECASE,
    ),
    FormatName.HOSTNAME: _pattern(
        r"^[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?(?:\.[a-z0-9](?:[-0-9a-z]{0,61}[0-9a-z])?)*$",
        re.IGNORECASE,
    ),
    FormatName.IPV4: _pattern(
        r"^(?:(?:25[0-5]|2[0-4]\d|[01]?\d\d?)\.){3}(?:25[0-5]|2[0-4]\d|[01]?\d\d?)$"
    ),
    FormatName.IPV6: _pattern(_ipv6_source(), re.IGNORECASE),
    FormatName.URI: _pattern(
        r"^(?:[a-z][a-z0-9+-.]*)(?::|/)/?" + _NON_WS + r"*$", re.IGNORECASE
    ),
    FormatName.URI_REFERENCE: _pattern(
        r"^(?:(?:[a-z][a-z0-9+-.]*:)?//)?" + _NON_WS + r"*$", re.IGNORECASE
    ),
    # https://tools.ietf.org/html/rfc6570
    FormatName.URI_TEMPLATE: _pattern(
        r"^(?:(?:[^\x00-\x20\"'<>%\\^`{|}]|%[0-9a-f]{2})"
        r"|\{[+#./;?&=,!@|]?(?:[a-z0-9_]|%[0-9a-f]{2})+(?::[1-9][0-9]{0,3}|\*)?"
        r"(?:,(?:[a-z0-9_]|%[0-9a-f]{2})+(?::[1-9][0-9]{0,3}|\*)?)*\})*$",
        re.IGNORECASE,
    ),
    # No re.ASCII: host labels may hold any code point above U+00A0
    FormatName.URL: PatternMatcher(re.compile(_URL_SOURCE, re.IGNORECASE)),
    # http://tools.ietf.org/html/rfc4122
    FormatName.UUID: _pattern(
        r"^(?:urn:uuid:)?[0-9a-f]{8}-(?:[0-9a-f]{4}-){3}[0-9a-f]{12}$", re.IGNORECASE
    ),
    FormatName.COLOR: _pattern(
        r"^" + _WS + r"*(#(?:[\da-f]{3}){1,2}|rgb\((?:\d{1,3}," + _WS + r"*){2}\d{1,3}\)"
        r"|rgba\((?:\d{1,3}," + _WS + r"*){3}\d*\.?\d+\)|hsl\(\d{1,3}(?:," + _WS + r"*\d{1,3}%){2}\)"
        r"|hsla\(\d{1,3}(?:," + _WS + r"*\d{1,3}%){2}," + _WS + r"*\d*\.?\d+\))" + _WS + r"*$",
        re.IGNORECASE,
    ),
    # https://tools.ietf.org/html/rfc6901
    FormatName.JSON_POINTER: _pattern(
        r"^(?:/(?:[^~/]|~0|~1)*)*$"
        r"|^#(?:/(?:[a-z0-9_\-.!$&'()*+,;:=@]|%[0-9a-f]{2}|~0|~1)*)*$",
        re.IGNORECASE,
    ),
    FormatName.RELATIVE_JSON_POINTER: _pattern(
        r"^(?:0|[1-9][0-9]*)(?:#|(?:/(?:[^~/]|~0|~1)*)*)$"
    ),
    FormatName.REGEX: PredicateMatcher(_is_supported_regex),
})


def get_format_test(name: str | FormatName | None) -> Optional[FormatMatcher]:
    """Return the matcher for `name`, or None when no validator exists."""
    fmt = FormatName.parse(name)
    return FORMAT_TESTS[fmt] if fmt is not None else None


# --- Runtime guard --- #
def validate_format_tests():
    """
    Ensure every FormatName has exactly one matcher.
    """
    missing = [f.value for f in FormatName if f not in FORMAT_TESTS]
    if missing:
        raise RuntimeError(f"FORMAT_TESTS is missing matcher(s) for: {missing}")

validate_format_tests()
