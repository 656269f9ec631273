#!/usr/bin/env python3
import logging

import pytest
from pydantic import ValidationError

from schemaform.core.options import DateFormatOptions


def test_defaults():
    opts = DateFormatOptions()
    assert opts.date_format == "YYYY-MM-DD"
    assert opts.locale is None


def test_accepts_alias_and_field_name():
    assert DateFormatOptions.coerce({"dateFormat": "MM/DD"}).date_format == "MM/DD"
    assert DateFormatOptions.coerce({"date_format": "DD.MM"}).date_format == "DD.MM"


@pytest.mark.parametrize("raw", [None, "", "   ", 42, ["YYYY"]])
def test_malformed_date_format_falls_back_to_default(raw):
    assert DateFormatOptions.coerce({"dateFormat": raw}).date_format == "YYYY-MM-DD"


def test_template_whitespace_is_preserved():
    assert DateFormatOptions.coerce({"dateFormat": " D MMM "}).date_format == " D MMM "


@pytest.mark.parametrize("raw,expected", [
    (" en-US ", "en-US"),
    ("", None),
    (None, None),
    (7, None),
])
def test_locale_normalization(raw, expected):
    assert DateFormatOptions.coerce({"locale": raw}).locale == expected


def test_unknown_keys_are_ignored():
    opts = DateFormatOptions.coerce({"dateFormat": "YY", "timezone": "UTC"})
    assert opts.date_format == "YY"
    assert not hasattr(opts, "timezone")


def test_coerce_returns_existing_instance():
    opts = DateFormatOptions(dateFormat="D")
    assert DateFormatOptions.coerce(opts) is opts


def test_coerce_non_mapping_uses_defaults(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.DEBUG, logger="schemaform.core.options"):
        opts = DateFormatOptions.coerce("MMMM")
    assert opts == DateFormatOptions()
    assert "Ignoring date options of type str" in caplog.text


def test_options_are_frozen():
    opts = DateFormatOptions()
    with pytest.raises(ValidationError):
        opts.date_format = "D"  # type: ignore[misc]


def test_from_config():
    opts = DateFormatOptions.from_config({"date_format": "D MMM", "locale": "en-GB", "logging": {}})
    assert opts.date_format == "D MMM"
    assert opts.locale == "en-GB"
    assert DateFormatOptions.from_config(None) == DateFormatOptions()


@pytest.mark.parametrize("raw", [
    {"dateFormat": object()},
    {"date_format": b"YYYY"},
    {"locale": 5},
    {1: 2},
])
def test_coerce_never_rejects_a_mapping(raw):
    assert DateFormatOptions.coerce(raw) == DateFormatOptions()
