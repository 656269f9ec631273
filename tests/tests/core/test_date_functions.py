#!/usr/bin/env python3
import datetime as dt

import pytest

import schemaform.core.date_functions as df
from schemaform.core.date_functions import (
    date_to_string,
    find_date,
    format_date,
    ordinal,
    parse_date,
    string_to_date,
)
from schemaform.core.options import DateFormatOptions


# --- find_date --- #

@pytest.mark.parametrize("text,expected", [
    ("Order placed 2023-11-05 by user", "2023-11-05"),
    ("stamp: 1999/12/31 ok", "1999/12/31"),
    ("due 11/05/2023.", "11/05/2023"),
    ("11.5.2023", "11.5.2023"),
    ("05-11-23", "05-11-23"),
    ("99-12-05 shipped", "99-12-05"),
    ("20231105", "20231105"),
    ("2023 11 05", "2023 11 05"),
    ("2023\\11\\05", "2023\\11\\05"),
])
def test_find_date(text, expected):
    assert find_date(text) == expected


def test_find_date_prefers_year_first_match():
    assert find_date("11/06/2024 then 2023-11-05") == "2023-11-05"


@pytest.mark.parametrize("text", [
    None, "", "no date here", "see 05-11-23", "x20231105", "2023-11-051", 20231105,
])
def test_find_date_returns_none(text):
    assert find_date(text) is None


# --- string_to_date --- #

@pytest.mark.parametrize("text,expected", [
    ("2023-11-05", dt.date(2023, 11, 5)),
    ("11-05-2023", dt.date(2023, 11, 5)),
    ("20231105", dt.date(2023, 11, 5)),
    ("Invoice date: 2023.11.05", dt.date(2023, 11, 5)),
    ("1/2/2024", dt.date(2024, 1, 2)),
])
def test_string_to_date(text, expected):
    assert string_to_date(text) == expected


def test_string_to_date_two_digit_year_windowing():
    assert string_to_date("05-11-23", reference_year=2024) == dt.date(2023, 5, 11)
    assert string_to_date("05-11-24", reference_year=2024) == dt.date(2024, 5, 11)
    assert string_to_date("05-11-25", reference_year=2024) == dt.date(1925, 5, 11)


def test_string_to_date_ambiguous_parts_prefer_month_day_year():
    assert string_to_date("05-05-05", reference_year=2024) == dt.date(2005, 5, 5)


def test_string_to_date_year_month_day_short_form():
    assert string_to_date("99-12-05", reference_year=2024) == dt.date(1999, 12, 5)


def test_string_to_date_defaults_to_current_year(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(df, "_current_year", lambda: 2030)
    assert string_to_date("01-02-30") == dt.date(2030, 1, 2)
    assert string_to_date("01-02-31") == dt.date(1931, 1, 2)


@pytest.mark.parametrize("text,expected", [
    ("2023-02-31", dt.date(2023, 3, 3)),
    ("2024-02-30", dt.date(2024, 3, 1)),
    ("2023-00-10", dt.date(2022, 12, 10)),
    ("2023-03-00", dt.date(2023, 2, 28)),
])
def test_string_to_date_rolls_over_out_of_range_days(text, expected):
    assert string_to_date(text) == expected


@pytest.mark.parametrize("text", [
    None, "", "not a date", "31-12-2023", "2023-11-051", 12345,
])
def test_string_to_date_returns_none(text):
    assert string_to_date(text) is None


def test_parse_date_is_string_to_date():
    assert parse_date is string_to_date


# --- date_to_string --- #

def test_date_to_string_default_template():
    assert date_to_string(dt.date(2023, 11, 5)) == "2023-11-05"
    assert date_to_string(dt.date(2023, 11, 5), {}) == "2023-11-05"


@pytest.mark.parametrize("template,expected", [
    ("MMMM D, YYYY", "November 5, 2023"),
    ("DDDD, MMMM DS YYYY", "Sunday, November 5th 2023"),
    ("MMM DD YY", "Nov 05 23"),
    ("M/D/YYYY", "11/5/2023"),
    ("yyyy-mm-dd", "2023-11-05"),
    ("ddd", "Sun"),
    ("YYYYMMDD", "20231105"),
])
def test_date_to_string_templates(template, expected):
    assert date_to_string(dt.date(2023, 11, 5), {"dateFormat": template}) == expected


def test_date_to_string_does_not_retokenize_names():
    # "December" and "Wednesday" contain token letters (d, m, s)
    value = dt.date(2023, 12, 13)
    assert date_to_string(value, {"dateFormat": "DDDD MMMM"}) == "Wednesday December"
    assert date_to_string(value, {"dateFormat": "DS"}) == "13th"


@pytest.mark.parametrize("value,expected", [
    (dt.date(2023, 1, 1), "Sun Sunday"),
    (dt.date(2023, 1, 7), "Sat Saturday"),
    (dt.date(2024, 2, 29), "Thu Thursday"),
])
def test_date_to_string_weekdays_are_sunday_first(value, expected):
    assert date_to_string(value, {"dateFormat": "DDD DDDD"}) == expected


def test_date_to_string_accepts_datetime():
    value = dt.datetime(2023, 11, 5, 14, 30)
    assert date_to_string(value) == "2023-11-05"


def test_date_to_string_parses_strings_first():
    assert date_to_string("11/05/2023", {"dateFormat": "MMM D"}) == "Nov 5"


def test_date_to_string_accepts_options_model():
    options = DateFormatOptions(dateFormat="D MMMM YYYY")
    assert date_to_string(dt.date(2023, 11, 5), options) == "5 November 2023"


@pytest.mark.parametrize("options", [
    {"dateFormat": ""},
    {"dateFormat": None},
    {"dateFormat": 42},
    "nonsense",
    None,
])
def test_date_to_string_malformed_options_use_default(options):
    assert date_to_string(dt.date(2023, 11, 5), options) == "2023-11-05"


@pytest.mark.parametrize("value", [None, "garbage", 12345, 3.5, True, ["2023-11-05"]])
def test_date_to_string_returns_none_for_non_dates(value):
    assert date_to_string(value) is None


def test_format_date_is_date_to_string():
    assert format_date is date_to_string


@pytest.mark.parametrize("value", [
    dt.date(1900, 1, 1),
    dt.date(1999, 12, 31),
    dt.date(2000, 2, 29),
    dt.date(2023, 11, 5),
    dt.date(2099, 6, 15),
])
def test_iso_template_round_trip(value):
    rendered = date_to_string(value, {"dateFormat": "YYYY-MM-DD"})
    assert string_to_date(rendered) == value


@pytest.mark.parametrize("value", [
    dt.date(1850, 1, 1),
    dt.date(1899, 12, 31),
    dt.date(2100, 1, 1),
    dt.date(2150, 1, 1),
])
def test_years_outside_1900_2099_render_but_do_not_parse_back(value):
    rendered = date_to_string(value, {"dateFormat": "YYYY-MM-DD"})
    assert rendered == value.isoformat()
    assert find_date(rendered) is None
    assert string_to_date(rendered) is None


# --- ordinal --- #

@pytest.mark.parametrize("number,suffix", [
    (1, "st"), (2, "nd"), (3, "rd"), (4, "th"),
    (11, "th"), (12, "th"), (13, "th"),
    (21, "st"), (22, "nd"), (23, "rd"), (30, "th"), (31, "st"),
    (111, "th"), (101, "st"),
    ("2", "nd"), ("12", "th"),
])
def test_ordinal(number, suffix):
    assert ordinal(number) == suffix
