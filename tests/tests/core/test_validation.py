#!/usr/bin/env python3
import pytest

from schemaform.core.validation import FieldFormatError, FormatCheckError, FormatCheckResult


def _error(fmt: str, value) -> dict:
    return {"format": {"required_format": fmt, "current_value": value}}


def test_record_counts_passes_and_keeps_failures_in_order():
    result = FormatCheckResult()
    result.record("email", None)
    result.record("site", _error("url", "nope"))
    result.record("ip", _error("ipv4", "1.2.3"))

    assert result.checked == 3
    assert result.passed == 1
    assert len(result) == 2
    assert not result.is_valid()
    assert [failure.field for failure in result] == ["site", "ip"]


def test_failures_keep_structured_errors():
    result = FormatCheckResult()
    result.record("site", _error("url", "nope"))

    (failure,) = list(result)
    assert failure == FieldFormatError("site", _error("url", "nope"))
    assert failure.required_format == "url"
    assert failure.current_value == "nope"
    assert result.form_errors() == {"site": _error("url", "nope")}


def test_messages_render_one_line_per_failure():
    result = FormatCheckResult()
    result.record("site", _error("url", "nope"))
    result.record("when", _error("date", 5))
    assert result.messages() == [
        "site: 'nope' is not a valid 'url'",
        "when: 5 is not a valid 'date'",
    ]


def test_strict_record_raises_with_failure_attached():
    result = FormatCheckResult()
    with pytest.raises(FormatCheckError, match="site: 'nope' is not a valid 'url'") as excinfo:
        result.record("site", _error("url", "nope"), strict=True)
    assert isinstance(excinfo.value, ValueError)
    assert excinfo.value.failure.field == "site"
    assert result.checked == 1
    assert result.is_valid()


def test_strict_record_of_passing_field_does_not_raise():
    result = FormatCheckResult()
    result.record("email", None, strict=True)
    assert result.is_valid()
    assert result.passed == 1


def test_failure_tolerates_malformed_error_mapping():
    failure = FieldFormatError("x", {})
    assert failure.required_format is None
    assert failure.current_value is None


def test_repr_shows_counts():
    result = FormatCheckResult()
    result.record("a", None)
    result.record("b", _error("uuid", "x"))
    assert repr(result) == "<FormatCheckResult valid=False checked=2 failed=1>"
