"""Tests for the raw formatter."""

import pytest

from record_fmt.core.models import Field, Record
from record_fmt.formatters.raw import Raw


@pytest.mark.unit
class TestRawScalars:
    def test_no_quoting(self):
        f = Raw()
        assert f.format_null() == ""
        assert f.format_string('say "hi"') == 'say "hi"'
        assert f.format_bool(False) == "false"
        assert f.format_i64(42) == "42"
        assert f.format_f64(3.0) == "3"


@pytest.mark.unit
class TestRawContainers:
    def test_empty_object(self):
        assert Raw().format_object({}) == "{}"

    def test_object(self):
        obj = {"a": Field.from_digit("a", 1), "b": Field.from_chars("b", "x")}
        assert Raw().format_object(obj) == "{a=1, b=x}"

    def test_empty_array(self):
        assert Raw().format_array([]) == "[]"

    def test_array(self):
        arr = [Field.from_chars("a", "foo"), Field.from_digit("b", 9)]
        assert Raw().format_array(arr) == "[foo, 9]"


@pytest.mark.unit
def test_raw_string_field_verbatim():
    assert Raw().format_field(Field.from_chars("x", "  padded  ")) == "  padded  "


@pytest.mark.unit
def test_raw_keeps_nested_values(nested_record):
    out = Raw().format_record(nested_record)
    assert out == "{inner=7} [foo, 9]"


@pytest.mark.unit
def test_raw_trailing_whitespace_doubles_separator():
    record = Record.of(Field.from_chars("a", "end "), Field.from_chars("b", "_"))
    assert Raw().format_record(record) == "end  _"


@pytest.mark.unit
def test_raw_ignored_only_record_is_empty(ignored_only_record):
    assert Raw().format_record(ignored_only_record) == ""
