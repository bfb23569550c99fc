"""Tests for the key-value formatter."""

from datetime import datetime
from ipaddress import ip_address

import pytest

from record_fmt.core.models import Field, Record
from record_fmt.formatters.kv import KeyValue


@pytest.mark.unit
def test_kv_defaults():
    f = KeyValue()
    assert f.pair_separator == ", "
    assert f.key_value_separator == ": "
    assert f.quote_strings is True


@pytest.mark.unit
def test_kv_builders_return_new_instances():
    base = KeyValue()
    custom = base.with_pair_separator("&").with_key_value_separator("=").with_quote_strings(False)
    assert base.pair_separator == ", "
    assert (custom.pair_separator, custom.key_value_separator, custom.quote_strings) == (
        "&",
        "=",
        False,
    )


@pytest.mark.unit
class TestKvScalars:
    def test_null_is_empty(self):
        assert KeyValue().format_null() == ""

    def test_quoted_string(self):
        assert KeyValue().format_string("Alice") == '"Alice"'

    def test_quoted_string_escapes_quotes(self):
        assert KeyValue().format_string('say "hi"') == '"say \\"hi\\""'

    def test_unquoted_string(self):
        assert KeyValue(quote_strings=False).format_string('say "hi"') == 'say "hi"'

    def test_numbers_and_bools(self):
        f = KeyValue()
        assert f.format_i64(7) == "7"
        assert f.format_f64(2.5) == "2.5"
        assert f.format_bool(True) == "true"

    def test_ip_and_datetime_unquoted(self):
        f = KeyValue()
        assert f.format_ip(ip_address("10.0.0.1")) == "10.0.0.1"
        assert f.format_datetime(datetime(2024, 1, 15, 10, 30, 45)) == "2024-01-15 10:30:45"


@pytest.mark.unit
class TestKvContainers:
    def test_object_keys_follow_string_rule(self):
        obj = {"a": Field.from_digit("a", 1), "b": Field.from_chars("b", "x")}
        assert KeyValue().format_object(obj) == '{"a": 1, "b": "x"}'

    def test_object_unquoted(self):
        obj = {"a": Field.from_digit("a", 1), "b": Field.from_chars("b", "x")}
        assert KeyValue(quote_strings=False).format_object(obj) == "{a: 1, b: x}"

    def test_object_custom_separators(self):
        obj = {"a": Field.from_digit("a", 1), "b": Field.from_digit("b", 2)}
        f = KeyValue(pair_separator=";", key_value_separator="=", quote_strings=False)
        assert f.format_object(obj) == "{a=1;b=2}"

    def test_array(self):
        arr = [Field.from_digit("", 1), Field.from_chars("", "x")]
        assert KeyValue().format_array(arr) == '[1, "x"]'


@pytest.mark.unit
def test_kv_record_default_config():
    record = Record.of(Field.from_chars("name", "Alice"))
    assert KeyValue().format_record(record) == 'name: "Alice"'


@pytest.mark.unit
def test_kv_record_joins_with_pair_separator():
    record = Record.of(
        Field.from_chars("name", "Alice"),
        Field.ignored("password", "hunter2"),
        Field.from_digit("age", 30),
    )
    assert KeyValue().format_record(record) == 'name: "Alice", age: 30'


@pytest.mark.unit
def test_kv_record_unquoted():
    record = Record.of(Field.from_chars("msg", 'He said "hi"'), Field.from_digit("n", 1))
    f = KeyValue(pair_separator=" ", key_value_separator="=", quote_strings=False)
    assert f.format_record(record) == 'msg=He said "hi" n=1'


@pytest.mark.unit
def test_kv_ignored_only_record_is_empty(ignored_only_record):
    assert KeyValue().format_record(ignored_only_record) == ""
