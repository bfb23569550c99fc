"""Tests for exception hierarchy."""

import pytest

from record_fmt.core.exceptions import ConfigError, InputError, RecordFmtError


@pytest.mark.unit
class TestRecordFmtError:
    def test_base_exception(self):
        err = RecordFmtError("test error")
        assert str(err) == "test error"
        assert err.message == "test error"

    def test_is_exception(self):
        assert issubclass(RecordFmtError, Exception)


@pytest.mark.unit
@pytest.mark.parametrize("exc_class", [InputError, ConfigError])
def test_subclasses_inherit_from_base(exc_class):
    err = exc_class("boom")
    assert isinstance(err, RecordFmtError)
    assert err.message == "boom"
