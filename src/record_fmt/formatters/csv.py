"""Delimiter-separated formatter for records.

Strings are quoted only when they contain the delimiter, a line break or
the quote character. Rows carry values only, never field names.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from record_fmt.core.exceptions import InputError
from record_fmt.formatters.base import (
    BaseDataFormat,
    display_bool,
    display_datetime,
    display_float,
    registry,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import datetime

    from record_fmt.core.models import Field, IpAddr, ObjectValue, Record


@dataclass(frozen=True)
class Csv(BaseDataFormat):
    delimiter: str = ","
    quote_char: str = '"'
    escape_char: str = '"'

    def __post_init__(self) -> None:
        for option in ("delimiter", "quote_char", "escape_char"):
            value = getattr(self, option)
            if len(value) != 1:
                msg = f"Invalid {option}: {value!r}. Must be a single character"
                raise InputError(msg)

    def with_delimiter(self, delimiter: str) -> Csv:
        return replace(self, delimiter=delimiter)

    def with_quote_char(self, quote_char: str) -> Csv:
        return replace(self, quote_char=quote_char)

    def with_escape_char(self, escape_char: str) -> Csv:
        return replace(self, escape_char=escape_char)

    def _escape(self, value: str) -> str:
        needs_quoting = (
            self.delimiter in value
            or "\n" in value
            or "\r" in value
            or self.quote_char in value
        )
        if not needs_quoting:
            return value
        escaped = value.replace(self.quote_char, self.escape_char + self.quote_char)
        return f"{self.quote_char}{escaped}{self.quote_char}"

    def format_null(self) -> str:
        return ""

    def format_bool(self, value: bool) -> str:
        return display_bool(value)

    def format_string(self, value: str) -> str:
        return self._escape(value)

    def format_i64(self, value: int) -> str:
        return str(value)

    def format_f64(self, value: float) -> str:
        return display_float(value)

    def format_ip(self, value: IpAddr) -> str:
        return self._escape(str(value))

    def format_datetime(self, value: datetime) -> str:
        return self._escape(display_datetime(value))

    def format_object(self, value: ObjectValue) -> str:
        return ", ".join(f"{k}:{self.format_value(v.value)}" for k, v in value.items())

    def format_array(self, value: Sequence[Field]) -> str:
        return self._escape(", ".join(self.format_field(f) for f in value))

    def format_field(self, field: Field) -> str:
        return self.format_value(field.value)

    def format_record(self, record: Record) -> str:
        return self.delimiter.join(self.format_field(f) for f in record.visible_items())


registry.register("csv", Csv)
