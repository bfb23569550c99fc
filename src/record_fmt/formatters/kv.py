"""Key-value formatter for records (``name: "value", count: 3``)."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

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
class KeyValue(BaseDataFormat):
    pair_separator: str = ", "
    key_value_separator: str = ": "
    quote_strings: bool = True

    def with_pair_separator(self, separator: str) -> KeyValue:
        return replace(self, pair_separator=separator)

    def with_key_value_separator(self, separator: str) -> KeyValue:
        return replace(self, key_value_separator=separator)

    def with_quote_strings(self, quote: bool) -> KeyValue:
        return replace(self, quote_strings=quote)

    def format_null(self) -> str:
        return ""

    def format_bool(self, value: bool) -> str:
        return display_bool(value)

    def format_string(self, value: str) -> str:
        if not self.quote_strings:
            return value
        escaped = value.replace('"', '\\"')
        return f'"{escaped}"'

    def format_i64(self, value: int) -> str:
        return str(value)

    def format_f64(self, value: float) -> str:
        return display_float(value)

    def format_ip(self, value: IpAddr) -> str:
        return str(value)

    def format_datetime(self, value: datetime) -> str:
        return display_datetime(value)

    def format_object(self, value: ObjectValue) -> str:
        pairs = (
            f"{self.format_string(k)}{self.key_value_separator}{self.format_value(v.value)}"
            for k, v in value.items()
        )
        return f"{{{self.pair_separator.join(pairs)}}}"

    def format_array(self, value: Sequence[Field]) -> str:
        items = (self.format_value(f.value) for f in value)
        return f"[{self.pair_separator.join(items)}]"

    def format_field(self, field: Field) -> str:
        return f"{field.name}{self.key_value_separator}{self.format_value(field.value)}"

    def format_record(self, record: Record) -> str:
        return self.pair_separator.join(
            self.format_field(f) for f in record.visible_items()
        )


registry.register("kv", KeyValue)
