"""Protobuf-text-like formatter: ``{ name: "value" count: 3 }``."""

from __future__ import annotations

from dataclasses import dataclass
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
class ProtoTxt(BaseDataFormat):
    def format_null(self) -> str:
        return ""

    def format_bool(self, value: bool) -> str:
        return display_bool(value)

    def format_string(self, value: str) -> str:
        escaped = value.replace('"', '\\"')
        return f'"{escaped}"'

    def format_i64(self, value: int) -> str:
        return str(value)

    def format_f64(self, value: float) -> str:
        return display_float(value)

    def format_ip(self, value: IpAddr) -> str:
        return self.format_string(str(value))

    def format_datetime(self, value: datetime) -> str:
        return self.format_string(display_datetime(value))

    def format_object(self, value: ObjectValue) -> str:
        # One line per entry; the caller supplies any enclosing braces.
        return "".join(f"{k}: {self.format_value(v.value)}\n" for k, v in value.items())

    def format_array(self, value: Sequence[Field]) -> str:
        return f"[{', '.join(self.format_value(f.value) for f in value)}]"

    def format_field(self, field: Field) -> str:
        if field.is_ignored:
            return ""
        return f"{field.name}: {self.format_value(field.value)}"

    def format_record(self, record: Record) -> str:
        items = [self.format_field(f) for f in record.visible_items()]
        if not items:
            return "{ }"
        return f"{{ {' '.join(items)} }}"


registry.register("proto-text", ProtoTxt)
