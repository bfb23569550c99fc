"""Raw formatter: natural text with no quoting or escaping.

Record values are joined by a single space. A value that already ends in
whitespace keeps it, so the joined line can contain doubled spaces.
"""

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
class Raw(BaseDataFormat):
    def format_null(self) -> str:
        return ""

    def format_bool(self, value: bool) -> str:
        return display_bool(value)

    def format_string(self, value: str) -> str:
        return value

    def format_i64(self, value: int) -> str:
        return str(value)

    def format_f64(self, value: float) -> str:
        return display_float(value)

    def format_ip(self, value: IpAddr) -> str:
        return str(value)

    def format_datetime(self, value: datetime) -> str:
        return display_datetime(value)

    def format_object(self, value: ObjectValue) -> str:
        if not value:
            return "{}"
        segments = (f"{k}={self.format_value(v.value)}" for k, v in value.items())
        return f"{{{', '.join(segments)}}}"

    def format_array(self, value: Sequence[Field]) -> str:
        if not value:
            return "[]"
        return f"[{', '.join(self.format_value(f.value) for f in value)}]"

    def format_field(self, field: Field) -> str:
        if isinstance(field.value, str):
            return field.value
        return self.format_value(field.value)

    def format_record(self, record: Record) -> str:
        return " ".join(self.format_field(f) for f in record.visible_items())


registry.register("raw", Raw)
