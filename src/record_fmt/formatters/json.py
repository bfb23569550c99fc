"""JSON formatter for records.

Compact output with keys in field order. NaN becomes ``null`` and the
infinities become the strings ``"Infinity"`` / ``"-Infinity"``.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Any

from record_fmt.formatters.base import (
    StaticDataFormatter,
    display_datetime,
    registry,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from record_fmt.core.models import Field, IpAddr, ObjectValue, Record, Value

_SEPARATORS = (",", ":")


def _dumps(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=_SEPARATORS)


def _float_literal(value: float) -> str:
    # 1e+20 -> 1e20, 1e-07 -> 1e-7
    mantissa, sep, exponent = repr(value).partition("e")
    if not sep:
        return mantissa
    return f"{mantissa}e{int(exponent)}"


@dataclass(frozen=True)
class Json(StaticDataFormatter):
    """Stateless JSON formatter.

    Usable through an instance (``Json().format_record(r)``) or through
    the classmethods (``Json.stdfmt_record(r)``).
    """

    @classmethod
    def stdfmt_null(cls) -> str:
        return "null"

    @classmethod
    def stdfmt_bool(cls, value: bool) -> str:
        return _dumps(value)

    @classmethod
    def stdfmt_string(cls, value: str) -> str:
        return _dumps(value)

    @classmethod
    def stdfmt_i64(cls, value: int) -> str:
        return _dumps(value)

    @classmethod
    def stdfmt_f64(cls, value: float) -> str:
        if math.isnan(value):
            return "null"
        if math.isinf(value):
            return _dumps("Infinity" if value > 0 else "-Infinity")
        return _float_literal(value)

    @classmethod
    def stdfmt_ip_addr(cls, value: IpAddr) -> str:
        return _dumps(str(value))

    @classmethod
    def stdfmt_datetime(cls, value: datetime) -> str:
        return _dumps(display_datetime(value))

    @classmethod
    def stdfmt_object(cls, value: ObjectValue) -> str:
        pairs = (f"{cls.stdfmt_string(k)}:{cls.stdfmt_value(f.value)}" for k, f in value.items())
        return f"{{{','.join(pairs)}}}"

    @classmethod
    def stdfmt_array(cls, value: Sequence[Field]) -> str:
        items = [
            cls.stdfmt_string(f.value)
            if isinstance(f.value, str)
            else cls.stdfmt_value(f.value)
            for f in value
        ]
        return f"[{','.join(items)}]"

    @classmethod
    def stdfmt_field(cls, field: Field) -> str:
        if not field.name:
            return cls.stdfmt_value(field.value)
        return f"{cls.stdfmt_string(field.name)}:{cls.stdfmt_value(field.value)}"

    @classmethod
    def stdfmt_record(cls, record: Record) -> str:
        return f"{{{','.join(cls.stdfmt_field(f) for f in record.visible_items())}}}"

    def format_null(self) -> str:
        return self.stdfmt_null()

    def format_bool(self, value: bool) -> str:
        return self.stdfmt_bool(value)

    def format_string(self, value: str) -> str:
        return self.stdfmt_string(value)

    def format_i64(self, value: int) -> str:
        return self.stdfmt_i64(value)

    def format_f64(self, value: float) -> str:
        return self.stdfmt_f64(value)

    def format_ip(self, value: IpAddr) -> str:
        return self.stdfmt_ip_addr(value)

    def format_datetime(self, value: datetime) -> str:
        return self.stdfmt_datetime(value)

    def format_object(self, value: ObjectValue) -> str:
        return self.stdfmt_object(value)

    def format_array(self, value: Sequence[Field]) -> str:
        return self.stdfmt_array(value)

    def format_value(self, value: Value) -> str:
        return self.stdfmt_value(value)

    def format_field(self, field: Field) -> str:
        return self.stdfmt_field(field)

    def format_record(self, record: Record) -> str:
        return self.stdfmt_record(record)


registry.register("json", Json)
