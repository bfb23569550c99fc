"""Formatter contracts, registry and shared text forms.

Every formatter renders one value variant per method and dispatches
through ``format_value``. Records are rendered field by field in input
order, skipping fields tagged IGNORE.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Mapping
from datetime import datetime
from decimal import Decimal
from ipaddress import IPv4Address, IPv6Address
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from record_fmt.core.models import Field, IpAddr, ObjectValue, Record, Value


def display_bool(value: bool) -> str:
    return "true" if value else "false"


def display_float(value: float) -> str:
    """Shortest round-trip digits, never in exponent notation.

    Integral values drop the fractional part: 3.0 -> "3", 1e20 ->
    "100000000000000000000".
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return format(Decimal(repr(value)).normalize(), "f")


def display_datetime(value: datetime) -> str:
    """``YYYY-MM-DD HH:MM:SS`` with milli- or microseconds when present."""
    text = value.strftime("%Y-%m-%d %H:%M:%S")
    if value.microsecond:
        if value.microsecond % 1000 == 0:
            text += f".{value.microsecond // 1000:03d}"
        else:
            text += f".{value.microsecond:06d}"
    return text


@runtime_checkable
class DataFormat(Protocol):
    """Protocol for record formatters.

    One method per value variant, one generic dispatcher, and the
    field/record renderers. All methods are pure and never raise.
    """

    def format_null(self) -> str: ...

    def format_bool(self, value: bool) -> str: ...

    def format_string(self, value: str) -> str: ...

    def format_i64(self, value: int) -> str: ...

    def format_f64(self, value: float) -> str: ...

    def format_ip(self, value: IpAddr) -> str: ...

    def format_datetime(self, value: datetime) -> str: ...

    def format_object(self, value: ObjectValue) -> str: ...

    def format_array(self, value: Sequence[Field]) -> str: ...

    def format_value(self, value: Value) -> str: ...

    def format_field(self, field: Field) -> str: ...

    def format_record(self, record: Record) -> str: ...


class BaseDataFormat(ABC):
    """Shared dispatch for formatters that carry configuration."""

    @abstractmethod
    def format_null(self) -> str: ...

    @abstractmethod
    def format_bool(self, value: bool) -> str: ...

    @abstractmethod
    def format_string(self, value: str) -> str: ...

    @abstractmethod
    def format_i64(self, value: int) -> str: ...

    @abstractmethod
    def format_f64(self, value: float) -> str: ...

    @abstractmethod
    def format_ip(self, value: IpAddr) -> str: ...

    @abstractmethod
    def format_datetime(self, value: datetime) -> str: ...

    @abstractmethod
    def format_object(self, value: ObjectValue) -> str: ...

    @abstractmethod
    def format_array(self, value: Sequence[Field]) -> str: ...

    @abstractmethod
    def format_field(self, field: Field) -> str: ...

    @abstractmethod
    def format_record(self, record: Record) -> str: ...

    def format_value(self, value: Value) -> str:
        # bool is a subclass of int, so it must be matched first.
        if value is None:
            return self.format_null()
        if isinstance(value, bool):
            return self.format_bool(value)
        if isinstance(value, str):
            return self.format_string(value)
        if isinstance(value, int):
            return self.format_i64(value)
        if isinstance(value, float):
            return self.format_f64(value)
        if isinstance(value, IPv4Address | IPv6Address):
            return self.format_ip(value)
        if isinstance(value, datetime):
            return self.format_datetime(value)
        if isinstance(value, Mapping):
            return self.format_object(value)
        if isinstance(value, list | tuple):
            return self.format_array(value)
        return self.format_string(str(value))


class StaticDataFormatter(ABC):
    """The formatter contract as classmethods, for formats with no settings.

    Subclasses implement the ``stdfmt_*`` hooks and may be used without
    an instance: ``Json.stdfmt_record(record)``.
    """

    @classmethod
    @abstractmethod
    def stdfmt_null(cls) -> str: ...

    @classmethod
    @abstractmethod
    def stdfmt_bool(cls, value: bool) -> str: ...

    @classmethod
    @abstractmethod
    def stdfmt_string(cls, value: str) -> str: ...

    @classmethod
    @abstractmethod
    def stdfmt_i64(cls, value: int) -> str: ...

    @classmethod
    @abstractmethod
    def stdfmt_f64(cls, value: float) -> str: ...

    @classmethod
    @abstractmethod
    def stdfmt_ip_addr(cls, value: IpAddr) -> str: ...

    @classmethod
    @abstractmethod
    def stdfmt_datetime(cls, value: datetime) -> str: ...

    @classmethod
    @abstractmethod
    def stdfmt_object(cls, value: ObjectValue) -> str: ...

    @classmethod
    @abstractmethod
    def stdfmt_array(cls, value: Sequence[Field]) -> str: ...

    @classmethod
    @abstractmethod
    def stdfmt_field(cls, field: Field) -> str: ...

    @classmethod
    @abstractmethod
    def stdfmt_record(cls, record: Record) -> str: ...

    @classmethod
    def stdfmt_value(cls, value: Value) -> str:
        if value is None:
            return cls.stdfmt_null()
        if isinstance(value, bool):
            return cls.stdfmt_bool(value)
        if isinstance(value, str):
            return cls.stdfmt_string(value)
        if isinstance(value, int):
            return cls.stdfmt_i64(value)
        if isinstance(value, float):
            return cls.stdfmt_f64(value)
        if isinstance(value, IPv4Address | IPv6Address):
            return cls.stdfmt_ip_addr(value)
        if isinstance(value, datetime):
            return cls.stdfmt_datetime(value)
        if isinstance(value, Mapping):
            return cls.stdfmt_object(value)
        if isinstance(value, list | tuple):
            return cls.stdfmt_array(value)
        return cls.stdfmt_string(str(value))


class FormatterRegistry:
    """Registry for looking up formatters by name."""

    def __init__(self) -> None:
        self._formatters: dict[str, type[Any]] = {}

    def register(self, name: str, formatter_class: type[Any]) -> None:
        self._formatters[name] = formatter_class

    def get(self, name: str, **kwargs: object) -> DataFormat:
        """Return a formatter instance by name.

        Raises KeyError if the format name is not registered.
        """
        if name not in self._formatters:
            available = ", ".join(sorted(self._formatters))
            msg = f"Unknown format {name!r}. Available: {available}"
            raise KeyError(msg)
        return self._formatters[name](**kwargs)

    @property
    def available(self) -> list[str]:
        return sorted(self._formatters)


class DelegatingFormat:
    """Forward every contract method to the wrapped ``inner`` formatter."""

    inner: DataFormat

    def format_null(self) -> str:
        return self.inner.format_null()

    def format_bool(self, value: bool) -> str:
        return self.inner.format_bool(value)

    def format_string(self, value: str) -> str:
        return self.inner.format_string(value)

    def format_i64(self, value: int) -> str:
        return self.inner.format_i64(value)

    def format_f64(self, value: float) -> str:
        return self.inner.format_f64(value)

    def format_ip(self, value: IpAddr) -> str:
        return self.inner.format_ip(value)

    def format_datetime(self, value: datetime) -> str:
        return self.inner.format_datetime(value)

    def format_object(self, value: ObjectValue) -> str:
        return self.inner.format_object(value)

    def format_array(self, value: Sequence[Field]) -> str:
        return self.inner.format_array(value)

    def format_value(self, value: Value) -> str:
        return self.inner.format_value(value)

    def format_field(self, field: Field) -> str:
        return self.inner.format_field(field)

    def format_record(self, record: Record) -> str:
        return self.inner.format_record(record)


# Global registry instance populated by formatter modules.
registry = FormatterRegistry()
