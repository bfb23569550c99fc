"""Record value model for Record Fmt.

Pydantic models for the records handed to formatters. Values are plain
Python objects drawn from a closed set:

    None, bool, str, int, float, IPv4Address/IPv6Address, datetime,
    dict[str, Field] (object) and list[Field] (array)

Plain children of objects and arrays are wrapped into Fields when a
Field is built, so ``Field.of("o", {"a": 1})`` renders like
``Field.from_obj("o", {"a": Field.from_digit("a", 1)})``.

Anything else is rendered through its ``str()`` form by the formatters.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from datetime import datetime
from enum import StrEnum
from ipaddress import IPv4Address, IPv6Address, ip_address
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"

IpAddr = IPv4Address | IPv6Address
ObjectValue = dict[str, "Field"]
Value = Any


class DataType(StrEnum):
    """Metadata tag attached to each field.

    Only IGNORE changes how a field is rendered; the other tags describe
    the value for upstream producers.
    """

    IGNORE = "ignore"
    AUTO = "auto"
    NULL = "null"
    BOOL = "bool"
    CHARS = "chars"
    DIGIT = "digit"
    FLOAT = "float"
    IP = "ip"
    TIME = "time"
    OBJ = "obj"
    ARRAY = "array"

    @classmethod
    def of(cls, value: Value) -> DataType:
        if value is None:
            return cls.NULL
        if isinstance(value, bool):
            return cls.BOOL
        if isinstance(value, str):
            return cls.CHARS
        if isinstance(value, int):
            return cls.DIGIT
        if isinstance(value, float):
            return cls.FLOAT
        if isinstance(value, IPv4Address | IPv6Address):
            return cls.IP
        if isinstance(value, datetime):
            return cls.TIME
        if isinstance(value, Mapping):
            return cls.OBJ
        if isinstance(value, list | tuple):
            return cls.ARRAY
        return cls.AUTO


class Field(BaseModel):
    """A named, tagged value within a record."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    meta: DataType = DataType.AUTO
    value: Any = None

    @field_validator("value")
    @classmethod
    def wrap_children(cls, v: Any) -> Any:
        # Objects and arrays hold Fields; plain children are tagged on the way in.
        if isinstance(v, Mapping):
            return {
                str(k): c if isinstance(c, Field) else cls.of(str(k), c) for k, c in v.items()
            }
        if isinstance(v, list | tuple):
            return [c if isinstance(c, Field) else cls.of("", c) for c in v]
        return v

    @property
    def is_ignored(self) -> bool:
        return self.meta == DataType.IGNORE

    @classmethod
    def of(cls, name: str, value: Value) -> Field:
        return cls(name=name, meta=DataType.of(value), value=value)

    @classmethod
    def from_null(cls, name: str) -> Field:
        return cls(name=name, meta=DataType.NULL, value=None)

    @classmethod
    def from_bool(cls, name: str, value: bool) -> Field:
        return cls(name=name, meta=DataType.BOOL, value=value)

    @classmethod
    def from_chars(cls, name: str, value: str) -> Field:
        return cls(name=name, meta=DataType.CHARS, value=value)

    @classmethod
    def from_digit(cls, name: str, value: int) -> Field:
        return cls(name=name, meta=DataType.DIGIT, value=value)

    @classmethod
    def from_float(cls, name: str, value: float) -> Field:
        return cls(name=name, meta=DataType.FLOAT, value=value)

    @classmethod
    def from_ip(cls, name: str, value: IpAddr | str) -> Field:
        """Accepts an address object or its textual form.

        Raises ValueError if the text is not a valid IPv4/IPv6 address.
        """
        if isinstance(value, str):
            value = ip_address(value)
        return cls(name=name, meta=DataType.IP, value=value)

    @classmethod
    def from_time(cls, name: str, value: datetime) -> Field:
        return cls(name=name, meta=DataType.TIME, value=value)

    @classmethod
    def from_obj(cls, name: str, value: Mapping[str, Any]) -> Field:
        return cls(name=name, meta=DataType.OBJ, value=dict(value))

    @classmethod
    def from_arr(cls, name: str, value: Sequence[Any]) -> Field:
        return cls(name=name, meta=DataType.ARRAY, value=list(value))

    @classmethod
    def ignored(cls, name: str, value: Value = None) -> Field:
        return cls(name=name, meta=DataType.IGNORE, value=value)


class Record(BaseModel):
    """An ordered sequence of fields.

    Field names are not required to be unique; duplicates are rendered
    as given.
    """

    model_config = ConfigDict(frozen=True)

    items: list[Field] = []

    @classmethod
    def of(cls, *fields: Field) -> Record:
        return cls(items=list(fields))

    def visible_items(self) -> Iterator[Field]:
        """Yield the fields that are not tagged IGNORE, in order."""
        return (f for f in self.items if not f.is_ignored)

    def __len__(self) -> int:
        return len(self.items)


def date_from(text: str) -> datetime | None:
    """Parse ``YYYY-MM-DD HH:MM:SS``; returns None if malformed."""
    try:
        return datetime.strptime(text, _DATETIME_FORMAT)
    except ValueError:
        return None
