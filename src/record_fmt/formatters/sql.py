"""SQL statement formatter: INSERT, batched INSERT, CREATE TABLE, UPSERT.

Nested objects and arrays are rendered by a nested formatter (JSON by
default) and stored as single-quoted string literals.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from ipaddress import IPv4Address, IPv6Address
from typing import TYPE_CHECKING

import structlog

from record_fmt.core.exceptions import InputError
from record_fmt.formatters.base import (
    BaseDataFormat,
    DataFormat,
    DelegatingFormat,
    display_datetime,
    display_float,
    registry,
)
from record_fmt.formatters.json import Json
from record_fmt.formatters.kinds import TextFmt
from record_fmt.formatters.kv import KeyValue
from record_fmt.formatters.proto import ProtoTxt
from record_fmt.formatters.raw import Raw

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from record_fmt.core.models import Field, IpAddr, ObjectValue, Record, Value

_NESTED_FORMATTERS: dict[TextFmt, type[DataFormat]] = {
    TextFmt.JSON: Json,
    TextFmt.KV: KeyValue,
    TextFmt.RAW: Raw,
    TextFmt.PROTO_TEXT: ProtoTxt,
}


@dataclass(frozen=True)
class SqlFormat(DelegatingFormat):
    """Formatter for objects and arrays nested inside SQL literals.

    Limited to JSON, KV, raw and proto-text: CSV cannot represent nested
    structure unambiguously inside a single value.
    """

    inner: DataFormat

    def __post_init__(self) -> None:
        if not isinstance(self.inner, Json | KeyValue | Raw | ProtoTxt):
            msg = (
                f"Unsupported nested formatter: {type(self.inner).__name__}. "
                "Must be Json, KeyValue, Raw or ProtoTxt"
            )
            raise InputError(msg)

    @classmethod
    def from_text_fmt(cls, fmt: TextFmt | str) -> SqlFormat:
        """Build the nested formatter for ``fmt``; CSV and SQL fall back to raw."""
        if isinstance(fmt, str):
            fmt = TextFmt.parse(fmt)
        kind = fmt.canonical
        if kind not in _NESTED_FORMATTERS:
            log = structlog.get_logger()
            log.warning("unsupported nested format, using raw", format=str(fmt))
            kind = TextFmt.RAW
        return cls(_NESTED_FORMATTERS[kind]())


def _default_obj_formatter() -> SqlFormat:
    return SqlFormat(Json())


_SQL_TYPES: tuple[tuple[type | tuple[type, ...], str], ...] = (
    (bool, "BOOLEAN"),
    (str, "TEXT"),
    (int, "BIGINT"),
    (float, "DOUBLE PRECISION"),
    (datetime, "TIMESTAMP"),
    ((IPv4Address, IPv6Address), "INET"),
    ((Mapping, list, tuple), "JSONB"),
)


def sql_type_of(value: Value) -> str:
    """Column type for a value; TEXT when nothing more specific applies."""
    for types, sql_type in _SQL_TYPES:
        if isinstance(value, types):
            return sql_type
    return "TEXT"


@dataclass(frozen=True)
class SqlInsert(BaseDataFormat):
    table_name: str = ""
    quote_identifiers: bool = True
    obj_formatter: SqlFormat = field(default_factory=_default_obj_formatter)

    @classmethod
    def new_with_json(cls, table_name: str) -> SqlInsert:
        return cls(table_name=table_name)

    def quote_identifier(self, name: str) -> str:
        if not self.quote_identifiers:
            return name
        escaped = name.replace('"', '""')
        return f'"{escaped}"'

    @staticmethod
    def _literal(value: str) -> str:
        escaped = value.replace("'", "''")
        return f"'{escaped}'"

    def format_null(self) -> str:
        return "NULL"

    def format_bool(self, value: bool) -> str:
        return "TRUE" if value else "FALSE"

    def format_string(self, value: str) -> str:
        return self._literal(value)

    def format_i64(self, value: int) -> str:
        return str(value)

    def format_f64(self, value: float) -> str:
        if math.isnan(value):
            return "NULL"
        if math.isinf(value):
            return "'Infinity'" if value > 0 else "'-Infinity'"
        return display_float(value)

    def format_ip(self, value: IpAddr) -> str:
        return self._literal(str(value))

    def format_datetime(self, value: datetime) -> str:
        return self._literal(display_datetime(value))

    def format_object(self, value: ObjectValue) -> str:
        return self._literal(self.obj_formatter.format_object(value))

    def format_array(self, value: Sequence[Field]) -> str:
        return self._literal(self.obj_formatter.format_array(value))

    def format_field(self, field: Field) -> str:
        if field.is_ignored:
            return ""
        return self.format_value(field.value)

    def _columns(self, record: Record) -> str:
        return ", ".join(self.quote_identifier(f.name) for f in record.visible_items())

    def _values(self, record: Record) -> str:
        return ", ".join(self.format_field(f) for f in record.visible_items())

    def format_record(self, record: Record) -> str:
        return (
            f"INSERT INTO {self.quote_identifier(self.table_name)} "
            f"({self._columns(record)}) VALUES ({self._values(record)});"
        )

    def format_batch(self, records: Sequence[Record]) -> str:
        """Multi-row INSERT; the column list comes from the first record."""
        if not records:
            return ""
        log = structlog.get_logger()
        log.debug("rendering insert batch", table=self.table_name, rows=len(records))
        header = (
            f"INSERT INTO {self.quote_identifier(self.table_name)} "
            f"({self._columns(records[0])}) VALUES\n"
        )
        rows = ",\n".join(f"  ({self._values(r)})" for r in records)
        return f"{header}{rows};"

    def generate_create_table(self, records: Sequence[Record]) -> str:
        """CREATE TABLE typed from the first record's values."""
        if not records:
            return ""
        columns: dict[str, str] = {}
        for f in records[0].visible_items():
            if f.name not in columns:
                columns[f.name] = sql_type_of(f.value)
        log = structlog.get_logger()
        log.debug("rendering create table", table=self.table_name, columns=len(columns))
        body = ",\n".join(
            f"  {self.quote_identifier(name)} {sql_type}"
            for name, sql_type in columns.items()
        )
        return (
            f"CREATE TABLE IF NOT EXISTS {self.quote_identifier(self.table_name)} "
            f"(\n{body}\n);"
        )

    def format_upsert(self, record: Record, conflict_columns: Iterable[str]) -> str:
        """INSERT ... ON CONFLICT DO UPDATE for every non-conflict column.

        A single column name may be passed as a plain string. Returns the
        plain INSERT when there are no conflict columns or every column is
        a conflict column.
        """
        if isinstance(conflict_columns, str):
            conflicts = [conflict_columns]
        else:
            conflicts = list(conflict_columns)
        insert = self.format_record(record)
        if not conflicts:
            return insert
        updates = []
        for f in record.visible_items():
            if f.name in conflicts:
                continue
            col = self.quote_identifier(f.name)
            updates.append(f"{col} = EXCLUDED.{col}")
        if not updates:
            return insert
        conflict_list = ", ".join(self.quote_identifier(c) for c in conflicts)
        return (
            f"{insert.rstrip(';')} ON CONFLICT ({conflict_list}) "
            f"DO UPDATE SET {', '.join(updates)};"
        )


registry.register("sql", SqlInsert)
