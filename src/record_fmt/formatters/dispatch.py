"""Runtime selection of a formatter by text format name."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import structlog

from record_fmt.core.exceptions import InputError
from record_fmt.formatters.base import DataFormat, DelegatingFormat, registry
from record_fmt.formatters.csv import Csv
from record_fmt.formatters.json import Json
from record_fmt.formatters.kinds import TextFmt
from record_fmt.formatters.kv import KeyValue
from record_fmt.formatters.proto import ProtoTxt
from record_fmt.formatters.raw import Raw
from record_fmt.formatters.sql import SqlFormat, SqlInsert

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from record_fmt.core.config import FormatConfig
    from record_fmt.core.models import Record

_KINDS: tuple[tuple[type, TextFmt], ...] = (
    (Json, TextFmt.JSON),
    (Csv, TextFmt.CSV),
    (KeyValue, TextFmt.KV),
    (Raw, TextFmt.RAW),
    (ProtoTxt, TextFmt.PROTO_TEXT),
    (SqlInsert, TextFmt.SQL),
)


@dataclass(frozen=True)
class FormatType(DelegatingFormat):
    """Holds exactly one concrete formatter and forwards the contract to it."""

    inner: DataFormat

    def __post_init__(self) -> None:
        if not any(isinstance(self.inner, cls) for cls, _ in _KINDS):
            msg = f"Unsupported formatter: {type(self.inner).__name__}"
            raise InputError(msg)

    @classmethod
    def from_text_fmt(cls, fmt: TextFmt | str, **options: object) -> FormatType:
        """Build the formatter registered for ``fmt``.

        Legacy aliases resolve first (show -> raw, proto -> proto-text).
        ``options`` are passed to the formatter's constructor.
        """
        if isinstance(fmt, str):
            fmt = TextFmt.parse(fmt)
        kind = fmt.canonical
        log = structlog.get_logger()
        log.debug("formatter selected", format=kind.value, requested=fmt.value)
        return cls(registry.get(kind.value, **options))

    @property
    def kind(self) -> TextFmt:
        for cls, kind in _KINDS:
            if isinstance(self.inner, cls):
                return kind
        raise AssertionError(type(self.inner))

    def _sql(self, operation: str) -> SqlInsert:
        if not isinstance(self.inner, SqlInsert):
            msg = f"{operation} requires the sql format, not {self.kind.value}"
            raise InputError(msg)
        return self.inner

    def format_batch(self, records: Sequence[Record]) -> str:
        return self._sql("format_batch").format_batch(records)

    def generate_create_table(self, records: Sequence[Record]) -> str:
        return self._sql("generate_create_table").generate_create_table(records)

    def format_upsert(self, record: Record, conflict_columns: Iterable[str]) -> str:
        return self._sql("format_upsert").format_upsert(record, conflict_columns)


def build_formatter(config: FormatConfig) -> FormatType:
    """Build the formatter described by a loaded configuration."""
    kind = config.format.canonical
    options: dict[str, object] = {}
    if kind == TextFmt.CSV:
        options = config.csv.model_dump()
    elif kind == TextFmt.KV:
        options = config.kv.model_dump()
    elif kind == TextFmt.SQL:
        options = {
            "table_name": config.sql.table_name,
            "quote_identifiers": config.sql.quote_identifiers,
            "obj_formatter": SqlFormat.from_text_fmt(config.sql.nested_format),
        }
    return FormatType.from_text_fmt(kind, **options)
