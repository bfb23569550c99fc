"""Record Fmt: render records as CSV, JSON, KV, raw, proto-text or SQL."""

from record_fmt.core.models import DataType, Field, Record
from record_fmt.formatters import (
    Csv,
    FormatType,
    Json,
    KeyValue,
    ProtoTxt,
    Raw,
    SqlFormat,
    SqlInsert,
    TextFmt,
)

__version__ = "0.1.0"

__all__ = [
    "Csv",
    "DataType",
    "Field",
    "FormatType",
    "Json",
    "KeyValue",
    "ProtoTxt",
    "Raw",
    "Record",
    "SqlFormat",
    "SqlInsert",
    "TextFmt",
    "__version__",
]
