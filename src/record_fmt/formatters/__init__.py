"""Output formatters for Record Fmt."""

from record_fmt.formatters.base import (
    BaseDataFormat,
    DataFormat,
    FormatterRegistry,
    StaticDataFormatter,
    registry,
)
from record_fmt.formatters.csv import Csv
from record_fmt.formatters.dispatch import FormatType, build_formatter
from record_fmt.formatters.json import Json
from record_fmt.formatters.kinds import TextFmt
from record_fmt.formatters.kv import KeyValue
from record_fmt.formatters.proto import ProtoTxt
from record_fmt.formatters.raw import Raw
from record_fmt.formatters.sql import SqlFormat, SqlInsert
