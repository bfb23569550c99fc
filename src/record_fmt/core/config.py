"""Configuration management for Record Fmt.

Handles the TOML config file that selects an output format and its
rendering options.

Precedence order (highest to lowest):
1. Explicit overrides (format_name / keyword overrides)
2. Environment variable RECORD_FMT_FORMAT
3. Config file values
4. Built-in defaults
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import structlog
from pydantic import BaseModel, ValidationError, field_validator

from record_fmt.core.exceptions import ConfigError
from record_fmt.core.logging import parse_level
from record_fmt.formatters.kinds import TextFmt

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "record-fmt" / "config.toml"

FORMAT_ENV_VAR = "RECORD_FMT_FORMAT"


def _parse_text_fmt(v: Any) -> Any:
    if isinstance(v, str):
        try:
            return TextFmt.parse(v)
        except ConfigError as e:
            raise ValueError(e.message) from None
    return v


class CsvOptions(BaseModel):
    delimiter: str = ","
    quote_char: str = '"'
    escape_char: str = '"'

    @field_validator("delimiter", "quote_char", "escape_char")
    @classmethod
    def validate_single_char(cls, v: str) -> str:
        if len(v) != 1:
            msg = f"Invalid value: {v!r}. Must be a single character"
            raise ValueError(msg)
        return v


class KvOptions(BaseModel):
    pair_separator: str = ", "
    key_value_separator: str = ": "
    quote_strings: bool = True


class SqlOptions(BaseModel):
    table_name: str = ""
    quote_identifiers: bool = True
    nested_format: TextFmt = TextFmt.JSON

    @field_validator("nested_format", mode="before")
    @classmethod
    def parse_nested_format(cls, v: Any) -> Any:
        return _parse_text_fmt(v)

    @field_validator("nested_format")
    @classmethod
    def validate_nested_format(cls, v: TextFmt) -> TextFmt:
        if v.canonical in (TextFmt.CSV, TextFmt.SQL):
            msg = f"Invalid nested_format: '{v.value}'. Must be one of: json, kv, raw, proto-text"
            raise ValueError(msg)
        return v


class FormatConfig(BaseModel):
    format: TextFmt = TextFmt.JSON
    log_level: str = "info"
    csv: CsvOptions = CsvOptions()
    kv: KvOptions = KvOptions()
    sql: SqlOptions = SqlOptions()

    @field_validator("format", mode="before")
    @classmethod
    def parse_format(cls, v: Any) -> Any:
        return _parse_text_fmt(v)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        try:
            parse_level(v)
        except ConfigError as e:
            raise ValueError(e.message) from None
        return v.strip().lower()


def load_config(config_path: Path | None = None) -> FormatConfig:
    """Load configuration from TOML file.

    Returns default FormatConfig if file doesn't exist.
    Raises ConfigError on malformed TOML or invalid config.
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    log = structlog.get_logger()
    if not config_path.exists():
        log.debug("config file not found, using defaults", path=str(config_path))
        return FormatConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Malformed TOML in {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        config = FormatConfig.model_validate(data)
    except ValidationError as e:
        msg = f"Invalid configuration in {config_path}: {e}"
        raise ConfigError(msg) from e

    log.debug("config loaded", path=str(config_path), format=config.format.value)
    return config


def resolve_config(
    config: FormatConfig,
    format_name: str | None = None,
    **overrides: Any,
) -> FormatConfig:
    """Apply the environment and explicit overrides on top of ``config``.

    ``overrides`` are top-level FormatConfig fields (``log_level``) or
    option blocks given as dicts (``sql={"table_name": "events"}``);
    option blocks are merged key by key.
    Raises ConfigError on unknown format names or invalid values.
    """
    data = config.model_dump()

    env_format = os.environ.get(FORMAT_ENV_VAR)
    if env_format:
        data["format"] = TextFmt.parse(env_format)
    if format_name is not None:
        data["format"] = TextFmt.parse(format_name)

    for key, value in overrides.items():
        if value is None:
            continue
        if key not in FormatConfig.model_fields:
            msg = f"Unknown configuration key: '{key}'"
            raise ConfigError(msg)
        if isinstance(value, dict) and isinstance(data.get(key), dict):
            data[key] = {**data[key], **value}
        else:
            data[key] = value

    try:
        return FormatConfig.model_validate(data)
    except ValidationError as e:
        msg = f"Invalid configuration: {e}"
        raise ConfigError(msg) from e
