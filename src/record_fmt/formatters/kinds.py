"""Names of the text formats a formatter can be selected by."""

from __future__ import annotations

from enum import StrEnum

from record_fmt.core.exceptions import ConfigError


class TextFmt(StrEnum):
    JSON = "json"
    CSV = "csv"
    KV = "kv"
    RAW = "raw"
    PROTO_TEXT = "proto-text"
    SQL = "sql"
    # Legacy aliases kept for older configuration files.
    SHOW = "show"
    PROTO = "proto"

    @property
    def canonical(self) -> TextFmt:
        """Resolve legacy aliases: SHOW -> RAW, PROTO -> PROTO_TEXT."""
        return _ALIASES.get(self, self)

    @classmethod
    def parse(cls, name: str) -> TextFmt:
        """Case-insensitive lookup; ``proto_text`` is accepted for ``proto-text``.

        Raises ConfigError on unknown names.
        """
        key = name.strip().lower().replace("_", "-")
        try:
            return cls(key)
        except ValueError:
            available = ", ".join(f.value for f in cls)
            msg = f"Unknown format '{name}'. Available: {available}"
            raise ConfigError(msg) from None


_ALIASES: dict[TextFmt, TextFmt] = {
    TextFmt.SHOW: TextFmt.RAW,
    TextFmt.PROTO: TextFmt.PROTO_TEXT,
}
