"""Exception hierarchy for Record Fmt.

Rendering never raises; these errors come from building formatters
and loading their configuration.
"""


class RecordFmtError(Exception):
    """Base exception for all Record Fmt errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InputError(RecordFmtError):
    """Invalid formatter arguments, unsupported operation for a format."""


class ConfigError(RecordFmtError):
    """Malformed config, unknown format name, bad log level."""
