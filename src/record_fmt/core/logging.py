"""Logging configuration using structlog.

Logs go to stderr so rendered records written to stdout stay clean.
"""

import logging
import sys
from typing import Any

import structlog

from record_fmt.core.exceptions import ConfigError

_LOG_LEVELS: dict[str, int] = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


class _LazyStderrFactory:
    """Build PrintLoggers on whatever sys.stderr is when a logger is created.

    Redirecting stderr after setup_logging() (a test capture, a CLI
    wrapper) still reaches the new stream.
    """

    def __call__(self, *args: Any, **kwargs: Any) -> structlog.PrintLogger:
        return structlog.PrintLogger(file=sys.stderr)


def parse_level(level: str) -> int:
    """Map a level name to a stdlib logging level.

    Raises ConfigError for names outside trace/debug/info/warn/error/
    critical.
    """
    key = level.strip().lower()
    if key not in _LOG_LEVELS:
        msg = f"Invalid log level: '{level}'. Must be one of: {', '.join(_LOG_LEVELS)}"
        raise ConfigError(msg)
    return _LOG_LEVELS[key]


def setup_logging(verbose: bool = False, level: str | None = None) -> None:
    """Configure structlog for Record Fmt.

    Args:
        verbose: If True, set log level to DEBUG. Otherwise INFO.
        level: Explicit level name; overrides ``verbose`` when given.
    """
    if level is None:
        level = "debug" if verbose else "info"

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(parse_level(level)),
        context_class=dict,
        logger_factory=_LazyStderrFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger, optionally bound with a name.

    Call this inside functions, after setup_logging() has run.
    """
    logger = structlog.get_logger()
    if name:
        logger = logger.bind(logger=name)
    return logger
