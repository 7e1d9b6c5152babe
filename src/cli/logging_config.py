"""Logging configuration for the nzkp CLI.

Env vars:
    - NZKP_LOG_LEVEL  (default WARNING, --verbose forces DEBUG)
    - NZKP_LOG_FORMAT (text | json)

Only the "src" logger hierarchy is configured; secrets are never passed
to the loggers in full, only truncated parameter prefixes.
"""

import json
import logging
import os
import sys
from dataclasses import dataclass
from typing import Any

PACKAGE_LOGGER = "src"


@dataclass(frozen=True)
class LoggingOptions:
    level: str = "WARNING"
    format: str = "text"  # text | json


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _normalize_format(fmt: str) -> str:
    lowered = fmt.strip().lower()
    if lowered in {"text", "json"}:
        return lowered
    raise ValueError(f"Invalid log format: {fmt}")


def load_logging_options_from_env(verbose: bool = False) -> LoggingOptions:
    level = "DEBUG" if verbose else os.getenv("NZKP_LOG_LEVEL", "WARNING")
    fmt = os.getenv("NZKP_LOG_FORMAT", "text")
    return LoggingOptions(level=level, format=fmt)


def configure_logging(options: LoggingOptions) -> None:
    """Attach a single stderr handler to the package logger.

    Calling it again replaces the previous handler.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, options.level.strip().upper(), logging.WARNING))

    logger.handlers.clear()
    logger.propagate = False

    handler = logging.StreamHandler(sys.stderr)
    if _normalize_format(options.format) == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))

    logger.addHandler(handler)
