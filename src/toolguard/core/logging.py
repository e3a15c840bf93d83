# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Logging for the ``toolguard`` logger tree.

Modules log through ``logging.getLogger("toolguard.<package>.<module>")``;
:func:`setup_logging` attaches a single stderr handler to the ``toolguard``
parent. Matched lines routinely contain the very credentials a pattern
flagged, so both formatters pass messages and tracebacks through
:func:`redact_sensitive`.
"""

from __future__ import annotations

import json
import logging
import re
import sys
from datetime import UTC, datetime
from typing import IO, Any

ROOT_LOGGER = "toolguard"
TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(component)s: %(message)s"

# Each pattern keeps group 1 (a recognisable prefix) and drops the rest.
REDACT_PATTERNS = [
    # API keys and tokens
    re.compile(r"(sk-ant-[a-zA-Z0-9\-]{10})[a-zA-Z0-9\-]*"),
    re.compile(r"(sk-[a-zA-Z0-9]{10})[a-zA-Z0-9]*"),
    re.compile(r"(AKIA[A-Z0-9]{4})[A-Z0-9]{12}"),
    re.compile(r"(ghp_[A-Za-z0-9]{4})[A-Za-z0-9_]{32,}"),
    re.compile(r"(xox[abpr]-[A-Za-z0-9]{4})[A-Za-z0-9\-]*"),
    re.compile(r"(Bearer\s+[a-zA-Z0-9\-._~+/]{10})[a-zA-Z0-9\-._~+/]*"),
    # Assignments seen in config files and hook scripts
    re.compile(
        r"""((?:password|passwd|secret)\s*[:=]\s*["']?)[^"'\s]{4,}""",
        re.IGNORECASE,
    ),
]


def redact_sensitive(text: str) -> str:
    for pattern in REDACT_PATTERNS:
        text = pattern.sub(r"\1[REDACTED]", text)
    return text


def component_name(logger_name: str) -> str:
    """Strip the package prefix: ``toolguard.scanner.walker`` -> ``scanner.walker``."""
    prefix = ROOT_LOGGER + "."
    return logger_name.removeprefix(prefix) if logger_name != ROOT_LOGGER else ROOT_LOGGER


class JsonFormatter(logging.Formatter):
    """One JSON object per line, keyed for log shippers."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "component": component_name(record.name),
            "message": redact_sensitive(record.getMessage()),
        }
        if record.exc_info:
            entry["exception"] = redact_sensitive(self.formatException(record.exc_info))
        return json.dumps(entry)


class TextFormatter(logging.Formatter):
    def __init__(self, fmt: str = TEXT_FORMAT) -> None:
        super().__init__(fmt)

    def format(self, record: logging.LogRecord) -> str:
        record.component = component_name(record.name)
        return redact_sensitive(super().format(record))


def setup_logging(
    level: str = "WARNING",
    fmt: str = "text",
    stream: IO[str] | None = None,
) -> logging.Logger:
    """Configure the ``toolguard`` logger; repeated calls replace the handler.

    Unknown level names fall back to WARNING.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JsonFormatter() if fmt == "json" else TextFormatter())
    logger.addHandler(handler)
    return logger
