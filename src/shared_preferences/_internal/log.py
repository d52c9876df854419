"""Logging setup for the stdio host."""

from __future__ import annotations

import json
import logging
import os
import sys


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
            "channel": getattr(record, "channel", None),
        }
        return json.dumps(payload, default=str)


def configure_logging(level: str | int | None = None) -> None:
    """Configure root logging on stderr.

    stdout carries channel replies, so records always go to stderr.  Set
    ``LOG_FORMAT=json`` for structured output.
    """
    if level is None:
        level = os.getenv("LOG_LEVEL", "WARNING")
    if isinstance(level, str):
        level = level.upper()

    handler = logging.StreamHandler(sys.stderr)
    if os.getenv("LOG_FORMAT", "plain").lower() == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s", datefmt="%H:%M:%S")
        )
    logging.basicConfig(level=level, handlers=[handler], force=True)
