"""Logging setup for listing generation and the store.

Store and seeding calls attach the listing they touch through the
standard ``extra=`` argument, e.g.
``logger.debug("Updated property %s", slug, extra={"slug": slug})``.
The JSON formatter emits those attributes as top-level keys so log
lines can be filtered by slug.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Attributes every LogRecord carries; anything else came in through extra=
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
    stream: TextIO | None = None,
) -> None:
    """Install a single stream handler on the root logger.

    Parameters
    ----------
    level : str
        Level name, case-insensitive. Unknown names fall back to INFO.
    format_type : str
        ``"standard"`` for pipe-separated text, ``"json"`` for one JSON
        object per line.
    stream : TextIO, optional
        Destination, stdout by default.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(fmt=STANDARD_FORMAT, datefmt=DATE_FORMAT)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    logging.getLogger("listings").setLevel(log_level)

    # Faker logs every provider lookup at DEBUG
    logging.getLogger("faker").setLevel(logging.WARNING)


class JsonFormatter(logging.Formatter):
    """One JSON object per record, including ``extra=`` attributes."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(extra_fields(record))

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Attributes set on ``record`` through ``extra=``."""
    return {
        key: value
        for key, value in vars(record).items()
        if key not in _RECORD_ATTRS and not key.startswith("_")
    }


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
