"""Shared serialization utilities for sinks."""

from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any


def to_dict(obj: Any) -> dict:
    """Convert a record to a JSON-ready dictionary.

    Objects exposing ``to_row()`` (such as ``Property``) are converted
    through it so that persistence bookkeeping never leaks into output.
    """
    if hasattr(obj, "to_row"):
        return {key: serialize_value(value) for key, value in obj.to_row().items()}
    elif is_dataclass(obj) and not isinstance(obj, type):
        return {key: serialize_value(value) for key, value in asdict(obj).items()}
    elif isinstance(obj, dict):
        return {key: serialize_value(value) for key, value in obj.items()}
    else:
        return {"value": str(obj)}


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value
