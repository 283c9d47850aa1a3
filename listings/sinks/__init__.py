"""Output sinks for exporting generated listings."""

from listings.sinks.console import ConsoleSink
from listings.sinks.json_file import JsonFileSink

__all__ = ["ConsoleSink", "JsonFileSink"]
