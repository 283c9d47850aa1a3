"""JSON file sink for exporting listings to files."""

import json
from pathlib import Path
from typing import Any

from listings.exceptions import SinkError
from listings.logging import get_logger
from listings.sinks.serialization import to_dict

logger = get_logger(__name__)


class JsonFileSink:
    """Output records to one JSON file per entity type."""

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON output.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def write_batch(self, entity_type: str, records: list[Any]) -> Path:
        """Write a batch of records to ``<entity_type>.json``.

        Raises
        ------
        SinkError
            If the file cannot be written.
        """
        file_path = self.output_dir / f"{entity_type}.json"
        data = [to_dict(record) for record in records]

        try:
            with open(file_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2 if self.pretty else None, ensure_ascii=False)
        except OSError as exc:
            raise SinkError(f"Could not write {file_path}: {exc}") from exc

        self._counts[entity_type] = len(records)
        logger.info("Wrote %d %s to %s", len(records), entity_type, file_path)
        return file_path

    def close(self) -> None:
        """Print summary."""
        print(f"JSON files written to: {self.output_dir}")
        for entity_type, count in self._counts.items():
            print(f"  {entity_type}: {count} records")
