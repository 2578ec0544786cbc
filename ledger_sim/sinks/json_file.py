"""JSON file sink for exporting ledger snapshots."""

import json
import logging
from pathlib import Path
from typing import Any

from ledger_sim.exceptions import SinkError
from ledger_sim.sinks.serialization import to_dict

logger = logging.getLogger(__name__)


class JsonFileSink:
    """Write each batch to ``<entity_type>.json`` in the output directory."""

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files. Created on the first write.
        pretty : bool
            Pretty-print JSON output.
        """
        self.output_dir = Path(output_dir)
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def path_for(self, entity_type: str) -> Path:
        """Return the file path a batch of ``entity_type`` is written to."""
        return self.output_dir / f"{entity_type}.json"

    def write_batch(self, entity_type: str, records: list[Any]) -> None:
        """Write a batch of records to a JSON file, replacing any previous one."""
        file_path = self.path_for(entity_type)
        data = [to_dict(record) for record in records]

        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            with open(file_path, "w", encoding="utf-8") as f:
                if self.pretty:
                    json.dump(data, f, indent=2, ensure_ascii=False, default=str)
                else:
                    json.dump(data, f, ensure_ascii=False, default=str)
        except OSError as exc:
            raise SinkError(f"Cannot write {file_path}: {exc}") from exc

        logger.info("Wrote %d %s records to %s", len(records), entity_type, file_path)
        self._counts[entity_type] = len(records)

    def close(self) -> None:
        """Print summary."""
        print(f"JSON files written to: {self.output_dir}")
        for entity_type, count in self._counts.items():
            print(f"  {entity_type}: {count} records")
