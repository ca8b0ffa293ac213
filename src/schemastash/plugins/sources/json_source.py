# src/schemastash/plugins/sources/json_source.py
"""JSON source plugin for schemastash.

Loads schema records from a registry export. Supports JSON array and JSONL
formats, matching the output of `gcloud pubsub schemas list --format=json`.
"""

import json
import logging
from collections.abc import Iterator
from typing import Any, Literal

from schemastash.contracts import SchemaRecord
from schemastash.plugins.base import BaseSource
from schemastash.plugins.config_base import PathConfig
from schemastash.plugins.context import PluginContext

logger = logging.getLogger(__name__)


class JSONSourceConfig(PathConfig):
    """Configuration for JSON source plugin."""

    format: Literal["json", "jsonl"] | None = None
    data_key: str | None = None
    encoding: str = "utf-8"


class JSONSource(BaseSource):
    """Load schemas from a JSON or JSONL registry export.

    Config options:
        path: Path to JSON file (required)
        format: "json" (array) or "jsonl" (lines). Auto-detected from extension if not set.
        data_key: Key to extract the array from a JSON object (e.g., "schemas")
        encoding: File encoding (default: "utf-8")

    Each entry needs name and definition; type and revisionId are optional.
    """

    name = "json"
    plugin_version = "1.0.0"

    def __init__(self, config: dict[str, Any]) -> None:
        super().__init__(config)
        cfg = JSONSourceConfig.from_dict(config)

        self._path = cfg.resolved_path()
        self._encoding = cfg.encoding
        self._data_key = cfg.data_key

        # Auto-detect format from extension if not specified
        fmt = cfg.format
        if fmt is None:
            fmt = "jsonl" if self._path.suffix == ".jsonl" else "json"
        self._format = fmt

    def load(self, ctx: PluginContext) -> Iterator[SchemaRecord]:
        """Load schema records from the JSON file.

        Yields:
            SchemaRecord for each entry.

        Raises:
            FileNotFoundError: If file does not exist.
            ValueError: If JSON is not an array, or an entry lacks name/definition.
        """
        if not self._path.exists():
            raise FileNotFoundError(f"JSON file not found: {self._path}")

        logger.debug(
            "Run %s loading schemas from %s (%s)", ctx.run_id, self._path, self._format
        )
        if self._format == "jsonl":
            entries = self._load_jsonl()
        else:
            entries = self._load_json_array()

        for index, entry in enumerate(entries):
            yield self._to_record(index, entry)

    def _load_jsonl(self) -> Iterator[Any]:
        """Load from JSONL format (one JSON object per line)."""
        with open(self._path, encoding=self._encoding) as f:
            for line in f:
                line = line.strip()
                if line:  # Skip empty lines
                    yield json.loads(line)

    def _load_json_array(self) -> Iterator[Any]:
        """Load from JSON array format."""
        with open(self._path, encoding=self._encoding) as f:
            data = json.load(f)

        # Extract from nested key if specified
        if self._data_key:
            data = data[self._data_key]

        if not isinstance(data, list):
            raise ValueError(f"Expected JSON array, got {type(data).__name__}")

        yield from data

    def _to_record(self, index: int, entry: Any) -> SchemaRecord:
        if not isinstance(entry, dict):
            raise ValueError(
                f"Schema entry {index} in {self._path} must be an object, "
                f"got {type(entry).__name__}"
            )
        try:
            return SchemaRecord.from_registry_dict(entry)
        except ValueError as e:
            raise ValueError(f"Schema entry {index} in {self._path}: {e}") from e

    def close(self) -> None:
        """No resources to release; files are closed after reading."""
        pass
