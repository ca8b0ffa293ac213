# src/schemastash/plugins/sinks/local_sink.py
"""Local directory sink plugin for schemastash.

Writes each schema to {output_directory}/{project}/{schema}.avsc|.proto.
"""

import hashlib
import logging
from typing import Any

from schemastash.contracts import ArtifactDescriptor, SchemaRecord
from schemastash.plugins.base import BaseSink
from schemastash.plugins.config_base import OutputDirectoryConfig
from schemastash.plugins.context import PluginContext
from schemastash.storage.local import LocalSchemaStorage

logger = logging.getLogger(__name__)


class LocalSinkConfig(OutputDirectoryConfig):
    """Configuration for local sink plugin."""


class LocalSink(BaseSink):
    """Write schemas to a local directory, one file per schema.

    Returns ArtifactDescriptor with SHA-256 content hash of the written file.

    Config options:
        output_directory: Root directory for schema files (required)
        project: Project whose subdirectory is prepared up front (required)

    The directory tree is validated and created at construction, so a bad
    output directory fails before any schema is processed.
    """

    name = "local"
    plugin_version = "1.0.0"

    def __init__(self, config: dict[str, Any]) -> None:
        super().__init__(config)
        cfg = LocalSinkConfig.from_dict(config)
        self._storage = LocalSchemaStorage.create(cfg.output_directory, cfg.project)

    @property
    def storage(self) -> LocalSchemaStorage:
        return self._storage

    def write(self, schema: SchemaRecord, ctx: PluginContext) -> ArtifactDescriptor:
        """Write one schema file.

        Raises:
            UnsupportedTypeError, MalformedNameError, WriteError: Per schema.
        """
        path = self._storage.save(schema)
        logger.debug("Run %s wrote %s", ctx.run_id, path)
        data = schema.definition.encode("utf-8")
        return ArtifactDescriptor.for_file(
            path=str(path),
            content_hash=hashlib.sha256(data).hexdigest(),
            size_bytes=len(data),
            metadata={"schema": schema.full_name, "type": schema.type.value},
        )

    def flush(self) -> None:
        """Nothing buffered; every write is synced before returning."""
        pass

    def close(self) -> None:
        """No open handles between writes."""
        pass
