# src/schemastash/engine/exporter.py
"""Batch export: run one source into one sink.

Per-schema failures (unsupported type, malformed name, write error) either
abort the run or are recorded and skipped, depending on fail_fast.
Configuration errors never reach here: sinks raise them at construction.
"""

import uuid

from schemastash.contracts import (
    ArtifactDescriptor,
    ExportResult,
    ExportStatus,
    MalformedNameError,
    SchemaFailure,
    UnsupportedTypeError,
    WriteError,
)
from schemastash.core.logging import get_logger
from schemastash.plugins.context import PluginContext
from schemastash.plugins.protocols import SinkProtocol, SourceProtocol

logger = get_logger(__name__)

# Errors that are fatal to a single schema only
SCHEMA_ERRORS = (UnsupportedTypeError, MalformedNameError, WriteError)


class SchemaExporter:
    """Write every schema a source produces into a sink.

    Example:
        exporter = SchemaExporter(JSONSource({"path": "schemas.json"}), sink)
        result = exporter.run()
    """

    def __init__(
        self,
        source: SourceProtocol,
        sink: SinkProtocol,
        *,
        fail_fast: bool = True,
        config: dict[str, object] | None = None,
    ) -> None:
        self._source = source
        self._sink = sink
        self._fail_fast = fail_fast
        self._config = dict(config or {})

    def run(self, run_id: str | None = None) -> ExportResult:
        """Execute the export.

        Args:
            run_id: Identifier for this run (generated if omitted)

        Returns:
            ExportResult listing written artifacts and skipped schemas.

        Raises:
            UnsupportedTypeError, MalformedNameError, WriteError: When
                fail_fast is set and a schema cannot be written.
        """
        run_id = run_id or uuid.uuid4().hex
        artifacts: list[ArtifactDescriptor] = []
        failures: list[SchemaFailure] = []
        source_ctx = PluginContext(
            run_id=run_id, config=self._config, plugin_name=self._source.name
        )
        sink_ctx = PluginContext(
            run_id=run_id, config=self._config, plugin_name=self._sink.name
        )

        log = logger.bind(run_id=run_id)
        log.info("Export started", source=self._source.name, sink=self._sink.name)
        try:
            self._source.on_start(source_ctx)
            self._sink.on_start(sink_ctx)

            for schema in self._source.load(source_ctx):
                try:
                    artifact = self._sink.write(schema, sink_ctx)
                except SCHEMA_ERRORS as e:
                    if self._fail_fast:
                        log.error(
                            "Export aborted", schema=schema.full_name, error=str(e)
                        )
                        raise
                    log.warning(
                        "Skipping schema", schema=schema.full_name, error=str(e)
                    )
                    failures.append(SchemaFailure(full_name=schema.full_name, error=str(e)))
                    continue
                artifacts.append(artifact)

            self._source.on_complete(source_ctx)
            self._sink.on_complete(sink_ctx)
            self._sink.flush()
        finally:
            self._sink.close()
            self._source.close()

        result = ExportResult(
            run_id=run_id,
            status=(
                ExportStatus.COMPLETED_WITH_ERRORS if failures else ExportStatus.COMPLETED
            ),
            artifacts=artifacts,
            failures=failures,
        )
        log.info(
            "Export finished",
            status=result.status.value,
            written=result.schemas_written,
            skipped=result.schemas_failed,
        )
        return result
