# src/schemastash/plugins/protocols.py
"""Plugin protocols defining the contracts for each plugin type.

These protocols define what methods plugins must implement.
They're used for type checking, not runtime enforcement (that's pluggy's job).

Plugin Types:
- Source: Produces schema records (one per run)
- Sink: Persists schema records (one per run)
"""

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from schemastash.contracts import ArtifactDescriptor, SchemaRecord
    from schemastash.plugins.context import PluginContext


@runtime_checkable
class SourceProtocol(Protocol):
    """Protocol for source plugins.

    Sources produce schema records. There is exactly one source per run.

    Lifecycle:
    1. __init__(config) - Plugin instantiation
    2. on_start(ctx) - Called before loading (optional)
    3. load(ctx) - Yields schema records
    4. on_complete(ctx) - Called after loading (optional)
    5. close() - Cleanup

    Example:
        class StaticSource:
            name = "static"

            def load(self, ctx: PluginContext) -> Iterator[SchemaRecord]:
                yield SchemaRecord("projects/p/schemas/s", SchemaType.AVRO, "{}")
    """

    name: str
    plugin_version: str

    def __init__(self, config: dict[str, Any]) -> None:
        """Initialize with configuration."""
        ...

    def load(self, ctx: "PluginContext") -> Iterator["SchemaRecord"]:
        """Load and yield schema records.

        Args:
            ctx: Plugin context with run metadata

        Yields:
            SchemaRecord for each schema
        """
        ...

    def close(self) -> None:
        """Clean up resources.

        Called after all records are loaded or on error.
        """
        ...

    # === Optional Lifecycle Hooks ===

    def on_start(self, ctx: "PluginContext") -> None:
        """Called before load(). Override for setup."""
        ...

    def on_complete(self, ctx: "PluginContext") -> None:
        """Called after load() completes."""
        ...


@runtime_checkable
class SinkProtocol(Protocol):
    """Protocol for sink plugins.

    Sinks persist schema records. Failures are per schema: a sink raises
    for the schema it could not write and stays usable for the next one.

    Lifecycle:
    1. __init__(config) - Plugin instantiation (validates destination)
    2. on_start(ctx) - Called before the first write (optional)
    3. write(schema, ctx) - Called once per schema
    4. flush() / on_complete(ctx) - Called after the last write
    5. close() - Cleanup
    """

    name: str
    plugin_version: str

    def __init__(self, config: dict[str, Any]) -> None:
        """Initialize with configuration."""
        ...

    def write(
        self,
        schema: "SchemaRecord",
        ctx: "PluginContext",
    ) -> "ArtifactDescriptor":
        """Persist a single schema.

        Args:
            schema: Schema record to write
            ctx: Plugin context

        Returns:
            ArtifactDescriptor with content_hash and size_bytes
        """
        ...

    def flush(self) -> None:
        """Flush buffered data."""
        ...

    def close(self) -> None:
        """Close and release resources."""
        ...

    # === Optional Lifecycle Hooks ===

    def on_start(self, ctx: "PluginContext") -> None:
        """Called before the first write."""
        ...

    def on_complete(self, ctx: "PluginContext") -> None:
        """Called after the last write (before close)."""
        ...
