# src/schemastash/plugins/base.py
"""Base classes for plugin implementations.

These provide common functionality and ensure proper interface compliance.
Plugins can subclass these for convenience, or implement protocols directly.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any

from schemastash.contracts import ArtifactDescriptor, SchemaRecord
from schemastash.plugins.context import PluginContext


class BaseSink(ABC):
    """Base class for sink plugins.

    Subclass and implement write(), flush(), close().

    Example:
        class PrintSink(BaseSink):
            name = "print"

            def write(self, schema: SchemaRecord, ctx: PluginContext) -> ArtifactDescriptor:
                data = schema.definition.encode()
                print(schema.definition)
                return ArtifactDescriptor.for_file(
                    path="/dev/stdout",
                    content_hash=hashlib.sha256(data).hexdigest(),
                    size_bytes=len(data),
                )

            def flush(self) -> None:
                sys.stdout.flush()

            def close(self) -> None:
                pass
    """

    name: str
    plugin_version: str = "0.0.0"

    def __init__(self, config: dict[str, Any]) -> None:
        """Initialize with configuration."""
        self.config = config

    @abstractmethod
    def write(
        self,
        schema: SchemaRecord,
        ctx: PluginContext,
    ) -> ArtifactDescriptor:
        """Persist a single schema.

        Args:
            schema: Schema record to write
            ctx: Plugin context

        Returns:
            ArtifactDescriptor with content_hash and size_bytes
        """
        ...

    @abstractmethod
    def flush(self) -> None:
        """Flush buffered data."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Close and release resources."""
        ...

    # === Lifecycle Hooks ===
    # These are intentionally empty - optional hooks for subclasses to override

    def on_start(self, ctx: PluginContext) -> None:  # noqa: B027
        """Called before the first write."""

    def on_complete(self, ctx: PluginContext) -> None:  # noqa: B027
        """Called after the last write (before close)."""


class BaseSource(ABC):
    """Base class for source plugins.

    Subclass and implement load() and close().

    Example:
        class StaticSource(BaseSource):
            name = "static"

            def load(self, ctx: PluginContext) -> Iterator[SchemaRecord]:
                yield from self.config["records"]

            def close(self) -> None:
                pass
    """

    name: str
    plugin_version: str = "0.0.0"

    def __init__(self, config: dict[str, Any]) -> None:
        """Initialize with configuration."""
        self.config = config

    @abstractmethod
    def load(self, ctx: PluginContext) -> Iterator[SchemaRecord]:
        """Load and yield schema records.

        Args:
            ctx: Plugin context

        Yields:
            SchemaRecord for each schema
        """
        ...

    @abstractmethod
    def close(self) -> None:
        """Clean up resources."""
        ...

    # === Lifecycle Hooks ===

    def on_start(self, ctx: PluginContext) -> None:  # noqa: B027
        """Called before load()."""

    def on_complete(self, ctx: PluginContext) -> None:  # noqa: B027
        """Called after load() completes (before close)."""
