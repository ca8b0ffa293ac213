# src/schemastash/plugins/context.py
"""Plugin execution context.

The PluginContext carries run metadata to every plugin operation.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class PluginContext:
    """Context passed to every plugin operation.

    Example:
        def write(self, schema: SchemaRecord, ctx: PluginContext) -> ArtifactDescriptor:
            logger.debug("Run %s writing %s", ctx.run_id, schema.full_name)
    """

    run_id: str
    config: dict[str, Any]

    plugin_name: str | None = field(default=None)
