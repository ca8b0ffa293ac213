"""Schema storage backends."""

from schemastash.storage.local import LocalSchemaStorage

__all__ = ["LocalSchemaStorage"]
