"""Export engine."""

from schemastash.engine.exporter import SchemaExporter

__all__ = ["SchemaExporter"]
