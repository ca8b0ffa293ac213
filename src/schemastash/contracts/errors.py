"""Error taxonomy for schema persistence.

ConfigurationError is fatal to a whole run and is raised before any
schema is processed. The remaining errors are fatal only to the save of
a single schema; the caller decides whether to abort or skip.
"""

from pathlib import Path


class SchemaStashError(Exception):
    """Base class for all schemastash errors."""


class ConfigurationError(SchemaStashError):
    """Raised when the output directory cannot be used or created."""


class UnsupportedTypeError(SchemaStashError):
    """Raised when a schema's type is neither AVRO nor PROTOCOL_BUFFER."""

    def __init__(self, schema_type: str) -> None:
        self.schema_type = schema_type
        super().__init__(
            f"Only Avro and Protocol Buffer schemas are supported (got {schema_type})"
        )


class MalformedNameError(SchemaStashError, ValueError):
    """Raised when a registry name is not projects/{project}/schemas/{schema}."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Schema name '{name}' does not match projects/{{project}}/schemas/{{schema}}"
        )


class WriteError(SchemaStashError):
    """Raised when writing a schema definition to disk fails.

    The underlying OSError is chained as __cause__.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Could not write schema to {path}: {reason}")
