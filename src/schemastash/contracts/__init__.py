"""Shared contracts for cross-boundary data types.

All dataclasses, enums and errors that cross subsystem boundaries are
defined here.

Import pattern:
    from schemastash.contracts import SchemaRecord, SchemaType
"""

# isort: skip_file
# Import order is load-bearing: enums imports errors, schema imports enums.

from schemastash.contracts.errors import (
    ConfigurationError,
    MalformedNameError,
    SchemaStashError,
    UnsupportedTypeError,
    WriteError,
)
from schemastash.contracts.enums import (
    ExportStatus,
    SchemaType,
)
from schemastash.contracts.schema import (
    SchemaName,
    SchemaRecord,
    strip_revision,
)
from schemastash.contracts.results import (
    ArtifactDescriptor,
    ExportResult,
    SchemaFailure,
)

__all__ = [
    "ArtifactDescriptor",
    "ConfigurationError",
    "ExportResult",
    "ExportStatus",
    "MalformedNameError",
    "SchemaFailure",
    "SchemaName",
    "SchemaRecord",
    "SchemaStashError",
    "SchemaType",
    "UnsupportedTypeError",
    "WriteError",
    "strip_revision",
]
