"""Operation outcomes and results.

These types answer: "What did an operation produce?"

ArtifactDescriptor content_hash and size_bytes are REQUIRED so a written
schema file can be verified after the fact.
"""

from dataclasses import dataclass, field
from typing import Literal

from schemastash.contracts.enums import ExportStatus


@dataclass(frozen=True)
class ArtifactDescriptor:
    """Descriptor for an artifact written by a sink."""

    artifact_type: Literal["file"]
    path_or_uri: str
    content_hash: str
    size_bytes: int
    metadata: dict[str, object] | None = None

    @classmethod
    def for_file(
        cls,
        path: str,
        content_hash: str,
        size_bytes: int,
        metadata: dict[str, object] | None = None,
    ) -> "ArtifactDescriptor":
        """Create descriptor for file-based artifacts."""
        return cls(
            artifact_type="file",
            path_or_uri=f"file://{path}",
            content_hash=content_hash,
            size_bytes=size_bytes,
            metadata=metadata,
        )


@dataclass(frozen=True)
class SchemaFailure:
    """A schema that could not be persisted."""

    full_name: str
    error: str


@dataclass
class ExportResult:
    """Summary of a batch export run."""

    run_id: str
    status: ExportStatus
    artifacts: list[ArtifactDescriptor] = field(default_factory=list)
    failures: list[SchemaFailure] = field(default_factory=list)

    @property
    def schemas_written(self) -> int:
        return len(self.artifacts)

    @property
    def schemas_failed(self) -> int:
        return len(self.failures)
