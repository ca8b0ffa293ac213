"""Status codes and kinds shared across subsystem boundaries.

SchemaType mirrors the registry's own type enum. Only AVRO and
PROTOCOL_BUFFER can be persisted; every other arm is carried explicitly
so that new registry types fail loudly at the validation step instead of
being silently dropped.
"""

from enum import Enum

from schemastash.contracts.errors import UnsupportedTypeError


class SchemaType(str, Enum):
    """Type tag of a registry schema.

    Uses (str, Enum) because the value IS the registry's wire tag.
    """

    TYPE_UNSPECIFIED = "TYPE_UNSPECIFIED"
    PROTOCOL_BUFFER = "PROTOCOL_BUFFER"
    AVRO = "AVRO"
    UNRECOGNIZED = "UNRECOGNIZED"

    @classmethod
    def parse(cls, tag: "str | SchemaType | None") -> "SchemaType":
        """Map a raw registry tag onto a SchemaType.

        Unknown tags map to UNRECOGNIZED rather than raising, so the
        decision to reject them stays with the writer.

        Args:
            tag: Raw tag as found in registry output (case-insensitive).

        Returns:
            The matching SchemaType arm.
        """
        if isinstance(tag, SchemaType):
            return tag
        if not tag:
            return cls.TYPE_UNSPECIFIED
        try:
            return cls(tag.strip().upper())
        except ValueError:
            return cls.UNRECOGNIZED

    @property
    def is_supported(self) -> bool:
        """Whether schemas of this type can be written to disk."""
        return self in (SchemaType.AVRO, SchemaType.PROTOCOL_BUFFER)

    @property
    def file_suffix(self) -> str:
        """File extension used for schemas of this type.

        Raises:
            UnsupportedTypeError: For any type other than AVRO or PROTOCOL_BUFFER.
        """
        if self is SchemaType.AVRO:
            return ".avsc"
        if self is SchemaType.PROTOCOL_BUFFER:
            return ".proto"
        raise UnsupportedTypeError(self.value)


class ExportStatus(str, Enum):
    """Outcome of a batch export run."""

    COMPLETED = "completed"
    COMPLETED_WITH_ERRORS = "completed_with_errors"
