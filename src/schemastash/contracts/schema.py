"""Schema records and registry names.

These types answer: "Which schema is this, and what does it contain?"

A registry name has the canonical form::

    projects/{project}/schemas/{schema}[@{revision}]

The revision suffix is irrelevant for file placement and is stripped
before the name is parsed.
"""

import re
from dataclasses import dataclass
from typing import Any

from schemastash.contracts.enums import SchemaType
from schemastash.contracts.errors import MalformedNameError

# One non-empty, separator-free segment for each of project and schema
_NAME_PATTERN = re.compile(
    r"projects/(?P<project>[^/\\]+)/schemas/(?P<schema>[^/\\]+)"
)

# Segments that would step outside {root}/{project} when used as a path
_RESERVED_SEGMENTS = frozenset({".", ".."})

REVISION_SEPARATOR = "@"


def strip_revision(full_name: str) -> str:
    """Drop any @revision suffix, splitting on the first '@'."""
    return full_name.split(REVISION_SEPARATOR, 1)[0]


@dataclass(frozen=True)
class SchemaName:
    """Parsed registry name of a schema."""

    project: str
    schema: str

    @classmethod
    def parse(cls, name: str) -> "SchemaName":
        """Parse a revision-free registry name.

        Args:
            name: Name in the form projects/{project}/schemas/{schema}

        Returns:
            SchemaName with project and schema id.

        Raises:
            MalformedNameError: If name does not match the grammar, or a
                segment is "." or "..".
        """
        match = _NAME_PATTERN.fullmatch(name)
        if match is None:
            raise MalformedNameError(name)
        project, schema = match.group("project"), match.group("schema")
        if project in _RESERVED_SEGMENTS or schema in _RESERVED_SEGMENTS:
            raise MalformedNameError(name)
        return cls(project=project, schema=schema)

    def __str__(self) -> str:
        return f"projects/{self.project}/schemas/{self.schema}"


@dataclass(frozen=True)
class SchemaRecord:
    """A schema definition as returned by the registry.

    Immutable: produced by a source (or any registry client) and only
    read by storage.
    """

    full_name: str
    type: SchemaType
    definition: str

    @property
    def name(self) -> SchemaName:
        """Parsed name with any revision suffix removed.

        Raises:
            MalformedNameError: If the name does not match the grammar.
        """
        return SchemaName.parse(strip_revision(self.full_name))

    @property
    def revision(self) -> str | None:
        """Revision id carried on the full name, if any."""
        _, sep, revision = self.full_name.partition(REVISION_SEPARATOR)
        return revision if sep else None

    @classmethod
    def from_registry_dict(cls, data: dict[str, Any]) -> "SchemaRecord":
        """Build a record from registry JSON output.

        Accepts the keys used by the registry API and gcloud exports:
        name, type, definition and the optional revisionId. A revisionId is
        appended to the name only when the name does not already carry one.

        Raises:
            ValueError: If name or definition is missing or not a string.
        """
        name = data.get("name")
        if not name:
            raise ValueError("schema entry is missing 'name'")
        if not isinstance(name, str):
            raise ValueError(
                f"schema entry 'name' must be a string, got {type(name).__name__}"
            )
        definition = data.get("definition")
        if definition is None:
            raise ValueError(f"schema entry '{name}' is missing 'definition'")
        if not isinstance(definition, str):
            raise ValueError(
                f"schema entry '{name}' 'definition' must be a string, "
                f"got {type(definition).__name__}"
            )

        revision_id = data.get("revisionId")
        if revision_id and REVISION_SEPARATOR not in name:
            name = f"{name}{REVISION_SEPARATOR}{revision_id}"

        return cls(
            full_name=name,
            type=SchemaType.parse(data.get("type")),
            definition=definition,
        )
