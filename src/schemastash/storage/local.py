# src/schemastash/storage/local.py
"""Local filesystem storage for registry schemas.

Writes each schema definition to a predictable path::

    {directory}/{project}/{schema}.avsc
    {directory}/{project}/{schema}.proto

Exactly one file exists per (project, schema, type); saving again
overwrites it. Revisions are ignored for placement.

Example:
    storage = LocalSchemaStorage.create(Path("schemas"), "my-project")
    path = storage.save(record)
"""

import logging
import os
from pathlib import Path

from schemastash.contracts import (
    ConfigurationError,
    MalformedNameError,
    SchemaRecord,
    UnsupportedTypeError,
    WriteError,
)

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


class LocalSchemaStorage:
    """Persist schema definitions below a root directory.

    Use create() to build an instance; it validates and prepares the
    directory tree before any write happens. The instance holds no
    mutable state and may be shared across calls.
    """

    def __init__(self, directory: Path) -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        """Root directory that schema files are written below."""
        return self._directory

    @classmethod
    def create(cls, directory: Path | str, project: str) -> "LocalSchemaStorage":
        """Validate the output directory and create the project subdirectory.

        Args:
            directory: Root output directory (created if missing)
            project: Project identifier, used as subdirectory name

        Returns:
            Storage bound to directory.

        Raises:
            ConfigurationError: If directory exists but is not a directory,
                or if the directories cannot be created.
        """
        root = Path(directory)

        logger.debug("Checking if '%s' exists and is not a directory", root)
        if root.exists() and not root.is_dir():
            raise ConfigurationError(f"outputDirectory must be a directory: {root}")

        project_dir = root / project
        logger.debug("Checking if project directory '%s' exists", project_dir)
        if not project_dir.is_dir():
            logger.debug(
                "Creating output directory '%s' and project '%s' subpath", root, project
            )
            try:
                project_dir.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise ConfigurationError(
                    f"Could not create output directory {root}: {e}"
                ) from e

        return cls(root)

    def location(self, schema: SchemaRecord) -> Path:
        """Compute the output path for a schema without touching the filesystem.

        Raises:
            UnsupportedTypeError: If the schema type is not AVRO or PROTOCOL_BUFFER.
            MalformedNameError: If the name does not parse, or the path it
                maps to is not below the root directory.
        """
        # Type is checked before the name so unsupported types never reach parsing
        if not schema.type.is_supported:
            raise UnsupportedTypeError(schema.type.value)

        name = schema.name
        path = self._directory / name.project / f"{name.schema}{schema.type.file_suffix}"

        # Lexical check only; the root may not exist yet
        root = Path(os.path.normpath(self._directory))
        if Path(os.path.normpath(path)).parent.parent != root:
            raise MalformedNameError(schema.full_name)
        return path

    def save(self, schema: SchemaRecord) -> Path:
        """Write the schema definition to its location, replacing any existing file.

        The definition is encoded before the file is opened, so a definition
        that is not valid UTF-8 leaves any existing file untouched. The file
        is flushed and synced before returning, so the whole definition is on
        disk once this call succeeds.

        Args:
            schema: Schema to persist

        Returns:
            Path of the written file.

        Raises:
            UnsupportedTypeError: If the schema type is not supported.
            MalformedNameError: If the name does not parse.
            WriteError: If the definition cannot be encoded or the file
                cannot be written.
        """
        path = self.location(schema)

        try:
            data = schema.definition.encode(ENCODING)
        except UnicodeEncodeError as e:
            raise WriteError(path, f"definition is not valid {ENCODING}: {e}") from e

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "wb") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
        except OSError as e:
            raise WriteError(path, str(e)) from e

        logger.debug("Wrote %s schema '%s' to %s", schema.type.value, schema.full_name, path)
        return path
