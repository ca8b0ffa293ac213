# src/schemastash/core/config.py
"""
Configuration schema and loading for schemastash exports.

Uses Pydantic for validation and Dynaconf for multi-source loading.
Settings are frozen (immutable) after construction.

Example YAML:
    output_directory: build/schemas
    project: my-project
    source:
      plugin: json
      options:
        path: schemas.json
    fail_fast: false
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

ENVVAR_PREFIX = "SCHEMASTASH"


class SourceSettings(BaseModel):
    """Source plugin configuration."""

    model_config = {"frozen": True}

    plugin: str = Field(default="json", description="Plugin name")
    options: dict[str, Any] = Field(
        default_factory=dict,
        description="Plugin-specific configuration options",
    )


class SinkSettings(BaseModel):
    """Sink plugin configuration.

    output_directory and project are always passed to the sink; options
    are merged on top of them.
    """

    model_config = {"frozen": True}

    plugin: str = Field(default="local", description="Plugin name")
    options: dict[str, Any] = Field(
        default_factory=dict,
        description="Plugin-specific configuration options",
    )


class SchemaStashSettings(BaseModel):
    """Top-level schemastash configuration.

    All settings are validated and frozen after construction.
    """

    model_config = {"frozen": True}

    output_directory: Path = Field(
        description="Root directory that schema files are written below",
    )
    project: str = Field(
        description="Registry project id, used as subdirectory name",
    )
    source: SourceSettings = Field(
        default_factory=SourceSettings,
        description="Where schema records come from",
    )
    sink: SinkSettings = Field(
        default_factory=SinkSettings,
        description="Where schema records are written",
    )
    fail_fast: bool = Field(
        default=True,
        description="Abort the export on the first schema that cannot be written",
    )

    @field_validator("project")
    @classmethod
    def validate_project(cls, v: str) -> str:
        """Project must be a single, non-empty path segment."""
        if not v or not v.strip():
            raise ValueError("project cannot be empty")
        if "/" in v or "\\" in v:
            raise ValueError("project cannot contain path separators")
        return v

    def sink_options(self) -> dict[str, Any]:
        """Options handed to the sink plugin."""
        return {
            "output_directory": str(self.output_directory),
            "project": self.project,
            **self.sink.options,
        }


def load_settings(config_path: Path) -> SchemaStashSettings:
    """Load settings from YAML file with environment variable overrides.

    Uses Dynaconf for multi-source loading with precedence:
    1. Environment variables (SCHEMASTASH_*) - highest priority
    2. Config file (settings.yaml)
    3. Defaults from Pydantic schema - lowest priority

    Environment variable format: SCHEMASTASH_SOURCE__OPTIONS__PATH for nested keys.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated SchemaStashSettings instance

    Raises:
        ValidationError: If configuration fails Pydantic validation
        FileNotFoundError: If config file doesn't exist
    """
    from dynaconf import Dynaconf

    # Explicit check for file existence (Dynaconf silently accepts missing files)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    dynaconf_settings = Dynaconf(
        envvar_prefix=ENVVAR_PREFIX,
        settings_files=[str(config_path)],
        environments=False,  # No [default]/[production] sections
        load_dotenv=False,  # Don't auto-load .env
        merge_enabled=True,  # Deep merge nested dicts
    )

    # Dynaconf returns uppercase keys; convert to lowercase for Pydantic
    # Also filter out internal Dynaconf settings
    internal_keys = {"LOAD_DOTENV", "ENVIRONMENTS", "SETTINGS_FILES"}
    raw_config = {
        k.lower(): v
        for k, v in dynaconf_settings.as_dict().items()
        if k not in internal_keys
    }
    return SchemaStashSettings(**raw_config)
