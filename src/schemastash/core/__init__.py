"""Core infrastructure: configuration and logging setup."""

from schemastash.core.config import (
    SchemaStashSettings,
    SinkSettings,
    SourceSettings,
    load_settings,
)
from schemastash.core.logging import configure_logging, get_logger

__all__ = [
    "SchemaStashSettings",
    "SinkSettings",
    "SourceSettings",
    "configure_logging",
    "get_logger",
    "load_settings",
]
