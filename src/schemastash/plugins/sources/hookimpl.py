"""Hook implementation for built-in source plugins."""

from typing import Any

from schemastash.plugins.hookspecs import hookimpl


class SchemaStashBuiltinSources:
    """Hook implementer for built-in source plugins."""

    @hookimpl
    def schemastash_get_sources(self) -> list[type[Any]]:
        """Return built-in source plugin classes."""
        from schemastash.plugins.sources.json_source import JSONSource

        return [JSONSource]


# Singleton instance for registration
builtin_sources = SchemaStashBuiltinSources()
