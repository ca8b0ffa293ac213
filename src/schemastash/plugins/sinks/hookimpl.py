"""Hook implementation for built-in sink plugins."""

from typing import Any

from schemastash.plugins.hookspecs import hookimpl


class SchemaStashBuiltinSinks:
    """Hook implementer for built-in sink plugins."""

    @hookimpl
    def schemastash_get_sinks(self) -> list[type[Any]]:
        """Return built-in sink plugin classes."""
        from schemastash.plugins.sinks.local_sink import LocalSink

        return [LocalSink]


# Singleton instance for registration
builtin_sinks = SchemaStashBuiltinSinks()
