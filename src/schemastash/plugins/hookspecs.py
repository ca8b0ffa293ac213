# src/schemastash/plugins/hookspecs.py
"""pluggy hook specifications for schemastash plugins.

Plugins implement these hooks to register themselves with the framework.
The plugin manager calls these hooks during discovery.

Usage (implementing a plugin):
    from schemastash.plugins.hookspecs import hookimpl

    class MyPlugin:
        @hookimpl  # NOT @hookspec - that's for defining specs
        def schemastash_get_sinks(self):
            return [MySink]

Note: @hookspec defines the hook interface (done here).
      @hookimpl marks plugin implementations of those hooks.
"""

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from schemastash.plugins.protocols import SinkProtocol, SourceProtocol

# Project name for pluggy
PROJECT_NAME = "schemastash"

# Hook specification marker
hookspec = pluggy.HookspecMarker(PROJECT_NAME)

# Hook implementation marker (for plugins to use)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class SchemaStashSourceSpec:
    """Hook specifications for source plugins."""

    @hookspec
    def schemastash_get_sources(self) -> list[type["SourceProtocol"]]:  # type: ignore[empty-body]
        """Return source plugin classes.

        Returns:
            List of Source plugin classes (not instances)
        """


class SchemaStashSinkSpec:
    """Hook specifications for sink plugins."""

    @hookspec
    def schemastash_get_sinks(self) -> list[type["SinkProtocol"]]:  # type: ignore[empty-body]
        """Return sink plugin classes.

        Returns:
            List of Sink plugin classes
        """
