# src/schemastash/plugins/manager.py
"""Plugin manager for discovery, registration, and lookup.

Uses pluggy for hook-based plugin registration.
"""

from dataclasses import dataclass
from typing import Any, Literal

import pluggy

from schemastash.plugins.hookspecs import (
    PROJECT_NAME,
    SchemaStashSinkSpec,
    SchemaStashSourceSpec,
)
from schemastash.plugins.protocols import SinkProtocol, SourceProtocol

PluginKind = Literal["source", "sink"]


@dataclass(frozen=True)
class PluginSpec:
    """Registration record for a plugin."""

    name: str
    kind: PluginKind
    version: str
    description: str

    @classmethod
    def from_plugin(cls, plugin_cls: type, kind: PluginKind) -> "PluginSpec":
        """Create spec from plugin class.

        Required attributes (will raise if missing):
        - name: str
        - plugin_version: str

        The description is the first line of the class docstring.

        Raises:
            ValueError: If plugin is missing required 'name' or 'plugin_version' attributes
        """
        try:
            name = plugin_cls.name  # type: ignore[attr-defined]
        except AttributeError:
            raise ValueError(
                f"Plugin {plugin_cls.__name__} must define 'name' attribute. "
                f"Add: name = 'your_plugin_name' to the class."
            ) from None

        try:
            version = plugin_cls.plugin_version  # type: ignore[attr-defined]
        except AttributeError:
            raise ValueError(
                f"Plugin {plugin_cls.__name__} must define 'plugin_version' attribute. "
                f"Add: plugin_version = '1.0.0' to the class."
            ) from None

        doc = (plugin_cls.__doc__ or "").strip()
        description = doc.splitlines()[0].rstrip(".") if doc else ""

        return cls(name=name, kind=kind, version=version, description=description)


def _collect(
    results: list[list[type[Any]]], kind: PluginKind
) -> dict[str, type[Any]]:
    """Flatten hook results into a name -> class map, rejecting duplicates."""
    collected: dict[str, type[Any]] = {}
    for plugins in results:
        for cls in plugins:
            name = cls.name
            if name in collected:
                raise ValueError(
                    f"Duplicate {kind} plugin name: '{name}'. "
                    f"Already registered by {collected[name].__name__}"
                )
            collected[name] = cls
    return collected


class PluginManager:
    """Manages plugin discovery, registration, and lookup.

    Usage:
        manager = PluginManager()
        manager.register_builtin_plugins()

        sink_cls = manager.get_sink_by_name("local")
    """

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)

        self._pm.add_hookspecs(SchemaStashSourceSpec)
        self._pm.add_hookspecs(SchemaStashSinkSpec)

        # Caches - map name to plugin class for duplicate detection
        self._sources: dict[str, type[SourceProtocol]] = {}
        self._sinks: dict[str, type[SinkProtocol]] = {}

    def register_builtin_plugins(self) -> None:
        """Register all built-in plugin hook implementers.

        Call this once at startup to make built-in plugins discoverable.
        """
        from schemastash.plugins.sinks.hookimpl import builtin_sinks
        from schemastash.plugins.sources.hookimpl import builtin_sources

        self.register(builtin_sources)
        self.register(builtin_sinks)

    def register(self, plugin: Any) -> None:
        """Register a plugin.

        Args:
            plugin: Plugin instance implementing hook methods

        Raises:
            ValueError: If a plugin with the same name and kind is already registered
        """
        self._pm.register(plugin)
        try:
            self._refresh_caches()
        except ValueError:
            self._pm.unregister(plugin)
            raise

    def _refresh_caches(self) -> None:
        """Refresh plugin caches from hooks."""
        new_sources = _collect(self._pm.hook.schemastash_get_sources(), "source")
        new_sinks = _collect(self._pm.hook.schemastash_get_sinks(), "sink")

        # All validated, update caches
        self._sources = new_sources
        self._sinks = new_sinks

    # === Getters ===

    def get_sources(self) -> list[type[SourceProtocol]]:
        """Get all registered source plugins."""
        return list(self._sources.values())

    def get_sinks(self) -> list[type[SinkProtocol]]:
        """Get all registered sink plugins."""
        return list(self._sinks.values())

    def get_specs(self) -> list[PluginSpec]:
        """Get registration records for every plugin, sources first."""
        specs = [PluginSpec.from_plugin(cls, "source") for cls in self._sources.values()]
        specs.extend(PluginSpec.from_plugin(cls, "sink") for cls in self._sinks.values())
        return specs

    # === Lookup by name ===

    def get_source_by_name(self, name: str) -> type[SourceProtocol] | None:
        """Get source plugin by name."""
        return self._sources.get(name)

    def get_sink_by_name(self, name: str) -> type[SinkProtocol] | None:
        """Get sink plugin by name."""
        return self._sinks.get(name)
