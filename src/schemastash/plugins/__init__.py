"""Plugin system: protocols, base classes, hooks and the plugin manager."""

from schemastash.plugins.base import BaseSink, BaseSource
from schemastash.plugins.config_base import PluginConfigError
from schemastash.plugins.context import PluginContext
from schemastash.plugins.hookspecs import hookimpl, hookspec
from schemastash.plugins.manager import PluginManager, PluginSpec
from schemastash.plugins.protocols import SinkProtocol, SourceProtocol

__all__ = [
    "BaseSink",
    "BaseSource",
    "PluginConfigError",
    "PluginContext",
    "PluginManager",
    "PluginSpec",
    "SinkProtocol",
    "SourceProtocol",
    "hookimpl",
    "hookspec",
]
