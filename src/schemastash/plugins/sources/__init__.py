"""Built-in source plugins for schemastash.

Sources produce schema records. One source per run.
"""

from schemastash.plugins.sources.json_source import JSONSource

__all__ = ["JSONSource"]
