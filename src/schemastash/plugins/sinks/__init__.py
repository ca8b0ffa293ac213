"""Built-in sink plugins for schemastash.

Sinks persist schema records. One sink per run.
"""

from schemastash.plugins.sinks.local_sink import LocalSink

__all__ = ["LocalSink"]
