"""schemastash: persist schema registry entries as local schema files."""

__version__ = "0.1.0"
