"""Allow `python -m schemastash`."""

from schemastash.cli import app

app()
