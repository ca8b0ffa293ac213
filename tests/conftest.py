# tests/conftest.py
"""Shared test fixtures and helpers.

Hypothesis Configuration:
- "ci" profile: Fast tests for CI (100 examples) - default
- "nightly" profile: Thorough tests (1000 examples)
- "debug" profile: Minimal tests with verbose output (10 examples)

Set profile via environment variable:
    HYPOTHESIS_PROFILE=nightly pytest tests/
"""

import json
import logging
import os
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest
import structlog
from hypothesis import Phase, Verbosity, settings

from schemastash.contracts import SchemaRecord, SchemaType

# =============================================================================
# Hypothesis Configuration
# =============================================================================

settings.register_profile(
    "ci",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,  # Disable deadline for CI (timing varies)
)

settings.register_profile(
    "nightly",
    max_examples=1000,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Undo configure_logging() calls made by a test (e.g. through the CLI)."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


AVRO_DEFINITION = json.dumps(
    {
        "type": "record",
        "name": "Order",
        "fields": [{"name": "id", "type": "string"}],
    }
)

PROTO_DEFINITION = 'syntax = "proto3";\nmessage Order {\n  string id = 1;\n}\n'


@pytest.fixture
def avro_schema() -> SchemaRecord:
    """An Avro schema in project p1."""
    return SchemaRecord(
        full_name="projects/p1/schemas/orders",
        type=SchemaType.AVRO,
        definition=AVRO_DEFINITION,
    )


@pytest.fixture
def proto_schema() -> SchemaRecord:
    """A Protocol Buffer schema in project p1."""
    return SchemaRecord(
        full_name="projects/p1/schemas/orders-proto",
        type=SchemaType.PROTOCOL_BUFFER,
        definition=PROTO_DEFINITION,
    )


@pytest.fixture
def registry_export(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing registry entries as a JSON array.

    Mirrors the output of `gcloud pubsub schemas list --format=json`.
    """

    def _write(entries: list[dict[str, Any]], filename: str = "schemas.json") -> Path:
        path = tmp_path / filename
        path.write_text(json.dumps(entries), encoding="utf-8")
        return path

    return _write
