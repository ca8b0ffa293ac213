"""Tests for JSON source plugin."""

import json
import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from schemastash.contracts import SchemaType
from schemastash.plugins.config_base import PluginConfigError
from schemastash.plugins.context import PluginContext
from schemastash.plugins.protocols import SourceProtocol
from schemastash.plugins.sources.json_source import JSONSource

ENTRIES = [
    {
        "name": "projects/p1/schemas/orders",
        "type": "AVRO",
        "definition": '{"type": "record", "name": "Order", "fields": []}',
        "revisionId": "a1b2c3",
    },
    {
        "name": "projects/p1/schemas/events",
        "type": "PROTOCOL_BUFFER",
        "definition": 'syntax = "proto3";',
    },
]


class TestJSONSource:
    """Tests for JSONSource plugin."""

    @pytest.fixture
    def ctx(self) -> PluginContext:
        return PluginContext(run_id="test-run", config={})

    def test_implements_protocol(self) -> None:
        source = JSONSource({"path": "/tmp/schemas.json"})
        assert isinstance(source, SourceProtocol)

    def test_has_required_attributes(self) -> None:
        assert JSONSource.name == "json"
        assert JSONSource.plugin_version == "1.0.0"

    def test_load_json_array(
        self, registry_export: Callable[..., Path], ctx: PluginContext
    ) -> None:
        path = registry_export(ENTRIES)

        records = list(JSONSource({"path": str(path)}).load(ctx))

        assert [r.full_name for r in records] == [
            "projects/p1/schemas/orders@a1b2c3",
            "projects/p1/schemas/events",
        ]
        assert [r.type for r in records] == [SchemaType.AVRO, SchemaType.PROTOCOL_BUFFER]
        assert records[1].definition == 'syntax = "proto3";'

    def test_load_jsonl(self, tmp_path: Path, ctx: PluginContext) -> None:
        path = tmp_path / "schemas.jsonl"
        path.write_text(
            "\n".join(json.dumps(e) for e in ENTRIES) + "\n\n", encoding="utf-8"
        )

        records = list(JSONSource({"path": str(path)}).load(ctx))

        assert len(records) == 2

    def test_data_key(self, tmp_path: Path, ctx: PluginContext) -> None:
        path = tmp_path / "schemas.json"
        path.write_text(json.dumps({"schemas": ENTRIES}), encoding="utf-8")

        records = list(JSONSource({"path": str(path), "data_key": "schemas"}).load(ctx))

        assert len(records) == 2

    def test_explicit_format_overrides_extension(
        self, tmp_path: Path, ctx: PluginContext
    ) -> None:
        path = tmp_path / "schemas.txt"
        path.write_text(json.dumps(ENTRIES[0]), encoding="utf-8")

        records = list(JSONSource({"path": str(path), "format": "jsonl"}).load(ctx))

        assert len(records) == 1

    def test_unsupported_type_is_loaded_not_rejected(
        self, registry_export: Callable[..., Path], ctx: PluginContext
    ) -> None:
        path = registry_export(
            [{"name": "projects/p1/schemas/s1", "type": "JSON", "definition": "{}"}]
        )

        records = list(JSONSource({"path": str(path)}).load(ctx))

        assert records[0].type is SchemaType.UNRECOGNIZED

    def test_missing_file(self, tmp_path: Path, ctx: PluginContext) -> None:
        source = JSONSource({"path": str(tmp_path / "missing.json")})

        with pytest.raises(FileNotFoundError):
            list(source.load(ctx))

    def test_non_array_rejected(self, tmp_path: Path, ctx: PluginContext) -> None:
        path = tmp_path / "schemas.json"
        path.write_text(json.dumps({"name": "x"}), encoding="utf-8")

        with pytest.raises(ValueError, match="Expected JSON array"):
            list(JSONSource({"path": str(path)}).load(ctx))

    def test_entry_without_definition_names_index(
        self, registry_export: Callable[..., Path], ctx: PluginContext
    ) -> None:
        path = registry_export([ENTRIES[0], {"name": "projects/p1/schemas/s2"}])

        with pytest.raises(ValueError, match="Schema entry 1"):
            list(JSONSource({"path": str(path)}).load(ctx))

    def test_non_object_entry_rejected(
        self, registry_export: Callable[..., Path], ctx: PluginContext
    ) -> None:
        path = registry_export(["projects/p1/schemas/s1"])

        with pytest.raises(ValueError, match="must be an object"):
            list(JSONSource({"path": str(path)}).load(ctx))

    def test_unknown_option_rejected(self) -> None:
        with pytest.raises(PluginConfigError):
            JSONSource({"path": "schemas.json", "delimiter": ","})

    def test_close_is_idempotent(self) -> None:
        source = JSONSource({"path": "/tmp/schemas.json"})
        source.close()
        source.close()

    def test_non_string_definition_rejected(
        self, registry_export: Callable[..., Path], ctx: PluginContext
    ) -> None:
        path = registry_export(
            [{"name": "projects/p1/schemas/s1", "type": "AVRO", "definition": 7}]
        )

        with pytest.raises(ValueError, match="Schema entry 0 .*must be a string"):
            list(JSONSource({"path": str(path)}).load(ctx))

    def test_load_logs_run_id(
        self,
        registry_export: Callable[..., Path],
        ctx: PluginContext,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        path = registry_export(ENTRIES)

        with caplog.at_level(logging.DEBUG, logger="schemastash.plugins.sources.json_source"):
            list(JSONSource({"path": str(path)}).load(ctx))

        assert any("Run test-run loading" in r.getMessage() for r in caplog.records)
