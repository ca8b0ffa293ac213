"""Tests for schema records and registry name parsing."""

import dataclasses

import pytest
from hypothesis import given
from hypothesis import strategies as st

from schemastash.contracts import (
    MalformedNameError,
    SchemaName,
    SchemaRecord,
    SchemaType,
    strip_revision,
)

# Segment alphabet close to what the registry allows for ids
segments = st.text(
    alphabet=st.characters(
        categories=("Ll", "Lu", "Nd"), include_characters="-_."
    ),
    min_size=1,
    max_size=30,
).filter(lambda s: s not in (".", ".."))


class TestStripRevision:
    """Tests for strip_revision."""

    def test_removes_revision(self) -> None:
        assert strip_revision("projects/p1/schemas/s1@3") == "projects/p1/schemas/s1"

    def test_no_revision_is_unchanged(self) -> None:
        assert strip_revision("projects/p1/schemas/s1") == "projects/p1/schemas/s1"

    def test_splits_on_first_at(self) -> None:
        assert strip_revision("projects/p1/schemas/s1@a@b") == "projects/p1/schemas/s1"


class TestSchemaName:
    """Tests for SchemaName.parse."""

    def test_parse_canonical_name(self) -> None:
        name = SchemaName.parse("projects/p1/schemas/s1")

        assert name.project == "p1"
        assert name.schema == "s1"

    def test_str_renders_canonical_form(self) -> None:
        assert str(SchemaName("p1", "s1")) == "projects/p1/schemas/s1"

    @pytest.mark.parametrize(
        "bad_name",
        [
            "",
            "s1",
            "projects/p1",
            "projects/p1/schemas/",
            "projects//schemas/s1",
            "projects/p1/topics/s1",
            "project/p1/schemas/s1",
            "projects/p1/schemas/s1/extra",
            "/projects/p1/schemas/s1",
            "projects/../schemas/escaped",
            "projects/./schemas/s1",
            "projects/p1/schemas/..",
            "projects/p1/schemas/.",
            "projects/p1/schemas/..\\evil",
            "projects/p1\\..\\x/schemas/s1",
        ],
    )
    def test_malformed_names_rejected(self, bad_name: str) -> None:
        with pytest.raises(MalformedNameError) as exc_info:
            SchemaName.parse(bad_name)

        assert exc_info.value.name == bad_name

    def test_malformed_name_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            SchemaName.parse("nope")

    @given(project=segments, schema=segments)
    def test_parse_inverts_str(self, project: str, schema: str) -> None:
        name = SchemaName(project, schema)
        assert SchemaName.parse(str(name)) == name


class TestSchemaRecord:
    """Tests for SchemaRecord."""

    def test_is_frozen(self) -> None:
        record = SchemaRecord("projects/p1/schemas/s1", SchemaType.AVRO, "{}")

        with pytest.raises(dataclasses.FrozenInstanceError):
            record.definition = "changed"  # type: ignore[misc]

    def test_name_ignores_revision(self) -> None:
        record = SchemaRecord("projects/p1/schemas/s1@7", SchemaType.AVRO, "{}")

        assert record.name == SchemaName("p1", "s1")
        assert record.revision == "7"

    def test_revision_absent(self) -> None:
        record = SchemaRecord("projects/p1/schemas/s1", SchemaType.AVRO, "{}")
        assert record.revision is None

    def test_from_registry_dict(self) -> None:
        record = SchemaRecord.from_registry_dict(
            {
                "name": "projects/p1/schemas/s1",
                "type": "PROTOCOL_BUFFER",
                "definition": "syntax = \"proto3\";",
                "revisionId": "abc123",
            }
        )

        assert record.full_name == "projects/p1/schemas/s1@abc123"
        assert record.type is SchemaType.PROTOCOL_BUFFER
        assert record.definition == 'syntax = "proto3";'

    def test_from_registry_dict_keeps_existing_revision(self) -> None:
        record = SchemaRecord.from_registry_dict(
            {
                "name": "projects/p1/schemas/s1@1",
                "type": "AVRO",
                "definition": "{}",
                "revisionId": "2",
            }
        )
        assert record.full_name == "projects/p1/schemas/s1@1"

    def test_from_registry_dict_unknown_type(self) -> None:
        record = SchemaRecord.from_registry_dict(
            {"name": "projects/p1/schemas/s1", "type": "JSON", "definition": "{}"}
        )
        assert record.type is SchemaType.UNRECOGNIZED

    def test_from_registry_dict_missing_name(self) -> None:
        with pytest.raises(ValueError, match="missing 'name'"):
            SchemaRecord.from_registry_dict({"type": "AVRO", "definition": "{}"})

    def test_from_registry_dict_missing_definition(self) -> None:
        with pytest.raises(ValueError, match="missing 'definition'"):
            SchemaRecord.from_registry_dict(
                {"name": "projects/p1/schemas/s1", "type": "AVRO"}
            )

    def test_from_registry_dict_non_string_definition(self) -> None:
        with pytest.raises(ValueError, match="'definition' must be a string, got int"):
            SchemaRecord.from_registry_dict(
                {"name": "projects/p1/schemas/s1", "type": "AVRO", "definition": 42}
            )

    def test_from_registry_dict_non_string_name(self) -> None:
        with pytest.raises(ValueError, match="'name' must be a string, got list"):
            SchemaRecord.from_registry_dict(
                {"name": ["projects/p1/schemas/s1"], "type": "AVRO", "definition": "{}"}
            )

    def test_empty_definition_is_allowed(self) -> None:
        record = SchemaRecord.from_registry_dict(
            {"name": "projects/p1/schemas/s1", "type": "AVRO", "definition": ""}
        )
        assert record.definition == ""
