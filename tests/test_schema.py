"""Tests for loading record types from schema documents."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from textrecords.errors import FieldTypeError, SchemaError
from textrecords.schema import load_record_type, loads_record_type
from textrecords.store import RecordStore

PERSON = """---
name: Person
fields:
  name: string
  id: int
  score: float
  active: bool
---
People known to the system.
"""


class TestLoadsRecordType:
    def test_builds_dataclass(self):
        Person = loads_record_type(PERSON)
        assert dataclasses.is_dataclass(Person)
        assert Person.__name__ == "Person"
        assert [f.name for f in dataclasses.fields(Person)] == ["name", "id", "score", "active"]

    def test_description_from_body(self):
        assert loads_record_type(PERSON).__doc__ == "People known to the system."

    def test_usable_by_store(self):
        store = RecordStore(loads_record_type(PERSON))
        store.parse('{\n name "Ada"\n id "7"\n score "9.5"\n active "yes"\n}')
        record = store.at(0)
        assert (record.name, record.id, record.score, record.active) == ("Ada", 7, 9.5, True)

    def test_missing_fields(self):
        with pytest.raises(SchemaError):
            loads_record_type("---\nname: Empty\n---\n")

    def test_no_frontmatter(self):
        with pytest.raises(SchemaError):
            loads_record_type("just text")

    def test_unknown_type(self):
        with pytest.raises(FieldTypeError):
            loads_record_type("---\nfields:\n  when: datetime\n---\n")

    def test_invalid_field_name(self):
        with pytest.raises(SchemaError):
            loads_record_type("---\nfields:\n  class: str\n---\n")

    def test_default_name(self):
        assert loads_record_type("---\nfields:\n  a: str\n---\n").__name__ == "Record"


    def test_malformed_frontmatter(self):
        with pytest.raises(SchemaError):
            loads_record_type("---\nfields: [a: b\n---\n")


class TestLoadRecordType:
    def test_from_file(self, tmp_path: Path):
        path = tmp_path / "person.md"
        path.write_text(PERSON, encoding="utf-8")
        assert load_record_type(path).__name__ == "Person"

    def test_name_from_filename(self, tmp_path: Path):
        path = tmp_path / "lab-sample.md"
        path.write_text("---\nfields:\n  a: str\n---\n", encoding="utf-8")
        assert load_record_type(path).__name__ == "LabSample"

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(SchemaError):
            load_record_type(tmp_path / "nope.md")
