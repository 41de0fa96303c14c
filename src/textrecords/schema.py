"""Record types declared in Markdown schema documents.

A schema document carries the field list in YAML frontmatter; the body is
free-form description:

    ---
    name: Person
    fields:
      firstName: str
      age: int
    ---
    People known to the system.
"""

from __future__ import annotations

import dataclasses
import keyword
import logging
from pathlib import Path

import frontmatter
import yaml

from textrecords.errors import FieldTypeError, SchemaError
from textrecords.fields import get_converter

logger = logging.getLogger(__name__)

TYPE_NAMES: dict[str, type] = {
    "str": str,
    "string": str,
    "int": int,
    "integer": int,
    "float": float,
    "double": float,
    "bool": bool,
    "boolean": bool,
}


def _resolve_type(type_name: object) -> type:
    t = TYPE_NAMES.get(str(type_name).strip().lower())
    if t is None:
        raise FieldTypeError(f"unknown field type in schema: {type_name!r}")
    get_converter(t)
    return t


def record_type_from_metadata(metadata: dict, default_name: str = "Record") -> type:
    """Build a dataclass from a ``fields`` mapping of name -> type name."""
    fields = metadata.get("fields")
    if not isinstance(fields, dict) or not fields:
        raise SchemaError("schema must declare a non-empty 'fields' mapping")

    name = str(metadata.get("name") or default_name)
    if not name.isidentifier():
        raise SchemaError(f"invalid record type name: {name!r}")

    declared = []
    for field_name, type_name in fields.items():
        field_name = str(field_name)
        if not field_name.isidentifier() or keyword.iskeyword(field_name):
            raise SchemaError(f"invalid field name: {field_name!r}")
        declared.append((field_name, _resolve_type(type_name)))

    record_type = dataclasses.make_dataclass(name, declared)
    record_type.__doc__ = str(metadata.get("description") or record_type.__doc__)
    return record_type


def loads_record_type(text: str, default_name: str = "Record") -> type:
    try:
        post = frontmatter.loads(text)
    except yaml.YAMLError as e:
        raise SchemaError(f"malformed schema frontmatter: {e}") from e
    record_type = record_type_from_metadata(dict(post.metadata), default_name)
    if post.content.strip():
        record_type.__doc__ = post.content.strip()
    return record_type


def load_record_type(path: Path | str) -> type:
    """Load a record type from a schema document on disk."""
    path = Path(path)
    if not path.is_file():
        raise SchemaError(f"schema not found: {path}")
    record_type = loads_record_type(path.read_text(encoding="utf-8"), default_name=_default_name(path))
    logger.debug("Loaded record type %s from %s", record_type.__name__, path)
    return record_type


def _default_name(path: Path) -> str:
    stem = "".join(part.capitalize() for part in path.stem.replace("-", "_").split("_"))
    return stem if stem.isidentifier() else "Record"
