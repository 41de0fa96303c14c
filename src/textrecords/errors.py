"""Exception hierarchy shared by the parser, the store and the CLI."""

from __future__ import annotations


class TextRecordsError(Exception):
    """Base class for all textrecords errors."""


class ConversionError(TextRecordsError, ValueError):
    """A raw field value could not be converted to the field's declared type."""

    def __init__(
        self,
        raw: str,
        target: type,
        field: str | None = None,
        line_no: int | None = None,
    ) -> None:
        self.raw = raw
        self.target = target
        self.field = field
        self.line_no = line_no
        where = f" for field {field!r}" if field else ""
        if line_no:
            where += f" (line {line_no})"
        super().__init__(f"cannot convert {raw!r} to {target.__name__}{where}")


class FieldTypeError(TextRecordsError, TypeError):
    """A value or annotation does not match what the record type declares."""


class UnknownFieldError(TextRecordsError, KeyError):
    """The named field is not part of the record type."""

    def __init__(self, name: str, record_type: type) -> None:
        self.name = name
        self.record_type = record_type
        super().__init__(f"{record_type.__name__} has no field {name!r}")

    def __str__(self) -> str:
        return self.args[0]


class SchemaError(TextRecordsError):
    """A schema document is missing required metadata or is malformed."""
