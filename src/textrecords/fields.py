"""Field descriptors and per-type string converters.

A record type is a dataclass. ``describe()`` turns it into an ordered tuple of
``FieldDescriptor`` once, and everything else (mapping parsed lines, query type
checks, serialization) goes through those descriptors instead of inspecting the
class again.
"""

from __future__ import annotations

import copy
import dataclasses
import re
import typing
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from textrecords.errors import ConversionError, FieldTypeError

_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off"}
_INT_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)


@runtime_checkable
class Converter(Protocol):
    """String conversion for one semantic field type."""

    def parse(self, raw: str) -> Any:
        """Convert a raw text value. Raises ConversionError on bad input."""
        ...

    def format(self, value: Any) -> str: ...

    def zero(self) -> Any: ...


@dataclass(frozen=True)
class SimpleConverter:
    """Converter built from a parse callable, a format callable and a zero value."""

    target: type
    parser: Callable[[str], Any]
    formatter: Callable[[Any], str] = str
    zero_value: Any = None

    def parse(self, raw: str) -> Any:
        try:
            return self.parser(raw)
        except (TypeError, ValueError) as e:
            raise ConversionError(raw, self.target) from e

    def format(self, value: Any) -> str:
        return self.formatter(value)

    def zero(self) -> Any:
        if self.zero_value is None:
            return self.target()
        return copy.copy(self.zero_value)


def _parse_bool(raw: str) -> bool:
    v = raw.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ValueError(f"not a boolean: {raw!r}")


def _parse_int(raw: str) -> int:
    v = raw.strip()
    if not _INT_RE.fullmatch(v):
        raise ValueError(f"not an integer: {raw!r}")
    return int(v)


def _parse_float(raw: str) -> float:
    v = raw.strip()
    if not v.isascii() or "_" in v:
        raise ValueError(f"not a float: {raw!r}")
    return float(v)


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


_CONVERTERS: dict[type, Converter] = {
    str: SimpleConverter(str, str, zero_value=""),
    int: SimpleConverter(int, _parse_int, zero_value=0),
    float: SimpleConverter(float, _parse_float, repr, zero_value=0.0),
    bool: SimpleConverter(bool, _parse_bool, _format_bool, zero_value=False),
}


def register_converter(target: type, converter: Converter) -> None:
    """Make ``target`` usable as a field type."""
    if not isinstance(converter, Converter):
        raise FieldTypeError(f"{converter!r} does not implement parse/format/zero")
    _CONVERTERS[target] = converter


def get_converter(target: type) -> Converter:
    try:
        return _CONVERTERS[target]
    except (KeyError, TypeError):
        raise FieldTypeError(f"unsupported field type: {target!r}") from None


@dataclass(frozen=True)
class FieldDescriptor:
    """Name, declared type and converter of one record field."""

    name: str
    type: type
    converter: Converter

    def parse(self, raw: str, line_no: int | None = None) -> Any:
        try:
            return self.converter.parse(raw)
        except ConversionError as e:
            raise ConversionError(raw, self.type, self.name, line_no) from e.__cause__

    def format(self, value: Any) -> str:
        return self.converter.format(value)

    def accepts(self, value: Any) -> bool:
        """Exact type check; bool is not accepted for int fields and vice versa."""
        return type(value) is self.type or (
            isinstance(value, self.type) and not isinstance(value, bool)
        )

    def check(self, value: Any) -> None:
        if not self.accepts(value):
            raise FieldTypeError(
                f"field {self.name!r} is {self.type.__name__}, "
                f"got {type(value).__name__} ({value!r})"
            )


def describe(record_type: type) -> tuple[FieldDescriptor, ...]:
    """Build the descriptors of a dataclass record type, in declaration order."""
    if not (isinstance(record_type, type) and dataclasses.is_dataclass(record_type)):
        raise FieldTypeError(f"record type must be a dataclass, got {record_type!r}")

    try:
        hints = typing.get_type_hints(record_type)
    except NameError as e:
        raise FieldTypeError(f"cannot resolve annotations of {record_type.__name__}: {e}") from e

    descriptors = []
    for f in dataclasses.fields(record_type):
        if not f.init:
            continue
        field_type = hints.get(f.name, f.type)
        descriptors.append(FieldDescriptor(f.name, field_type, get_converter(field_type)))
    return tuple(descriptors)


def default_values(record_type: type, descriptors: tuple[FieldDescriptor, ...]) -> dict[str, Any]:
    """Initial field values: the dataclass default if declared, else the converter's zero."""
    fields = {f.name: f for f in dataclasses.fields(record_type)}
    values: dict[str, Any] = {}
    for d in descriptors:
        f = fields[d.name]
        if f.default is not dataclasses.MISSING:
            values[d.name] = f.default
        elif f.default_factory is not dataclasses.MISSING:
            values[d.name] = f.default_factory()
        else:
            values[d.name] = d.converter.zero()
    return values
