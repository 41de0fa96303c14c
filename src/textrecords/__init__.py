"""Typed in-memory records parsed from a brace-delimited key/value text format."""

from textrecords.config import TextRecordsConfig, load_config
from textrecords.errors import (
    ConversionError,
    FieldTypeError,
    SchemaError,
    TextRecordsError,
    UnknownFieldError,
)
from textrecords.fields import Converter, FieldDescriptor, SimpleConverter, describe, register_converter
from textrecords.schema import load_record_type, loads_record_type
from textrecords.sources import FileTextSink, FileTextSource, MemoryText, TextSink, TextSource
from textrecords.store import RecordStore

__all__ = [
    "ConversionError",
    "Converter",
    "FieldDescriptor",
    "FieldTypeError",
    "FileTextSink",
    "FileTextSource",
    "MemoryText",
    "RecordStore",
    "SchemaError",
    "SimpleConverter",
    "TextRecordsConfig",
    "TextRecordsError",
    "TextSink",
    "TextSource",
    "UnknownFieldError",
    "describe",
    "load_config",
    "load_record_type",
    "loads_record_type",
    "register_converter",
]
