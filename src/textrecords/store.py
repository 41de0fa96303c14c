"""Ordered in-memory store of typed records.

    @dataclass
    class Person:
        firstName: str
        lastName: str

    store = RecordStore(Person)
    store.parse(text)
    store.find_all("firstName", "Albert")
    store.find_by_lastName("Einstein")
    store.serialize("people.rec")

Records keep insertion order; parse appends, it never replaces.
"""

from __future__ import annotations

import functools
import logging
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import IO, Any

from textrecords import query
from textrecords.config import TextRecordsConfig
from textrecords.errors import ConversionError, FieldTypeError, UnknownFieldError
from textrecords.fields import FieldDescriptor
from textrecords.grammar import group_records, tokenize
from textrecords.mapper import FieldMapper
from textrecords.query import UNBOUNDED, Predicate
from textrecords.sources import FileTextSink, FileTextSource, TextSink, TextSource

logger = logging.getLogger(__name__)


class RecordStore:
    """Parse, query, mutate and serialize records of one dataclass type."""

    def __init__(
        self,
        record_type: type,
        *,
        source: TextSource | None = None,
        sink: TextSink | None = None,
        config: TextRecordsConfig | None = None,
    ) -> None:
        self.config = config or TextRecordsConfig()
        self.record_type = record_type
        self._mapper = FieldMapper(record_type)
        self.descriptors: tuple[FieldDescriptor, ...] = self._mapper.descriptors
        self._by_name = {d.name: d for d in self.descriptors}
        self.source = source or FileTextSource(self.config.encoding)
        self.sink = sink or FileTextSink(self.config.encoding)
        self._records: list = []
        self._bind_field_accessors()

    def _bind_field_accessors(self) -> None:
        """Attach find_by_<field> / find_all_by_<field> for every declared field."""
        for d in self.descriptors:
            setattr(self, f"find_by_{d.name}", functools.partial(self.find, d.name))
            setattr(self, f"find_all_by_{d.name}", functools.partial(self.find_all, d.name))

    # ── Parsing ──────────────────────────────────────────────

    def parse(self, text: str) -> list:
        """Append every closed record in ``text`` and return all stored records.

        A ConversionError stops parsing; records already appended stay.
        """
        added = 0
        for group in group_records(tokenize(text)):
            try:
                record = self._mapper.map(group)
            except ConversionError:
                logger.warning(
                    "Parse stopped after %d new %s record(s)", added, self.record_type.__name__
                )
                raise
            self._records.append(record)
            added += 1
        logger.debug("Parsed %d %s record(s)", added, self.record_type.__name__)
        return self.records

    def parse_source(self, identifier: str | Path) -> list:
        """Parse text from the configured source. A missing source changes nothing."""
        if not self.source.exists(identifier):
            logger.info("Source %s not found, nothing parsed", identifier)
            return self.records
        return self.parse(self.source.read(identifier))

    # ── Serialization ────────────────────────────────────────

    def _render(self, record: Any) -> str:
        lines = ["{\n"]
        for d in self.descriptors:
            lines.append(f'\t{d.name} "{d.format(getattr(record, d.name))}"\n')
        lines.append("}\n\n")
        return "".join(lines)

    def to_text(self) -> str:
        return "".join(self._render(r) for r in self._records)

    def serialize(self, identifier: str | Path | None = None) -> str:
        """Render all records; write them to the sink when ``identifier`` is given."""
        text = self.to_text()
        if identifier is not None:
            self.sink.write(identifier, text)
        return text

    def dump(self, file: IO[str] | None = None) -> None:
        """Print each record. Does nothing unless ``config.debug`` is set."""
        if not self.config.debug:
            return
        out = file or sys.stdout
        for record in self._records:
            print(record, file=out)

    # ── Insertion & access ───────────────────────────────────

    def insert(self, record: Any) -> None:
        if not isinstance(record, self.record_type):
            raise FieldTypeError(
                f"expected {self.record_type.__name__}, got {type(record).__name__}"
            )
        for d in self.descriptors:
            d.check(getattr(record, d.name))
        self._records.append(record)

    def insert_values(self, *values: Any) -> Any:
        """Build a record from one positional value per field and append it."""
        if len(values) != len(self.descriptors):
            raise FieldTypeError(
                f"{self.record_type.__name__} takes {len(self.descriptors)} values, "
                f"got {len(values)}"
            )
        for d, value in zip(self.descriptors, values):
            d.check(value)
        record = self.record_type(**{d.name: v for d, v in zip(self.descriptors, values)})
        self._records.append(record)
        return record

    @property
    def records(self) -> list:
        """Snapshot copy of the stored records."""
        return list(self._records)

    def count(self) -> int:
        return len(self._records)

    def is_empty(self) -> bool:
        return not self._records

    def at(self, index: int) -> Any:
        return self._records[index]

    def iterate(self) -> Iterator[Any]:
        return iter(list(self._records))

    def clear(self) -> None:
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Any]:
        return self.iterate()

    def __getitem__(self, index: int) -> Any:
        return self.at(index)

    def __repr__(self) -> str:
        return f"RecordStore({self.record_type.__name__}, {len(self._records)} records)"

    # ── Queries ──────────────────────────────────────────────

    def descriptor(self, name: str) -> FieldDescriptor:
        try:
            return self._by_name[name]
        except KeyError:
            raise UnknownFieldError(name, self.record_type) from None

    def _matcher(self, name: str, value: Any) -> Predicate:
        self.descriptor(name).check(value)
        return query.field_equals(name, value)

    def find(self, field: str, value: Any, limit: int = 1) -> list:
        """First ``limit`` records whose ``field`` equals ``value`` (0 = all)."""
        predicate = self._matcher(field, value)
        return query.select(self._records, predicate, query.check_limit(limit))

    def find_all(self, field: str, value: Any) -> list:
        return self.find(field, value, UNBOUNDED)

    def find_where(self, predicate: Predicate, limit: int = 1) -> list:
        return query.select(self._records, predicate, query.check_limit(limit))

    def has_value(self, field: str, value: Any) -> bool:
        return bool(self.find(field, value, 1))

    # ── Mutation ─────────────────────────────────────────────

    def update(self, field: str, match: Any, new_value: Any, limit: int = 1) -> int:
        """Set ``field`` to ``new_value`` on the first ``limit`` records where it equals ``match``.

        Returns the number of records updated.
        """
        predicate = self._matcher(field, match)
        return self.update_where(predicate, field, new_value, limit)

    def update_all(self, field: str, match: Any, new_value: Any) -> int:
        return self.update(field, match, new_value, UNBOUNDED)

    def update_where(self, predicate: Predicate, field: str, new_value: Any, limit: int = 1) -> int:
        """Set ``field`` to ``new_value`` on records accepted by ``predicate``."""
        self.descriptor(field).check(new_value)
        count = query.replace_matching(
            self._records, predicate, {field: new_value}, query.check_limit(limit)
        )
        logger.debug("Updated %d record(s): %s = %r", count, field, new_value)
        return count

    def remove(self, field: str, value: Any, limit: int = 1) -> int:
        """Remove the first ``limit`` records whose ``field`` equals ``value``."""
        predicate = self._matcher(field, value)
        return self.remove_where(predicate, limit)

    def remove_all(self, field: str, value: Any) -> int:
        return self.remove(field, value, UNBOUNDED)

    def remove_where(self, predicate: Predicate, limit: int = 1) -> int:
        count = query.remove_matching(self._records, predicate, query.check_limit(limit))
        logger.debug("Removed %d record(s)", count)
        return count
