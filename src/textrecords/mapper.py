"""Turn a group of parsed field lines into one record instance."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from textrecords.fields import FieldDescriptor, default_values, describe
from textrecords.grammar import Line

logger = logging.getLogger(__name__)


class FieldMapper:
    """Maps ``key value`` lines onto the fields of a dataclass record type."""

    def __init__(
        self,
        record_type: type,
        descriptors: tuple[FieldDescriptor, ...] | None = None,
    ) -> None:
        self.record_type = record_type
        self.descriptors = descriptors if descriptors is not None else describe(record_type)
        self._by_name = {d.name: d for d in self.descriptors}

    def map(self, lines: Iterable[Line]) -> Any:
        """Build one record. Unknown keys are skipped, repeated keys keep the last value.

        Raises ConversionError if a value does not parse as its field's type.
        """
        values = default_values(self.record_type, self.descriptors)
        for line in lines:
            descriptor = self._by_name.get(line.key)
            if descriptor is None:
                logger.debug("Unknown field %r at line %d", line.key, line.line_no)
                continue
            values[descriptor.name] = descriptor.parse(line.value, line.line_no)
        return self.record_type(**values)
