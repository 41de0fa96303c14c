"""Line grammar for the brace-delimited record format.

    {
        firstName "Albert"
        lastName "Einstein"
    }

Each physical line is classified on its own. A line containing ``{`` opens a
record, a line containing ``}`` closes it, and ``<key> <value>`` lines between
them carry the fields. Everything else is ignored.
"""

from __future__ import annotations

import enum
import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

logger = logging.getLogger(__name__)

FIELD_RE = re.compile(r'^\s*(?P<key>"?\w+"?)\s(?P<value>.*)$')


class LineKind(enum.Enum):
    OPEN = "open"
    CLOSE = "close"
    FIELD = "field"
    BLANK = "blank"
    IGNORED = "ignored"


@dataclass(frozen=True)
class Line:
    """One classified input line. ``key``/``value`` are set only for FIELD lines."""

    kind: LineKind
    key: str = ""
    value: str = ""
    line_no: int = 0


def _unquote(s: str) -> str:
    return s.replace('"', "")


def classify(line: str, line_no: int = 0) -> Line:
    """Classify a single line. Brace checks win over the field pattern."""
    if "{" in line:
        return Line(LineKind.OPEN, line_no=line_no)
    if "}" in line:
        return Line(LineKind.CLOSE, line_no=line_no)
    if not line.strip():
        return Line(LineKind.BLANK, line_no=line_no)

    m = FIELD_RE.match(line)
    if not m:
        return Line(LineKind.IGNORED, line_no=line_no)
    return Line(
        LineKind.FIELD,
        key=_unquote(m.group("key")),
        value=_unquote(m.group("value")),
        line_no=line_no,
    )


def tokenize(text: str) -> Iterator[Line]:
    """Lazily classify every line of ``text`` (line numbers start at 1)."""
    for line_no, line in enumerate(text.splitlines(), start=1):
        yield classify(line, line_no)


def group_records(lines: Iterable[Line]) -> Iterator[list[Line]]:
    """Group FIELD lines into one list per closed ``{ ... }`` block.

    An OPEN line discards any unterminated group before it. Field lines outside
    a block, stray CLOSE lines and a trailing unterminated block are dropped.
    """
    buffer: list[Line] | None = None

    for line in lines:
        if line.kind is LineKind.OPEN:
            if buffer is not None:
                logger.debug("Discarding unterminated record before line %d", line.line_no)
            buffer = []
        elif line.kind is LineKind.CLOSE:
            if buffer is None:
                logger.debug("Ignoring '}' without open record at line %d", line.line_no)
                continue
            yield buffer
            buffer = None
        elif line.kind is LineKind.FIELD:
            if buffer is None:
                logger.debug("Ignoring field outside a record at line %d", line.line_no)
                continue
            buffer.append(line)
        elif line.kind is LineKind.IGNORED:
            logger.debug("Ignoring unrecognized line %d", line.line_no)

    if buffer is not None:
        logger.debug("Dropping unterminated record at end of input")
