"""Reader/writer collaborators used by RecordStore for external text."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class TextSource(Protocol):
    """Where ``RecordStore.parse_source`` reads text from."""

    def exists(self, identifier: str | Path) -> bool: ...

    def read(self, identifier: str | Path) -> str:
        """Return the full text of an existing source."""
        ...


@runtime_checkable
class TextSink(Protocol):
    """Where ``RecordStore.serialize`` writes text to."""

    def write(self, identifier: str | Path, text: str) -> None:
        """Write ``text``, replacing any previous content."""
        ...


class FileTextSource:
    """Reads records from files on disk."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def exists(self, identifier: str | Path) -> bool:
        return Path(identifier).is_file()

    def read(self, identifier: str | Path) -> str:
        return Path(identifier).read_text(encoding=self.encoding)


class FileTextSink:
    """Writes serialized records to files, creating parent directories."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def write(self, identifier: str | Path, text: str) -> None:
        path = Path(identifier)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding=self.encoding)
        logger.info("Wrote %d characters to %s", len(text), path)


class MemoryText:
    """In-memory source and sink keyed by identifier, for tests and pipelines."""

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self.files: dict[str, str] = dict(files or {})

    def exists(self, identifier: str | Path) -> bool:
        return str(identifier) in self.files

    def read(self, identifier: str | Path) -> str:
        return self.files[str(identifier)]

    def write(self, identifier: str | Path, text: str) -> None:
        self.files[str(identifier)] = text
