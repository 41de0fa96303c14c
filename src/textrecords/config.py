"""Configuration loading from environment variables and textrecords.toml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

_CONFIG_FILENAME = "textrecords.toml"
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class TextRecordsConfig:
    """Top-level textrecords configuration."""

    encoding: str = "utf-8"
    debug: bool = False
    log_level: str = "INFO"


def _as_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUTHY


def load_config(config_path: Path | None = None) -> TextRecordsConfig:
    """Load configuration from environment variables and optional textrecords.toml.

    Priority: environment variables > textrecords.toml > defaults.
    """
    file_data: dict = {}
    if config_path and config_path.exists():
        file_data = tomllib.loads(config_path.read_text())
    else:
        # Search current dir and ~/.textrecords/
        for candidate in [
            Path.cwd() / _CONFIG_FILENAME,
            Path.home() / ".textrecords" / _CONFIG_FILENAME,
        ]:
            if candidate.exists():
                file_data = tomllib.loads(candidate.read_text())
                break

    return TextRecordsConfig(
        encoding=os.getenv("TEXTRECORDS_ENCODING", file_data.get("encoding", "utf-8")),
        debug=_as_bool(os.getenv("TEXTRECORDS_DEBUG", file_data.get("debug", False))),
        log_level=os.getenv("TEXTRECORDS_LOG_LEVEL", file_data.get("log_level", "INFO")),
    )
