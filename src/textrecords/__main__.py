"""Entry point: python -m textrecords <command> <data> <schema> [args]

- dump:   Print every record
- count:  Print the number of records
- find:   Print records whose <field> equals <value>
- format: Print the records re-serialized in canonical form
"""

from __future__ import annotations

import logging
import sys

from textrecords.config import TextRecordsConfig, load_config
from textrecords.errors import TextRecordsError
from textrecords.schema import load_record_type
from textrecords.store import RecordStore

USAGE = """Usage: python -m textrecords <command> <data> <schema> [field value]
  dump   <data> <schema>                — Print every record
  count  <data> <schema>                — Print the number of records
  find   <data> <schema> <field> <value> — Print records where field == value
  format <data> <schema>                — Print the canonical serialized text"""


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _open_store(data: str, schema: str, config: TextRecordsConfig) -> RecordStore:
    store = RecordStore(load_record_type(schema), config=config)
    store.parse_source(data)
    return store


def run(argv: list[str]) -> int:
    if len(argv) < 3 or argv[0] not in ("dump", "count", "find", "format"):
        print(USAGE)
        return 1

    cmd, data, schema, *rest = argv
    config = load_config()
    _setup_logging(config.log_level)

    try:
        store = _open_store(data, schema, config)
        if cmd == "dump":
            for record in store:
                print(record)
        elif cmd == "count":
            print(store.count())
        elif cmd == "format":
            sys.stdout.write(store.serialize())
        elif cmd == "find":
            if len(rest) != 2:
                print(USAGE)
                return 1
            field, raw = rest
            value = store.descriptor(field).parse(raw)
            for record in store.find_all(field, value):
                print(record)
    except TextRecordsError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


def main() -> None:
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
