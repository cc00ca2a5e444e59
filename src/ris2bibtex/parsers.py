"""Parsers for splitting RIS documents into tagged records."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from .models import RisRecord

logger = logging.getLogger(__name__)

RECORD_TERMINATOR = "\nER  -"
TAG_SEPARATOR = "  - "


class RisFileError(RuntimeError):
    """Raised when a RIS file cannot be read."""

    def __init__(self, path: str | Path):
        super().__init__(f"Could not read file {path}")
        self.path = str(path)


def split_records(document: str) -> List[str]:
    """Split a RIS document into record blocks on the ``ER`` marker.

    The segment after the final marker is kept even when blank; callers
    decide whether to skip it.
    """
    return document.split(RECORD_TERMINATOR)


def parse_fields(block: str) -> RisRecord:
    """Collect ``TAG  - value`` lines of one record block."""
    record = RisRecord(raw_text=block)
    for line in block.split("\n"):
        tag, sep, value = line.partition(TAG_SEPARATOR)
        if not sep:
            continue
        record.add(tag.strip(), value.strip())
    return record


class RisParser:
    """Loads RIS text and turns it into records."""

    def parse(self, text: str) -> List[RisRecord]:
        records = []
        for index, block in enumerate(split_records(text)):
            if not block.strip():
                logger.debug("Skipping blank block %d", index)
                continue
            record = parse_fields(block)
            logger.debug(
                "Block %d: %d tags from %d characters",
                index,
                len(record.fields),
                len(record.raw_text),
            )
            records.append(record)
        logger.debug("Parsed %d RIS records", len(records))
        return records

    def load_text(self, file_path: str | Path) -> str:
        """Read a RIS file as UTF-8 text."""
        path = Path(file_path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Failed to read %s: %s", path, exc)
            raise RisFileError(file_path) from exc
        logger.debug("Read %d characters from %s", len(text), path)
        return text
