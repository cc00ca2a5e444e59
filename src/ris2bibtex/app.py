"""High-level orchestrator for RIS to BibTeX conversion."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from .exporters import format_entry, to_bibtex
from .models import RisRecord
from .parsers import RisParser

logger = logging.getLogger(__name__)


class RisConverterApp:
    """Coordinates loading, parsing, and formatting of RIS records."""

    def __init__(self, parser: RisParser | None = None):
        self.parser = parser or RisParser()

    def load_file(self, file_path: str | Path) -> str:
        return self.parser.load_text(file_path)

    def process_text(self, text: str) -> List[RisRecord]:
        return self.parser.parse(text)

    def convert_text(self, text: str) -> List[str]:
        """Return one formatted BibTeX entry per non-blank record."""
        return [format_entry(record) for record in self.process_text(text)]

    def convert_file(self, file_path: str | Path) -> List[str]:
        text = self.load_file(file_path)
        entries = self.convert_text(text)
        logger.debug("Converted %d entries from %s", len(entries), file_path)
        return entries

    def bibtex_for_text(self, text: str) -> str:
        """Render the whole document as BibTeX text."""
        return to_bibtex(self.process_text(text))
