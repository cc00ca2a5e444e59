"""Data models for RIS records and BibTeX entries."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple


@dataclass
class RisRecord:
    """Represents the tagged fields of one RIS record."""

    raw_text: str
    fields: Dict[str, List[str]] = field(default_factory=dict)

    def add(self, tag: str, value: str) -> None:
        self.fields.setdefault(tag, []).append(value)

    def has(self, tag: str) -> bool:
        return bool(self.fields.get(tag))

    def first(self, tag: str, default: str = "") -> str:
        """Return the first value recorded for ``tag``."""
        values = self.fields.get(tag)
        if not values:
            return default
        return values[0]

    def all(self, tag: str) -> List[str]:
        """Return every value recorded for ``tag`` in source order."""
        return list(self.fields.get(tag, []))


@dataclass
class BibtexEntry:
    """Represents a formatted BibTeX entry."""

    entry_type: str
    key: str
    fields: List[Tuple[str, str]] = field(default_factory=list)

    def get(self, name: str) -> str | None:
        """Return the value of field ``name``, or None when it is not emitted."""
        for label, value in self.fields:
            if label == name:
                return value
        return None

    def render(self) -> str:
        lines = [f"@{self.entry_type}{{{self.key},"]
        body = [f"    {label:<12} = {{{value}}}" for label, value in self.fields]
        lines.append(",\n".join(body))
        lines.append("    }")
        return "\n".join(lines)
