"""Exporters turning RIS records into BibTeX text."""
from __future__ import annotations

from typing import Iterable, List, Tuple

from .models import BibtexEntry, RisRecord
from .normalization import latex_escape
from .reference_types import DEFAULT_RIS_TYPE, map_type

UNKNOWN_AUTHOR = "unknown"
UNKNOWN_YEAR = "????"

# (BibTeX field, RIS tag) for the single-valued fields, in output order.
# author and year are handled separately.
_LEADING_FIELDS: List[Tuple[str, str]] = [
    ("title", "TI"),
    ("journal", "JO"),
    ("booktitle", "T2"),
    ("volume", "VL"),
    ("number", "IS"),
    ("pages", "SP"),
]
_TRAILING_FIELDS: List[Tuple[str, str]] = [
    ("doi", "DO"),
    ("url", "UR"),
    ("issn", "SN"),
    ("abstract", "AB"),
]


def _year(record: RisRecord) -> str:
    return record.first("PY", UNKNOWN_YEAR)


def citation_key(record: RisRecord) -> str:
    """Return ``<first author surname><year>`` for the record."""
    if record.has("AU"):
        lead = record.first("AU")
        # No comma means no surname; the whole name is not used as a fallback.
        surname = lead.split(",", 1)[0] if "," in lead else ""
    else:
        surname = UNKNOWN_AUTHOR
    return f"{surname}{_year(record)}"


def build_entry(record: RisRecord) -> BibtexEntry:
    entry_type = map_type(record.first("TY", DEFAULT_RIS_TYPE))
    fields = [("author", latex_escape(" and ".join(record.all("AU"))))]
    fields.extend((name, latex_escape(record.first(tag))) for name, tag in _LEADING_FIELDS)
    fields.append(("year", _year(record)))
    fields.extend((name, latex_escape(record.first(tag))) for name, tag in _TRAILING_FIELDS)
    return BibtexEntry(entry_type=entry_type, key=citation_key(record), fields=fields)


def format_entry(record: RisRecord) -> str:
    """Render one record as a BibTeX entry with every field present."""
    return build_entry(record).render()


def to_bibtex(records: Iterable[RisRecord]) -> str:
    return "".join(f"{format_entry(record)}\n" for record in records)
