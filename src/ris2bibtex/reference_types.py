"""RIS reference type to BibTeX entry type mapping."""
from __future__ import annotations

DEFAULT_RIS_TYPE = "MISC"
FALLBACK_BIBTEX_TYPE = "misc"

_RIS_TYPE_MAP = {
    "JOUR": "article",
    "BOOK": "book",
    "CHAP": "incollection",
    "CONF": "inproceedings",
    "CPAPER": "inproceedings",
    "THES": "phdthesis",
    "RPRT": "techreport",
}


def map_type(ris_type: str | None) -> str:
    """Return the BibTeX entry type for a RIS ``TY`` code."""
    if ris_type is None:
        ris_type = DEFAULT_RIS_TYPE
    return _RIS_TYPE_MAP.get(ris_type.upper(), FALLBACK_BIBTEX_TYPE)
