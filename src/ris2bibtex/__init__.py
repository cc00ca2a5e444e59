"""RIS to BibTeX conversion toolkit."""

from .app import RisConverterApp
from .exporters import build_entry, citation_key, format_entry, to_bibtex
from .models import BibtexEntry, RisRecord
from .normalization import latex_escape
from .parsers import RisFileError, RisParser, parse_fields, split_records
from .reference_types import map_type

__all__ = [
    "RisConverterApp",
    "BibtexEntry",
    "RisRecord",
    "RisFileError",
    "RisParser",
    "build_entry",
    "citation_key",
    "format_entry",
    "latex_escape",
    "map_type",
    "parse_fields",
    "split_records",
    "to_bibtex",
]
