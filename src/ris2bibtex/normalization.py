"""Normalization helpers for emitting BibTeX field values."""
from __future__ import annotations

from typing import List, Tuple

# Order matters: braces first so later replacements are not re-escaped.
LATEX_REPLACEMENTS: List[Tuple[str, str]] = [
    ("{", "\\{"),
    ("}", "\\}"),
    ("&", "\\&"),
    ("%", "\\%"),
    ("_", "\\_"),
    ("$", "\\$"),
    ("#", "\\#"),
    ("^", "\\^{}"),
    ("~", "\\~{}"),
]


def latex_escape(value: str) -> str:
    """Escape LaTeX metacharacters in a field value.

    Backslashes are left untouched, so escaping already escaped text adds
    another layer rather than being a no-op.
    """
    text = value
    for char, replacement in LATEX_REPLACEMENTS:
        text = text.replace(char, replacement)
    return text
