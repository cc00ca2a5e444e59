import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT / "src") not in sys.path:
    sys.path.insert(0, str(ROOT / "src"))

import pytest


SAMPLE_RIS = """TY  - JOUR
AU  - Doe, Jane
AU  - Smith, John
PY  - 2020
TI  - A Title
JO  - Journal of Testing
VL  - 10
IS  - 2
SP  - 123
DO  - 10.1234/jt.2020.456
UR  - https://example.org/a_b
SN  - 1234-5678
AB  - Accuracy improved by 50% & more.
ER  - 

TY  - CHAP
AU  - Patel, Ravi
PY  - 2019
TI  - Data validation handbook
T2  - Testing Press Collected Works
ER  - 
"""


@pytest.fixture()
def sample_ris_text() -> str:
    return SAMPLE_RIS


@pytest.fixture()
def sample_ris_path(tmp_path: Path) -> Path:
    """Write a two-record RIS export to a temporary file."""

    path = tmp_path / "library.ris"
    path.write_text(SAMPLE_RIS, encoding="utf-8")
    return path
