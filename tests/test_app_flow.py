import pytest

from ris2bibtex.app import RisConverterApp
from ris2bibtex.parsers import RisFileError


def test_convert_text_returns_entries_in_source_order(sample_ris_text):
    entries = RisConverterApp().convert_text(sample_ris_text)
    assert len(entries) == 2
    assert entries[0].startswith("@article{Doe2020,")
    assert entries[1].startswith("@incollection{Patel2019,")


def test_convert_file_matches_convert_text(sample_ris_path, sample_ris_text):
    app = RisConverterApp()
    assert app.convert_file(sample_ris_path) == app.convert_text(sample_ris_text)


def test_blank_document_produces_no_entries():
    assert RisConverterApp().convert_text("\n\n  \n") == []


def test_document_without_terminator_is_one_entry():
    entries = RisConverterApp().convert_text("TY  - THES\nAU  - Roe, Rita\nPY  - 2018")
    assert len(entries) == 1
    assert entries[0].startswith("@phdthesis{Roe2018,")


def test_convert_file_missing_raises(tmp_path):
    with pytest.raises(RisFileError):
        RisConverterApp().convert_file(tmp_path / "nope.ris")
