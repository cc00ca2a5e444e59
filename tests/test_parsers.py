import pytest

from ris2bibtex.parsers import RisFileError, RisParser, parse_fields, split_records


def test_split_records_without_marker_returns_whole_document():
    text = "TY  - JOUR\nTI  - Lonely record"
    assert split_records(text) == [text]


def test_split_records_keeps_trailing_segment(sample_ris_text):
    blocks = split_records(sample_ris_text)
    assert len(blocks) == 3
    assert blocks[0].startswith("TY  - JOUR")
    assert "ER  -" not in blocks[0]
    assert blocks[-1].strip() == ""


def test_parse_fields_preserves_author_order_and_trims_values():
    block = "TY  - JOUR\nAU  - Doe, Jane  \n  AU  - Smith, John\nTI  -   A Title\n"
    record = parse_fields(block)
    assert record.all("AU") == ["Doe, Jane", "Smith, John"]
    assert record.first("TI") == "A Title"
    assert record.first("TY") == "JOUR"


def test_parse_fields_skips_lines_without_separator():
    block = "TY  - BOOK\ncontinuation of something\nKW - single space tag\nTI  - Kept"
    record = parse_fields(block)
    assert set(record.fields) == {"TY", "TI"}


def test_parse_fields_splits_on_first_separator_only():
    record = parse_fields("TI  - Before  - after")
    assert record.first("TI") == "Before  - after"


def test_single_value_accessor_uses_first_value():
    record = parse_fields("KW  - alpha\nKW  - beta")
    assert record.first("KW") == "alpha"
    assert record.first("XX") == ""
    assert record.first("XX", "fallback") == "fallback"


def test_parser_skips_blank_blocks(sample_ris_text):
    records = RisParser().parse(sample_ris_text + "\n\n   \n")
    assert [record.first("TY") for record in records] == ["JOUR", "CHAP"]


def test_parser_handles_crlf_line_endings(sample_ris_text):
    records = RisParser().parse(sample_ris_text.replace("\n", "\r\n"))
    assert len(records) == 2
    assert records[0].first("PY") == "2020"


def test_load_text_missing_file_raises(tmp_path):
    missing = tmp_path / "missing.ris"
    with pytest.raises(RisFileError) as excinfo:
        RisParser().load_text(missing)
    assert excinfo.value.path == str(missing)


def test_load_text_rejects_undecodable_file(tmp_path):
    path = tmp_path / "latin1.ris"
    path.write_bytes("TI  - Caf\xe9\nER  - \n".encode("latin-1"))
    with pytest.raises(RisFileError):
        RisParser().load_text(path)


def test_parse_fields_keeps_raw_block():
    block = "TY  - JOUR\nnot a tag line\nTI  - Kept"
    record = parse_fields(block)
    assert record.raw_text == block
