from conftest import make_record

from vakitmatik.encoder import (
    COLUMN_TITLE_LINE,
    END_OF_MONTH_MARKER,
    SEPARATOR_LINE,
    download_filename,
    encode,
    encode_text,
    format_data_line,
)


def test_empty_input_gives_empty_document():
    assert encode_text([], "GEBZE") == ""
    assert encode([], "GEBZE") == b""


def test_matches_legacy_sample(gebze_records, legacy_sample):
    assert encode(gebze_records, "GEBZE") == legacy_sample


def test_location_is_uppercased(gebze_records, legacy_sample):
    assert encode(gebze_records, "gebze") == legacy_sample


def test_document_ends_with_marker(gebze_records):
    data = encode(gebze_records, "GEBZE")
    assert data.endswith(b"\x12\n\n")
    assert not data.endswith(b"\n\x12\n\n")


def test_full_header_only_for_first_month(gebze_records):
    text = encode_text(gebze_records, "GEBZE")
    assert text.count("T.C.") == 1
    assert text.startswith("                               T.C.")
    assert text.count("GEBZE_N") == 2
    assert text.count(END_OF_MONTH_MARKER) == 2
    assert text.count(COLUMN_TITLE_LINE) == 2
    assert text.count(SEPARATOR_LINE) == 2
    assert "                             2026 - OCAK\n" in text
    assert "                             2026 - SUBAT\n" in text


def test_same_month_rows_share_one_block():
    records = [make_record(f"{d:02d}", "MART") for d in range(1, 32)]
    text = encode_text(records, "ANKARA")
    assert text.count(END_OF_MONTH_MARKER) == 1
    assert text.count("ANKARA_N") == 1
    data_lines = [ln for ln in text.split("\n") if ln.startswith("           ") and ln[11:13].isdigit()]
    assert len(data_lines) == 31


def test_each_month_transition_opens_a_block():
    records = [make_record("31", "OCAK"), make_record("01", "SUBAT"), make_record("01", "MART")]
    text = encode_text(records, "X")
    assert text.count(END_OF_MONTH_MARKER) == 3
    assert text.count("T.C.") == 1
    assert text.count("X_N") == 3


def test_repeated_month_name_is_not_merged():
    # Aynı ay adı ardışık olmadan tekrar gelirse yeni blok açılır.
    records = [make_record("31", "OCAK"), make_record("01", "SUBAT"), make_record("01", "OCAK")]
    assert encode_text(records, "X").count("2026 - OCAK") == 2


def test_data_line_layout():
    line = format_data_line(make_record("07", "MART", times=("05 01", "06 30", "12 15", "15 40", "18 05", "19 25")))
    assert line == "           07   05 01  06 30  12 15  15 40  18 05  19 25  00 00\n"
    assert len(line.rstrip("\n")) == 63
    for offset, value in ((11, "07"), (16, "05 01"), (23, "06 30"), (30, "12 15"), (58, "00 00")):
        assert line[offset : offset + len(value)] == value


def test_data_lines_align_with_legacy_sample(legacy_sample):
    lines = legacy_sample.decode("utf-8").split("\n")
    data_lines = [ln.rstrip("\x12") for ln in lines if ln.startswith("           0")]
    assert len(data_lines) == 3
    assert all(len(ln) == 63 for ln in data_lines)


def test_missing_location_uses_default(gebze_records):
    assert "SOH_N" in encode_text(gebze_records, None)
    assert "SOH_N" in encode_text(gebze_records, "  ")


def test_encoding_is_repeatable(gebze_records):
    assert encode(gebze_records, "GEBZE") == encode(gebze_records, "GEBZE")


def test_output_keeps_replacement_characters(gebze_records):
    data = encode(gebze_records, "GEBZE")
    assert data.count("�".encode("utf-8")) == 8 + 7 * 2


def test_download_filename():
    assert download_filename("gebze") == "GEBZE.txt"
    assert download_filename(None) == "SOH.txt"
