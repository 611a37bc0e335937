from datetime import date

from conftest import make_record

from vakitmatik.template import (
    DEFAULT_TEMPLATE,
    default_export_filename,
    find_record,
    record_date,
    render_template,
)


def test_render_default_template():
    record = make_record("15", "OCAK")
    text = render_template(DEFAULT_TEMPLATE, record, "GEBZE")
    assert text.splitlines() == [
        "15 OCAK 2026",
        "İmsak: 06:47",
        "Güneş: 08:20",
        "Öğle: 13:02",
        "İkindi: 15:31",
        "Akşam: 17:54",
        "Yatsı: 19:20",
    ]


def test_render_repeats_and_unknown_placeholders():
    record = make_record("15", "OCAK")
    text = render_template("{{city}} {{imsak}}/{{imsak}} {{hijri}}", record, "GEBZE")
    assert text == "GEBZE 06:47/06:47 {{hijri}}"


def test_find_record(gebze_records):
    assert find_record(gebze_records, date(2026, 2, 1)) is gebze_records[2]
    assert find_record(gebze_records, date(2026, 3, 1)) is None


def test_record_date_with_unknown_month():
    assert record_date(make_record("01", "OCAKK")) is None
    assert record_date(make_record("31", "SUBAT")) is None
    assert record_date(make_record("28", "SUBAT")) == date(2026, 2, 28)


def test_default_export_filename():
    assert default_export_filename("GEBZE", date(2026, 1, 5)) == "namaz-GEBZE-20260105.txt"
