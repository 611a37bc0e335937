from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest
from openpyxl import Workbook

from vakitmatik.data_loader.types import DailyRecord

DATA_DIR = Path(__file__).resolve().parent / "data"

# Diyanet yıllık tablosundaki başlık satırı
SHEET_HEADER = ["Miladi Tarih", "Hicri Tarih", "İmsak", "Güneş", "Öğle", "İkindi", "Akşam", "Yatsı"]


def make_record(day: str, month: str, year: str = "2026", times=None) -> DailyRecord:
    return DailyRecord(
        day=day,
        month=month,
        year=year,
        times=tuple(times or ("06 47", "08 20", "13 02", "15 31", "17 54", "19 20")),
    )


@pytest.fixture
def gebze_records() -> list[DailyRecord]:
    return [
        make_record("01", "OCAK", times=("06 47", "08 20", "13 02", "15 31", "17 54", "19 20")),
        make_record("02", "OCAK", times=("06 47", "08 20", "13 03", "15 32", "17 55", "19 21")),
        make_record("01", "SUBAT", times=("06 36", "08 04", "13 12", "15 58", "18 24", "19 47")),
    ]


@pytest.fixture
def legacy_sample() -> bytes:
    """`gebze_records` için beklenen cihaz dosyası.

    Elle yazılmıştır; başlık, sütun ve ayraç satırları cihazın eski örnek dosyasındaki
    satırlarla bayt bayt aynıdır, veri satırları 63 karakterlik sabit düzene uyar.
    """
    return (DATA_DIR / "GEBZE_expected.txt").read_bytes()


@pytest.fixture
def gebze_workbook(tmp_path: Path) -> Path:
    """Portaldan indirilen tabloya benzeyen küçük bir .xlsx dosyası."""
    wb = Workbook()
    ws = wb.active
    ws.append(["GEBZE İÇİN NAMAZ VAKİTLERİ"])
    ws.append(SHEET_HEADER)
    ws.append([datetime(2026, 1, 1), "12 Recep 1447", "06:47", "08:20", "13:02", "15:31", "17:54", "19:20"])
    ws.append(["02 Ocak 2026 Cuma", "13 Recep 1447", "06:47", "08:20", "13:03", "15:32", "17:55", "19:21"])
    ws.append([None])
    ws.append(["01.02.2026", "13 Şaban 1447", "06:36", "08:04", "13:12", "15:58", "18:24", "19:47"])
    path = tmp_path / "gebze.xlsx"
    wb.save(path)
    return path
