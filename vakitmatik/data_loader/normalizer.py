"""Satır normalizer'ı.

Tablodan gelen bir satırı (hücre listesi) `DailyRecord`'a çevirir:
- İlk hücre tarih: tarih nesnesi, "15 Ocak 2026" ya da "15.01.2026" biçiminde olabilir.
- Altı vakit hücresi "06:47" -> "06 47" biçimine getirilir.

Tanınmayan satırlar (başlık, açıklama, boş satır) hata vermeden atlanır.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, Optional, Sequence

from vakitmatik.data_loader.cells import DateValue, EmptyCell, classify, display_text, is_empty
from vakitmatik.data_loader.types import MONTH_NAMES, DailyRecord

logger = logging.getLogger(__name__)

# "15 Ocak 2026" / "15 ŞUBAT 2026 Pazar" (sondaki gün adı serbest)
TEXT_DATE_RE = re.compile(r"^([0-9]{2})\s+([a-zA-ZİıŞşÇçĞğÜüÖö]+)\s+([0-9]{4})")
# "15.01.2026"
DOTTED_DATE_RE = re.compile(r"^([0-9]{2})\.([0-9]{2})\.([0-9]{4})$")

# Türkçe harfleri ASCII karşılıklarına indirger (ay adı karşılaştırması için)
_TR_FOLD = str.maketrans(
    {
        "ç": "c",
        "Ç": "C",
        "ğ": "g",
        "Ğ": "G",
        "ı": "i",
        "İ": "I",
        "ö": "o",
        "Ö": "O",
        "ş": "s",
        "Ş": "S",
        "ü": "u",
        "Ü": "U",
    }
)

_CANONICAL_MONTHS = frozenset(MONTH_NAMES)


@dataclass(frozen=True, slots=True)
class ColumnMap:
    """Satır içindeki sütun indeksleri (0 tabanlı).

    Diyanet'in yıllık tablosunda 2. sütun hicri tarihtir; vakitler 3-8. sütunlardadır.
    """

    date: int = 0
    times: tuple[int, int, int, int, int, int] = (2, 3, 4, 5, 6, 7)


def canonical_month(raw: str) -> str:
    """Ay adını kanonik ASCII büyük harf biçimine çevirir ("Şubat" -> "SUBAT").

    Tanınmayan değerler hata vermez; büyük harfe çevrilip olduğu gibi döndürülür.
    """
    folded = raw.translate(_TR_FOLD).upper()
    if folded in _CANONICAL_MONTHS:
        return folded
    return raw.upper()


def parse_date_cell(raw: Any) -> Optional[tuple[str, str, str]]:
    """Tarih hücresini (gün, ay, yıl) üçlüsüne çevirir; tanınmazsa None."""
    cell = classify(raw)
    if is_empty(cell):
        return None

    text = display_text(cell).strip()

    match = TEXT_DATE_RE.match(text)
    if match:
        day, month_raw, year = match.groups()
        return day, canonical_month(month_raw), year

    match = DOTTED_DATE_RE.match(text)
    if match:
        day, month_no, year = match.groups()
        index = int(month_no) - 1
        if not 0 <= index < len(MONTH_NAMES):
            return None
        return day, MONTH_NAMES[index], year

    return None


def normalize_time(raw: Any) -> str:
    """Vakit hücresini "HH MM" biçimine getirir ("06:47" -> "06 47")."""
    cell = classify(raw)
    if isinstance(cell, DateValue) and isinstance(cell.value, datetime):
        text = f"{cell.value.hour:02d}:{cell.value.minute:02d}"
    else:
        text = display_text(cell)
    return text.strip().replace(":", " ", 1)


def _cell_at(cells: Sequence[Any], index: int) -> Any:
    if 0 <= index < len(cells):
        return cells[index]
    return EmptyCell()


def normalize_row(cells: Sequence[Any], columns: ColumnMap | None = None) -> Optional[DailyRecord]:
    """Tek bir satırı `DailyRecord`'a çevirir; atlanacak satırlar için None döner."""
    cols = columns or ColumnMap()

    parsed = parse_date_cell(_cell_at(cells, cols.date))
    if parsed is None:
        return None
    day, month, year = parsed

    times = tuple(normalize_time(_cell_at(cells, i)) for i in cols.times)
    if any(t == "" for t in times):
        logger.warning(f"⚠️ {day}.{month}.{year} satırında boş vakit hücresi var")

    return DailyRecord(day=day, month=month, year=year, times=times)  # type: ignore[arg-type]


def normalize_rows(rows: Iterable[Sequence[Any]], columns: ColumnMap | None = None) -> list[DailyRecord]:
    """Satırları sırayla normalize eder; tanınmayanları atlar.

    Sıralama yapılmaz; dosyadaki sıra korunur.
    """
    records: list[DailyRecord] = []
    for row_no, cells in enumerate(rows, start=1):
        record = normalize_row(cells, columns)
        if record is None:
            logger.debug(f"Satır {row_no} atlandı (tarih bulunamadı)")
            continue
        records.append(record)
    return records
