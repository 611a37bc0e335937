"""Tablo dosyası okuma yardımcıları.

Hedef:
- Diyanet'in yıllık vakit tablosunu (.xlsx) hücre tipleri korunarak okuyabilmek
- Eski .xls dosyalarını pandas ile, .csv dosyalarını `csv` modülü ile okuyabilmek
- CSV satırlarının farklı uzunlukta olmasını (başlık, açıklama satırları) tolere etmek
- Her satırı `CellValue` listesi olarak döndürmek (başlık satırı ayrıştırılmaz, normalizer atlar)
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Any

import pandas as pd
from openpyxl import load_workbook

from vakitmatik.data_loader.cells import CellValue, FormulaResult, classify
from vakitmatik.data_loader.normalizer import ColumnMap, normalize_rows
from vakitmatik.data_loader.types import DailyRecord

logger = logging.getLogger(__name__)

OPENPYXL_SUFFIXES = (".xlsx", ".xlsm")
SUPPORTED_SUFFIXES = OPENPYXL_SUFFIXES + (".xls", ".csv")

CSV_DELIMITERS = [",", ";", "\t", "|"]


class ScheduleSourceError(RuntimeError):
    """Tablo dosyası okunamadığında fırlatılır (dosya yok, bozuk, desteklenmeyen tip)."""


def _formula_text(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    # ArrayFormula / DataTableFormula
    return getattr(value, "text", None)


def _read_openpyxl(path: Path) -> list[list[CellValue]]:
    """İlk çalışma sayfasını okur; formül hücreleri önbellekteki sonuçla birlikte döner."""
    try:
        formulas = load_workbook(path, rich_text=True)
        values = load_workbook(path, data_only=True)
    except Exception as e:
        raise ScheduleSourceError(f"{path.name}: Excel dosyası açılamadı: {e}") from e

    try:
        sheet = formulas.worksheets[0]
        value_sheet = values.worksheets[0]
        rows: list[list[CellValue]] = []
        for row in sheet.iter_rows():
            cells: list[CellValue] = []
            for cell in row:
                if cell.data_type == "f":
                    cached = value_sheet.cell(row=cell.row, column=cell.column).value
                    cells.append(FormulaResult(formula=_formula_text(cell.value), result=cached))
                else:
                    cells.append(classify(cell.value))
            rows.append(cells)
        return rows
    finally:
        formulas.close()
        values.close()


def _sniff_delimiter(sample: str) -> str:
    """Metin örneğinden ayraç tahmini yapar; bulunamazsa virgül döner."""
    try:
        return csv.Sniffer().sniff(sample, delimiters="".join(CSV_DELIMITERS)).delimiter
    except csv.Error:
        return ","


def _read_csv(path: Path) -> list[list[CellValue]]:
    """CSV dosyasını başlıksız okur; satırlar farklı sayıda hücre içerebilir."""
    try:
        text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise ScheduleSourceError(f"{path.name}: Dosya okuma hatası: {e}") from e

    delimiter = _sniff_delimiter(text[:4096])
    rows: list[list[CellValue]] = []
    for row in csv.reader(text.splitlines(), delimiter=delimiter):
        rows.append([classify(cell) for cell in row])
    return rows


def _read_xls(path: Path) -> list[list[CellValue]]:
    """Eski .xls dosyasını pandas (xlrd) ile başlıksız okur."""
    try:
        df = pd.read_excel(path, header=None, engine="xlrd")
    except Exception as e:
        raise ScheduleSourceError(f"{path.name}: Dosya okuma hatası: {e}") from e

    rows: list[list[CellValue]] = []
    for record in df.itertuples(index=False, name=None):
        rows.append([classify(None if pd.isna(v) else v) for v in record])
    return rows


def read_rows(path: str | Path) -> list[list[CellValue]]:
    """Tablo dosyasının tüm satırlarını hücre listeleri olarak okur."""
    p = path if isinstance(path, Path) else Path(path)
    if not p.exists():
        raise ScheduleSourceError(f"{p}: Dosya bulunamadı")

    suffix = p.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ScheduleSourceError(
            f"{p.name}: Desteklenmeyen dosya tipi. Desteklenenler: {', '.join(SUPPORTED_SUFFIXES)}"
        )

    if suffix in OPENPYXL_SUFFIXES:
        rows = _read_openpyxl(p)
    elif suffix == ".csv":
        rows = _read_csv(p)
    else:
        rows = _read_xls(p)
    logger.info(f"📄 {p.name}: {len(rows)} satır okundu")
    return rows


def read_records(path: str | Path, columns: ColumnMap | None = None) -> list[DailyRecord]:
    """Dosyayı okuyup günlük kayıtlara çevirir (tanınmayan satırlar atlanır)."""
    records = normalize_rows(read_rows(path), columns)
    logger.info(f"✅ {len(records)} günlük kayıt bulundu")
    return records
