"""Tablo hücre değerleri.

Kaynak tablodaki bir hücre farklı biçimlerde gelebilir: tarih nesnesi, zengin metin (rich text),
formül sonucu ya da düz metin/sayı. Bu modül bunları tek bir `CellValue` birleşik tipine çevirir;
normalizer yalnızca `display_text` ve `DateValue` ile çalışır.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any, Union


@dataclass(frozen=True, slots=True)
class DateValue:
    """Tablonun kendi tarih/saat tipinde gelen hücre."""

    value: date | datetime | time


@dataclass(frozen=True, slots=True)
class RichText:
    """Parça parça biçimlendirilmiş metin; parçalar birleştirilerek okunur."""

    runs: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class FormulaResult:
    """Formül hücresi; `result` son hesaplanan (önbellekteki) değerdir."""

    formula: str | None
    result: Any = None


@dataclass(frozen=True, slots=True)
class PlainText:
    text: str


@dataclass(frozen=True, slots=True)
class EmptyCell:
    pass


CellValue = Union[DateValue, RichText, FormulaResult, PlainText, EmptyCell]

_CELL_TYPES = (DateValue, RichText, FormulaResult, PlainText, EmptyCell)


def _rich_text_runs(raw: Any) -> tuple[str, ...] | None:
    """openpyxl `CellRichText` benzeri (str / TextBlock listesi) değerlerden metin parçalarını çıkarır."""
    if isinstance(raw, (str, bytes)) or not isinstance(raw, (list, tuple)):
        return None
    runs: list[str] = []
    for block in raw:
        if isinstance(block, str):
            runs.append(block)
        elif hasattr(block, "text"):
            runs.append(str(block.text))
        else:
            return None
    return tuple(runs)


def classify(raw: Any) -> CellValue:
    """Ham hücre değerini `CellValue` tiplerinden birine çevirir."""
    if isinstance(raw, _CELL_TYPES):
        return raw
    if raw is None:
        return EmptyCell()
    if isinstance(raw, float) and math.isnan(raw):
        return EmptyCell()
    if isinstance(raw, (datetime, date, time)):
        return DateValue(raw)
    if isinstance(raw, str):
        return PlainText(raw) if raw.strip() != "" else EmptyCell()
    runs = _rich_text_runs(raw)
    if runs is not None:
        return RichText(runs)
    return PlainText(str(raw))


def is_empty(cell: CellValue) -> bool:
    """Hücre boş mu? (boş metin ve sonucu olmayan formül de boş sayılır)"""
    if isinstance(cell, EmptyCell):
        return True
    return display_text(cell).strip() == ""


def display_text(cell: CellValue) -> str:
    """Hücrenin ekranda görünen metnini döndürür."""
    if isinstance(cell, PlainText):
        return cell.text
    if isinstance(cell, RichText):
        return "".join(cell.runs)
    if isinstance(cell, FormulaResult):
        if cell.result is None:
            return ""
        return display_text(classify(cell.result))
    if isinstance(cell, DateValue):
        value = cell.value
        if isinstance(value, time):
            return f"{value.hour:02d}:{value.minute:02d}"
        # Saat dilimi dönüşümü yapılmaz; değerin kendi gün/ay/yıl alanları kullanılır.
        return f"{value.day:02d}.{value.month:02d}.{value.year:04d}"
    if isinstance(cell, EmptyCell):
        return ""
    raise TypeError(f"Bilinmeyen hücre tipi: {type(cell).__name__}")
