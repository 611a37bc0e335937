"""Vakitmatik sabit biçimli metin encoder'ı.

`DailyRecord` listesini, Vakitmatik cihazının okuduğu sabit sütunlu metin dosyasına çevirir.

Dosya yapısı (her ay için bir blok):
- Başlık: ilk ayda 5 satırlık tam başlık, sonraki aylarda yalnızca konum satırı
- "YYYY - AY" satırı, sütun başlıkları ve ayraç satırı
- Her gün için bir veri satırı
- Ay sonu işareti: DC2 (0x12) + iki satır sonu

Başlık ve sütun satırlarındaki U+FFFD karakterleri eski örnek dosyadaki bozulmuş Türkçe
harflerdir (Ç, İ, Ş, Ğ); cihaz bunları bu haliyle bekler, düzeltilmemelidir.
"""

from __future__ import annotations

import logging
from typing import Iterable

from vakitmatik.data_loader.types import KSAT_SENTINEL, DailyRecord

logger = logging.getLogger(__name__)

DEFAULT_LOCATION = "SOH"

FULL_HEADER_TEMPLATE = (
    "                               T.C.              \n"
    "                         CUMHURBA�KANLI�I                  \n"
    "                     D�YANET ��LER� BA�KANLI�I             \n"
    "              PUSULA KIBLE SEMTi (KUZEYDEN)  147 Derece\n"
    "                              {location}_N           \n"
)

MINI_HEADER_TEMPLATE = "                              {location}_N           \n"

MONTH_LINE_TEMPLATE = "                             {year} - {month}\n"

COLUMN_TITLE_LINE = "           GUN  �MSAK  GUNES  ��LE   �K�ND� AK�AM  YATSI  K.SAT\n"

SEPARATOR_LINE = "           ---  -----  -----  ----   ------ -----  -----  -----\n"

END_OF_MONTH_MARKER = "\x12\n\n"

DATA_LINE_INDENT = " " * 11


def format_location(location: str | None) -> str:
    """Başlıklarda kullanılan konum adı (büyük harf, boşsa varsayılan)."""
    name = (location or "").strip()
    return (name or DEFAULT_LOCATION).upper()


def download_filename(location: str | None) -> str:
    """İndirilecek dosyanın adı: "GEBZE" -> "GEBZE.txt"."""
    return f"{format_location(location)}.txt"


def format_data_line(record: DailyRecord) -> str:
    """Bir günün sabit genişlikli veri satırı."""
    columns = "  ".join((*record.times, KSAT_SENTINEL))
    return f"{DATA_LINE_INDENT}{record.day}   {columns}\n"


def _close_month(parts: list[str]) -> None:
    """Son satır sonunu silip ay sonu işaretini ekler."""
    if parts and parts[-1].endswith("\n"):
        parts[-1] = parts[-1][:-1]
    parts.append(END_OF_MONTH_MARKER)


def encode_text(records: Iterable[DailyRecord], location: str | None = None) -> str:
    """Kayıtları cihaz formatındaki metne çevirir.

    Kayıtlar dosyadaki sırayla işlenir; sıralama yapılmaz. Ay adı bir önceki kayıttan
    farklı olduğunda yeni ay bloğu açılır. Boş girdi boş metin üretir.
    """
    name = format_location(location)
    parts: list[str] = []
    current_month = ""
    month_count = 0

    for record in records:
        if record.month != current_month:
            if current_month != "":
                _close_month(parts)
            current_month = record.month
            month_count += 1

            if month_count == 1:
                parts.append(FULL_HEADER_TEMPLATE.format(location=name))
            else:
                parts.append(MINI_HEADER_TEMPLATE.format(location=name))
            parts.append(MONTH_LINE_TEMPLATE.format(year=record.year, month=record.month))
            parts.append(COLUMN_TITLE_LINE)
            parts.append(SEPARATOR_LINE)

        parts.append(format_data_line(record))

    if parts:
        _close_month(parts)

    logger.debug(f"{name}: {month_count} ay bloğu üretildi")
    return "".join(parts)


def encode(records: Iterable[DailyRecord], location: str | None = None) -> bytes:
    """`encode_text` çıktısını UTF-8 byte olarak döndürür."""
    return encode_text(records, location).encode("utf-8")
