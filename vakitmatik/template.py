"""Tek günlük metin şablonu.

Kullanıcının verdiği şablondaki `{{imsak}}` gibi yer tutucuları bir günün vakitleriyle doldurur.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Iterable, Optional

from vakitmatik.data_loader.types import MONTH_NAMES, TIME_LABELS, DailyRecord

DEFAULT_TEMPLATE = (
    "{{date}}\nİmsak: {{imsak}}\nGüneş: {{gunes}}\nÖğle: {{ogle}}\n"
    "İkindi: {{ikindi}}\nAkşam: {{aksam}}\nYatsı: {{yatsi}}"
)

MAX_TEMPLATE_LENGTH = 10000
MAX_FILENAME_LENGTH = 255

_PLACEHOLDER_RE = re.compile(r"\{\{(\w+)\}\}")


def _display_time(value: str) -> str:
    # "06 47" -> "06:47"
    return value.replace(" ", ":", 1)


def template_values(record: DailyRecord, location: str) -> dict[str, str]:
    values = {label: _display_time(t) for label, t in zip(TIME_LABELS, record.times)}
    values["date"] = f"{record.day} {record.month} {record.year}"
    values["city"] = location
    return values


def render_template(template: str, record: DailyRecord, location: str = "") -> str:
    """Şablondaki bilinen yer tutucuları doldurur; bilinmeyenler olduğu gibi kalır."""
    values = template_values(record, location)
    return _PLACEHOLDER_RE.sub(lambda m: values.get(m.group(1), m.group(0)), template)


def record_date(record: DailyRecord) -> Optional[date]:
    """Kaydın takvim tarihi; ay adı tanınmıyorsa None."""
    if record.month not in MONTH_NAMES:
        return None
    try:
        return date(int(record.year), MONTH_NAMES.index(record.month) + 1, int(record.day))
    except ValueError:
        return None


def find_record(records: Iterable[DailyRecord], day: date) -> Optional[DailyRecord]:
    """Verilen güne ait ilk kaydı döndürür."""
    for record in records:
        if record_date(record) == day:
            return record
    return None


def default_export_filename(location: str, day: date) -> str:
    """Örn: "namaz-GEBZE-20260115.txt"."""
    return f"namaz-{location}-{day.strftime('%Y%m%d')}.txt"
