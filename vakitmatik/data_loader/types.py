"""Normalizer tipleri.

Bu dosyadaki dataclass'lar, tablodan okunan satırların normalize edilmiş temsilidir.
"""

from __future__ import annotations

from dataclasses import dataclass


# Vakit sütunlarının sırası (çıktı dosyasındaki sıra ile aynı)
TIME_LABELS: tuple[str, ...] = ("imsak", "gunes", "ogle", "ikindi", "aksam", "yatsi")

# Cihaz formatındaki 7. sütun (K.SAT); kaynak veride yoktur, her zaman sıfırdır.
KSAT_SENTINEL = "00 00"

# Sabit 12 ay tablosu (ASCII büyük harf, çıktıda kullanılan biçim)
MONTH_NAMES: tuple[str, ...] = (
    "OCAK",
    "SUBAT",
    "MART",
    "NISAN",
    "MAYIS",
    "HAZIRAN",
    "TEMMUZ",
    "AGUSTOS",
    "EYLUL",
    "EKIM",
    "KASIM",
    "ARALIK",
)


@dataclass(frozen=True, slots=True)
class DailyRecord:
    """Bir günün vakit satırı.

    `day` iki haneli metin ("03"), `month` kanonik ay adı ("SUBAT"), `year` dört haneli metin.
    `times` altı vakti `HH MM` biçiminde tutar.
    """

    day: str
    month: str
    year: str
    times: tuple[str, str, str, str, str, str]

    def time_of(self, label: str) -> str:
        """Etiketle (örn. "ogle") vakit değerini döndürür."""
        return self.times[TIME_LABELS.index(label)]
