"""Uygulama yapılandırması (config).

Bu dosya, çıktı klasörü ve sunucu ayarları gibi ortamdan okunabilen sabitleri tek yerde toplar.
Değerler `.env` dosyasından veya ortam değişkenlerinden `AppConfig.from_env()` ile okunur.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on", "evet")


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Uygulama konfigürasyon değerleri."""

    # Üretilen .txt dosyalarının varsayılan klasörü (CLI)
    output_dir: Path = Path.cwd()
    # Kabul edilen tablo dosyası uzantıları
    upload_suffixes: tuple[str, ...] = (".xlsx", ".xlsm", ".xls", ".csv")
    max_upload_bytes: int = 5 * 1024 * 1024
    api_host: str = "0.0.0.0"
    api_port: int = 5000
    debug: bool = False
    # Konum adı verilmezse başlıklarda kullanılır
    default_location: str = "SOH"

    @classmethod
    def from_env(cls) -> "AppConfig":
        """`.env` dosyasını yükleyip ortam değişkenlerinden config üretir."""
        load_dotenv()
        defaults = cls()
        max_mb = os.getenv("MAX_UPLOAD_MB")
        return cls(
            output_dir=Path(os.getenv("VAKITMATIK_OUTPUT_DIR", str(defaults.output_dir))),
            max_upload_bytes=int(float(max_mb) * 1024 * 1024) if max_mb else defaults.max_upload_bytes,
            api_host=os.getenv("API_HOST", defaults.api_host),
            api_port=int(os.getenv("API_PORT", defaults.api_port)),
            debug=_env_bool(os.getenv("FLASK_DEBUG"), defaults.debug),
            default_location=os.getenv("VAKITMATIK_DEFAULT_LOCATION", defaults.default_location),
        )
