"""Komut satırından Vakitmatik dosyası üretme.

Diyanet'ten indirilen yıllık vakit tablosunu cihazın okuduğu .txt dosyasına çevirir.
Örnek kullanım:

  python -m vakitmatik.scripts.convert "path/to/gebze.xlsx" --name GEBZE --output-dir out/

Tek günlük şablon çıktısı için:

  python -m vakitmatik.scripts.convert gebze.xlsx --name GEBZE --date 15.01.2026 --template sablon.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

from vakitmatik.config import AppConfig
from vakitmatik.data_loader.parsers import ScheduleSourceError, read_records
from vakitmatik.encoder import download_filename, encode, format_location
from vakitmatik.template import DEFAULT_TEMPLATE, default_export_filename, find_record, render_template

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Vakitmatik - Excel'den cihaz dosyası üretici")
    parser.add_argument("input", help="Yıllık vakit tablosu (.xlsx/.xls/.csv)")
    parser.add_argument("--name", default=None, help="Konum adı (başlıkta ve dosya adında kullanılır)")
    parser.add_argument("--output", default=None, help="Çıktı dosyası yolu")
    parser.add_argument("--output-dir", default=None, help="Çıktı klasörü (varsayılan: config)")
    parser.add_argument("--date", default=None, help="Tek gün çıktısı için tarih (GG.AA.YYYY)")
    parser.add_argument("--template", default=None, help="Tek gün çıktısı için şablon dosyası")
    parser.add_argument("-v", "--verbose", action="store_true", help="Ayrıntılı log")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cfg = AppConfig.from_env()
    location = format_location(args.name or cfg.default_location)

    try:
        records = read_records(Path(args.input))
    except ScheduleSourceError as e:
        logger.error(f"❌ {e}")
        return 1

    if not records:
        logger.error("❌ Dosyada tanınan tarih satırı bulunamadı")
        return 1

    if args.date or args.template:
        if not args.date:
            logger.error("❌ --template ile birlikte --date verilmeli")
            return 1
        try:
            day = datetime.strptime(args.date, "%d.%m.%Y").date()
        except ValueError:
            logger.error(f"❌ Geçersiz tarih: {args.date} (GG.AA.YYYY bekleniyor)")
            return 1
        record = find_record(records, day)
        if record is None:
            logger.error(f"❌ {args.date} tarihi tabloda yok")
            return 1
        template = Path(args.template).read_text(encoding="utf-8") if args.template else DEFAULT_TEMPLATE
        payload = render_template(template, record, location).encode("utf-8")
        filename = default_export_filename(location, day)
    else:
        payload = encode(records, location)
        filename = download_filename(location)

    if args.output:
        out_path = Path(args.output)
    else:
        out_path = Path(args.output_dir) if args.output_dir else cfg.output_dir
        out_path = out_path / filename
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_bytes(payload)

    logger.info(f"💾 Kaydedildi: {out_path} ({len(payload)} byte)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
