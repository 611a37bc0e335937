"""
Vakitmatik Dosya Üretici
Backend API - Flask

Diyanet'in yıllık namaz vakti tablosunu (Excel) yükleyip Vakitmatik cihazının okuduğu
sabit biçimli .txt dosyasını indirmeyi sağlar.
"""

from flask import Flask, jsonify, request, send_file
from flask_cors import CORS
import io
import os
import logging
import tempfile
from datetime import datetime
from pathlib import Path

from vakitmatik.config import AppConfig
from vakitmatik.data_loader.parsers import ScheduleSourceError, read_records
from vakitmatik.encoder import download_filename, encode, format_location
from vakitmatik.template import (
    DEFAULT_TEMPLATE,
    MAX_FILENAME_LENGTH,
    MAX_TEMPLATE_LENGTH,
    default_export_filename,
    find_record,
    render_template,
)

logger = logging.getLogger(__name__)

app = Flask(__name__)
CORS(app)

# ==================== KONFİGÜRASYON ====================

config = AppConfig.from_env()
app.config["MAX_CONTENT_LENGTH"] = config.max_upload_bytes


class UploadError(Exception):
    """Yüklenen dosya ile ilgili kullanıcı hatası (HTTP durum kodu ile)."""

    def __init__(self, message, status_code=400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


# ==================== YARDIMCI FONKSİYONLAR ====================


def error_response(message, status_code):
    return jsonify({"status": "error", "message": message}), status_code


def read_uploaded_records():
    """İstekteki `file` alanını geçici dosyaya kaydedip günlük kayıtları okur."""
    if "file" not in request.files:
        raise UploadError("Dosya yüklenmedi")
    file = request.files["file"]
    suffix = Path(file.filename or "").suffix.lower()
    if not file.filename or suffix not in config.upload_suffixes:
        raise UploadError("Geçerli bir Excel dosyası seçin")

    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as tmp:
        file.save(tmp.name)
        temp_path = tmp.name
    try:
        records = read_records(temp_path)
    except ScheduleSourceError as e:
        raise UploadError(str(e)) from e
    finally:
        if os.path.exists(temp_path):
            os.remove(temp_path)

    if not records:
        logger.warning("⚠️ Dosyada tanınan tarih satırı bulunamadı")
    return records


def location_from_request():
    return format_location(request.form.get("name") or config.default_location)


@app.errorhandler(UploadError)
def handle_upload_error(e):
    return error_response(e.message, e.status_code)


@app.errorhandler(413)
def handle_too_large(e):
    return error_response("Dosya boyutu çok büyük", 413)


# ==================== ENDPOINTS ====================


@app.route("/health")
def health():
    return jsonify({"status": "ok"})


@app.route("/api/vakitmatik/download", methods=["POST"])
def download_vakitmatik():
    """Yüklenen yıllık tabloyu Vakitmatik .txt dosyası olarak döndür"""
    location = location_from_request()
    records = read_uploaded_records()
    try:
        payload = encode(records, location)
    except Exception as e:
        logger.exception("❌ Dosya üretilemedi")
        return error_response(f"Dönüştürme hatası: {str(e)}", 500)

    logger.info(f"✅ {location}: {len(records)} gün dönüştürüldü")
    return send_file(
        io.BytesIO(payload),
        download_name=download_filename(location),
        as_attachment=True,
        mimetype="text/plain",
    )


@app.route("/api/export", methods=["POST"])
def export_day():
    """Tek bir günün vakitlerini şablona göre metin olarak döndür"""
    location = location_from_request()
    template = request.form.get("template") or DEFAULT_TEMPLATE
    filename = request.form.get("filename") or None
    raw_date = request.form.get("date") or None

    if len(template) > MAX_TEMPLATE_LENGTH:
        return error_response("Geçersiz parametre: şablon çok uzun", 400)
    if filename is not None and len(filename) > MAX_FILENAME_LENGTH:
        return error_response("Geçersiz parametre: dosya adı çok uzun", 400)
    try:
        day = datetime.strptime(raw_date, "%d.%m.%Y").date() if raw_date else datetime.now().date()
    except ValueError:
        return error_response("Geçersiz parametre: tarih GG.AA.YYYY olmalı", 400)

    records = read_uploaded_records()
    record = find_record(records, day)
    if record is None:
        return error_response(f"{day.strftime('%d.%m.%Y')} tarihi tabloda bulunamadı", 404)

    try:
        output = render_template(template, record, location)
    except Exception as e:
        logger.exception("❌ Şablon işlenemedi")
        return error_response(f"Export hatası: {str(e)}", 500)

    return send_file(
        io.BytesIO(output.encode("utf-8")),
        download_name=filename or default_export_filename(location, day),
        as_attachment=True,
        mimetype="text/plain",
    )


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG if config.debug else logging.INFO)
    print("🚀 Vakitmatik Dosya Üretici başlatılıyor...")
    print(f"✅ Sunucu çalışıyor: {config.api_host}:{config.api_port}")
    app.run(host=config.api_host, port=config.api_port, debug=config.debug)
