"""
Image pipeline for report pictures.

Uploads are validated (extension, declared MIME type, size), written to a
temporary file in the upload folder, shrunk to fit the configured box and
re-encoded as JPEG under a deterministic name. When decoding or encoding
fails the original bytes are kept under the computed name instead, so a
failed compression never loses the upload.
"""
import os
import uuid
from datetime import date
from typing import Optional

from flask import current_app
from PIL import Image, ImageOps
from werkzeug.datastructures import FileStorage

from report_logger.utils.errors import StorageError, ValidationError


ALLOWED_MIMETYPES = {"image/jpeg", "image/jpg", "image/pjpeg", "image/png", "image/gif"}
UPLOADS_URL_PREFIX = "/uploads/"
COMPRESSED_EXTENSION = "jpg"


def upload_dir() -> str:
    path = current_app.config["UPLOAD_FOLDER"]
    os.makedirs(path, exist_ok=True)
    return path


def _extension(filename: str) -> str:
    _, ext = os.path.splitext(filename or "")
    return ext.lstrip(".").lower()


def _stream_size(file: FileStorage) -> int:
    stream = file.stream
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(0)
    return size


def validate_image(file: FileStorage) -> str:
    """Reject anything that is not a small jpeg/png/gif. Returns the extension."""
    if file is None or not file.filename:
        raise ValidationError("No image file provided")

    ext = _extension(file.filename)
    if ext not in current_app.config["ALLOWED_IMAGE_EXTENSIONS"]:
        raise ValidationError("Only image files are allowed (jpeg, jpg, png, gif)")

    mimetype = (file.mimetype or "").lower()
    if mimetype and mimetype != "application/octet-stream" and mimetype not in ALLOWED_MIMETYPES:
        raise ValidationError("Only image files are allowed (jpeg, jpg, png, gif)")

    max_bytes = current_app.config["MAX_IMAGE_BYTES"]
    if _stream_size(file) > max_bytes:
        raise ValidationError(f"Image exceeds the {max_bytes // (1024 * 1024)} MB limit")

    return ext


def build_image_name(report_id: int, slot: str, ext: str, today: Optional[date] = None) -> str:
    today = today or date.today()
    return f"{report_id}_{slot}_{today.strftime('%d%m%Y')}.{ext}"


def upload_url(filename: str) -> str:
    return f"{UPLOADS_URL_PREFIX}{filename}"


def resolve_upload(path: str) -> Optional[str]:
    """Map ``/uploads/<name>`` (or a bare name) to a file inside the upload folder."""
    if not path:
        return None
    name = os.path.basename(str(path).split(UPLOADS_URL_PREFIX, 1)[-1])
    if not name or name in (".", ".."):
        return None
    return os.path.join(upload_dir(), name)


def _flatten(img: Image.Image) -> Image.Image:
    if img.mode in ("RGBA", "LA") or (img.mode == "P" and "transparency" in img.info):
        img = img.convert("RGBA")
        background = Image.new("RGB", img.size, (255, 255, 255))
        background.paste(img, mask=img.getchannel("A"))
        return background
    if img.mode != "RGB":
        return img.convert("RGB")
    return img


def compress_image(source: str, target: str) -> None:
    max_dim = current_app.config["IMAGE_MAX_DIMENSION"]
    quality = current_app.config["IMAGE_QUALITY"]

    with Image.open(source) as original:
        img = _flatten(ImageOps.exif_transpose(original))
        # thumbnail() only ever shrinks
        img.thumbnail((max_dim, max_dim), Image.Resampling.LANCZOS)
        img.save(target, "JPEG", quality=quality, optimize=True)


def _remove_quietly(path: str) -> None:
    try:
        if os.path.isfile(path):
            os.remove(path)
    except OSError as exc:
        current_app.logger.warning("Could not remove %s: %s", path, exc)


def _store(file: FileStorage, stem: str, ext: str) -> str:
    folder = upload_dir()
    tmp_path = os.path.join(folder, f"tmp_{uuid.uuid4().hex}.{ext}")
    file.stream.seek(0)
    file.save(tmp_path)

    compressed_name = f"{stem}.{COMPRESSED_EXTENSION}"
    target = os.path.join(folder, compressed_name)
    try:
        compress_image(tmp_path, target)
    except Exception as exc:
        current_app.logger.warning(
            "Compression failed for %s, keeping the original file: %s", file.filename, exc
        )
        _remove_quietly(target)
        fallback_name = f"{stem}.{ext}"
        try:
            os.replace(tmp_path, os.path.join(folder, fallback_name))
        except OSError as move_exc:
            current_app.logger.error("Could not store upload %s: %s", fallback_name, move_exc)
            raise StorageError("Failed to store image") from move_exc
        return upload_url(fallback_name)

    _remove_quietly(tmp_path)
    return upload_url(compressed_name)


def store_report_image(file: FileStorage, report_id: int, slot: str, today: Optional[date] = None) -> str:
    """Validate, compress and save a picture for ``slot`` of a report; returns its /uploads path."""
    ext = validate_image(file)
    stem = build_image_name(report_id, slot, ext, today).rsplit(".", 1)[0]
    path = _store(file, stem, ext)
    current_app.logger.info("Stored %s for report %s as %s", slot, report_id, path)
    return path


def store_loose_image(file: FileStorage) -> str:
    ext = validate_image(file)
    return _store(file, uuid.uuid4().hex, ext)


def remove_upload(path: str) -> bool:
    """Best-effort removal of an uploaded file. Failures are logged, never raised."""
    local_path = resolve_upload(path)
    if not local_path or not os.path.isfile(local_path):
        return False
    try:
        os.remove(local_path)
    except OSError as exc:
        current_app.logger.warning("Could not delete upload %s: %s", local_path, exc)
        return False
    return True


def file_size(path: str) -> Optional[int]:
    local_path = resolve_upload(path)
    if not local_path or not os.path.isfile(local_path):
        return None
    return os.path.getsize(local_path)
