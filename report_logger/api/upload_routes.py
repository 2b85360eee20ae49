from flask import Blueprint, current_app, jsonify, request

from report_logger.models import PICTURE_SLOTS
from report_logger.services import image_service
from report_logger.utils.errors import NotFoundError, ValidationError


bp = Blueprint("upload_routes", __name__)


@bp.post("/upload-image")
def upload_image():
    """
    Store a single picture. With ``report_id`` and ``slot`` form fields the file
    gets the deterministic report name, otherwise a random one.
    """
    file = request.files.get("image")
    if file is None or not file.filename:
        raise ValidationError("Send the picture in the 'image' field")

    report_id = (request.form.get("report_id") or "").strip()
    slot = (request.form.get("slot") or "").strip()

    if report_id or slot:
        if not report_id.isdigit() or slot not in PICTURE_SLOTS:
            raise ValidationError("report_id must be an integer and slot one of pic_name1..3")
        path = image_service.store_report_image(file, int(report_id), slot)
    else:
        path = image_service.store_loose_image(file)

    return jsonify({"path": path}), 201


@bp.delete("/delete-image/<path:filename>")
def delete_image(filename: str):
    if image_service.file_size(filename) is None:
        raise NotFoundError("File not found")
    image_service.remove_upload(filename)
    current_app.logger.info("Upload %s deleted", filename)
    return "", 204


@bp.get("/file-sizes")
def file_sizes():
    """Size in bytes of each requested upload path, null when missing."""
    paths = request.args.getlist("paths")
    return jsonify({path: image_service.file_size(path) for path in paths}), 200
