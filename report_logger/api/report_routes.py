from flask import Blueprint, jsonify, request, send_file

from report_logger.schemas.report_schemas import (
    ReportInputSchema,
    ReportSchema,
    ReportExportSchema,
    PictureDeleteSchema,
)
from report_logger.services import export_service, report_service
from report_logger.utils.errors import NotFoundError


bp = Blueprint("report_routes", __name__)
export_bp = Blueprint("export_routes", __name__)

report_input_schema = ReportInputSchema()
report_schema = ReportSchema()
reports_schema = ReportSchema(many=True)
report_export_schema = ReportExportSchema()
picture_delete_schema = PictureDeleteSchema()

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _load_report_payload():
    """Report fields come as multipart form fields when pictures are attached, JSON otherwise."""
    if request.mimetype == "multipart/form-data":
        return report_input_schema.load(request.form.to_dict()), request.files
    return report_input_schema.load(request.get_json(silent=True) or {}), None


@bp.get("")
def list_reports():
    """
    Filters (all optional, AND-ed): dateFrom, dateTo, categories, issues, solutions.
    """
    reports = report_service.list_reports(request.args)
    return jsonify(reports_schema.dump(reports)), 200


@bp.get("/<int:report_id>")
def get_report(report_id: int):
    return jsonify(report_schema.dump(report_service.get_report(report_id))), 200


@bp.post("")
def create_report():
    data, files = _load_report_payload()
    report = report_service.create_report(data, files)
    return jsonify(report_schema.dump(report)), 201


@bp.put("/<int:report_id>")
def update_report(report_id: int):
    data, files = _load_report_payload()
    report = report_service.update_report(report_id, data, files)
    return jsonify(report_schema.dump(report)), 200


@bp.delete("/<int:report_id>/pictures/<slot>")
def delete_picture(report_id: int, slot: str):
    payload = request.get_json(silent=True) or {}
    if "path" not in payload and request.args.get("path"):
        payload = {"path": request.args["path"]}
    data = picture_delete_schema.load(payload)
    report = report_service.delete_picture(report_id, slot, data["path"])
    return jsonify(report_schema.dump(report)), 200


@bp.delete("/<int:report_id>")
def delete_report(report_id: int):
    report_service.delete_report(report_id)
    return "", 204


@export_bp.post("/export-reports-excel")
def export_reports_excel():
    data = report_export_schema.load(request.get_json(silent=True) or {})
    reports = report_service.reports_by_ids(data["ids"])
    if not reports:
        raise NotFoundError("No reports found for export")

    workbook = export_service.build_reports_workbook(reports)
    return send_file(
        workbook,
        mimetype=XLSX_MIMETYPE,
        as_attachment=True,
        download_name=export_service.export_filename(),
    )
