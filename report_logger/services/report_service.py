from datetime import datetime
from typing import Any, Dict, List, Mapping

from flask import current_app
from werkzeug.datastructures import FileStorage

from report_logger.extensions import db
from report_logger.models import Category, Issue, Solution, Report, PICTURE_SLOTS
from report_logger.services import image_service
from report_logger.services.report_filters import build_report_criteria
from report_logger.utils.errors import NotFoundError, ValidationError


def _ordered(query):
    return query.order_by(Report.datetime.desc(), Report.id.desc())


def list_reports(args: Mapping) -> List[Report]:
    """Reports matching every supplied filter, newest first."""
    criteria = build_report_criteria(args)
    return _ordered(Report.query.filter(*criteria)).all()


def get_report(report_id: int) -> Report:
    report = db.session.get(Report, report_id)
    if report is None:
        raise NotFoundError("Report not found")
    return report


def reports_by_ids(ids: List[int]) -> List[Report]:
    if not ids:
        return []
    return _ordered(Report.query.filter(Report.id.in_(ids))).all()


def _check_references(data: Dict[str, Any]) -> None:
    for model, key in ((Category, "category_id"), (Issue, "issue_id"), (Solution, "solution_id")):
        if db.session.get(model, data[key]) is None:
            raise ValidationError(f"{key} does not reference an existing {model.__name__.lower()}")


def _validated_uploads(files: Mapping) -> Dict[str, FileStorage]:
    """Picture files keyed by slot. Every file is checked before anything is written."""
    uploads: Dict[str, FileStorage] = {}
    if not files:
        return uploads
    for slot in PICTURE_SLOTS:
        file = files.get(slot)
        if file is None or not file.filename:
            continue
        image_service.validate_image(file)
        uploads[slot] = file
    return uploads


def _escalate_name(status: str, value):
    if status != "escalate":
        return None
    return value


def create_report(data: Dict[str, Any], files: Mapping = None) -> Report:
    uploads = _validated_uploads(files)
    _check_references(data)

    status = data.get("status") or "in_progress"
    report = Report(
        category_id=data["category_id"],
        issue_id=data["issue_id"],
        solution_id=data["solution_id"],
        datetime=datetime.now(),
        notes=data.get("notes"),
        status=status,
        priority=data.get("priority") or "pendant",
        escalate_name=_escalate_name(status, data.get("escalate_name")),
    )

    # Insert and picture paths share one transaction; the flush assigns the id
    # that the file names embed.
    try:
        db.session.add(report)
        db.session.flush()
        for slot, file in uploads.items():
            setattr(report, slot, image_service.store_report_image(file, report.id, slot))
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    current_app.logger.info("Report %s created with %s picture(s)", report.id, len(uploads))
    return report


def update_report(report_id: int, data: Dict[str, Any], files: Mapping = None) -> Report:
    uploads = _validated_uploads(files)
    report = get_report(report_id)
    _check_references(data)

    report.category_id = data["category_id"]
    report.issue_id = data["issue_id"]
    report.solution_id = data["solution_id"]
    if "notes" in data:
        report.notes = data["notes"]
    if data.get("status"):
        report.status = data["status"]
    if data.get("priority"):
        report.priority = data["priority"]
    report.escalate_name = _escalate_name(
        report.status, data.get("escalate_name", report.escalate_name)
    )

    # Slots without a new file keep their stored path
    replaced: List[str] = []
    try:
        for slot, file in uploads.items():
            previous = getattr(report, slot)
            path = image_service.store_report_image(file, report.id, slot)
            setattr(report, slot, path)
            if previous and previous != path:
                replaced.append(previous)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    for path in replaced:
        image_service.remove_upload(path)

    return report


def delete_picture(report_id: int, slot: str, expected_path: str) -> Report:
    if slot not in PICTURE_SLOTS:
        raise ValidationError(f"Unknown picture slot '{slot}'")

    report = get_report(report_id)
    current = getattr(report, slot)
    if not current or current != expected_path:
        raise ValidationError("Picture path does not match the stored value")

    setattr(report, slot, None)
    db.session.commit()

    if not image_service.remove_upload(current):
        current_app.logger.warning("Picture %s of report %s was not on disk", current, report_id)
    return report


def delete_report(report_id: int) -> None:
    report = get_report(report_id)
    db.session.delete(report)
    db.session.commit()
    current_app.logger.info("Report %s deleted", report_id)
