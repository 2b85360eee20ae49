"""
Categories and the two category-scoped lookup tables (issues, solutions).

Issue and Solution share the same shape (``description`` + ``category_id``),
so their operations take the model class as first argument.
"""
from typing import Any, Dict, List

from flask import current_app
from sqlalchemy.orm import contains_eager

from report_logger.extensions import db
from report_logger.models import Category, Issue, Report
from report_logger.utils.errors import NotFoundError, ValidationError


def _clean_text(value, field: str) -> str:
    text = str(value or "").strip()
    if not text:
        raise ValidationError(f"{field} is required")
    return text


# =========================
# Categories
# =========================

def list_categories() -> List[Category]:
    return Category.query.order_by(Category.name.asc()).all()


def create_category(data: Dict[str, Any]) -> Category:
    category = Category(name=_clean_text(data.get("name"), "Name"))
    db.session.add(category)
    db.session.commit()
    return category


def update_category(category_id: int, data: Dict[str, Any]) -> Category:
    category = db.session.get(Category, category_id)
    if category is None:
        raise NotFoundError("Category not found")

    category.name = _clean_text(data.get("name"), "Name")
    db.session.commit()
    return category


def require_category(category_id: int) -> Category:
    category = db.session.get(Category, category_id)
    if category is None:
        raise ValidationError("Category does not exist")
    return category


# =========================
# Issues / Solutions
# =========================

def list_entries(model) -> list:
    return model.query.order_by(model.description.asc()).all()


def list_descriptions_by_category(model, category_id: int) -> List[str]:
    rows = (
        model.query
        .filter(model.category_id == category_id)
        .order_by(model.description.asc())
        .all()
    )
    return [row.description for row in rows]


def list_with_categories(model) -> list:
    return (
        model.query
        .join(model.category)
        .options(contains_eager(model.category))
        .order_by(Category.name.asc(), model.description.asc())
        .all()
    )


def create_entry(model, data: Dict[str, Any]):
    require_category(data["category_id"])
    entry = model(
        description=_clean_text(data.get("description"), "Description"),
        category_id=data["category_id"],
    )
    db.session.add(entry)
    db.session.commit()
    return entry


def update_entry(model, entry_id: int, data: Dict[str, Any]):
    entry = db.session.get(model, entry_id)
    if entry is None:
        raise NotFoundError(f"{model.__name__} not found")

    require_category(data["category_id"])
    entry.description = _clean_text(data.get("description"), "Description")
    entry.category_id = data["category_id"]
    db.session.commit()
    return entry


def delete_issue(issue_id: int) -> None:
    issue = db.session.get(Issue, issue_id)
    if issue is None:
        raise NotFoundError("Issue not found")

    # Reports inner-join their issue, so a referenced issue must stay
    in_use = db.session.query(Report.id).filter(Report.issue_id == issue_id).first()
    if in_use is not None:
        raise ValidationError("Issue is used by existing reports and cannot be deleted")

    db.session.delete(issue)
    db.session.commit()
    current_app.logger.info("Issue %s deleted", issue_id)
