from datetime import date, datetime, time, timedelta
from typing import Mapping, Optional

from report_logger.models import Report
from report_logger.utils.errors import ValidationError


# Query parameter -> exact-match column
ID_FILTERS = {
    "categories": Report.category_id,
    "issues": Report.issue_id,
    "solutions": Report.solution_id,
}


def _parse_day(value, name: str) -> Optional[date]:
    text = str(value or "").strip()
    if not text:
        return None
    try:
        # Plain dates or full ISO timestamps; only the day matters
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        raise ValidationError(f"Invalid {name}. Use YYYY-MM-DD.")


def _parse_id(value) -> Optional[int]:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


def build_report_criteria(args: Mapping) -> list:
    """
    Turn the optional GET /reports query parameters into SQLAlchemy criteria.

    All criteria are meant to be AND-ed. ``dateFrom`` starts at 00:00:00 of its
    day and ``dateTo`` covers its whole day. Id filters that are not integers
    are ignored.
    """
    criteria = []

    date_from = _parse_day(args.get("dateFrom"), "dateFrom")
    if date_from is not None:
        criteria.append(Report.datetime >= datetime.combine(date_from, time.min))

    date_to = _parse_day(args.get("dateTo"), "dateTo")
    if date_to is not None:
        criteria.append(Report.datetime < datetime.combine(date_to + timedelta(days=1), time.min))

    for param, column in ID_FILTERS.items():
        value = _parse_id(args.get(param))
        if value is not None:
            criteria.append(column == value)

    return criteria
