from datetime import date
from io import BytesIO
from typing import Iterable

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from report_logger.models import Report, PICTURE_SLOTS


EXPORT_COLUMNS = [
    ("ID", 8),
    ("Date", 18),
    ("Category", 24),
    ("Issue", 40),
    ("Solution", 40),
    ("Status", 14),
    ("Priority", 12),
    ("Escalated to", 20),
    ("Notes", 60),
    ("Picture 1", 11),
    ("Picture 2", 11),
    ("Picture 3", 11),
]

DATETIME_FORMAT = "%d.%m.%Y %H:%M"


def report_row(report: Report) -> list:
    return [
        report.id,
        report.datetime.strftime(DATETIME_FORMAT) if report.datetime else "",
        report.category.name,
        report.issue.description,
        report.solution.description,
        report.status,
        report.priority,
        report.escalate_name or "",
        report.notes or "",
    ] + ["Yes" if getattr(report, slot) else "No" for slot in PICTURE_SLOTS]


def build_reports_workbook(reports: Iterable[Report]) -> BytesIO:
    """Serialize reports into an in-memory .xlsx file, one row per report."""
    wb = Workbook()
    ws = wb.active
    ws.title = "Reports"

    ws.append([title for title, _ in EXPORT_COLUMNS])
    for cell in ws[1]:
        cell.font = Font(bold=True)
    for idx, (_, width) in enumerate(EXPORT_COLUMNS, start=1):
        ws.column_dimensions[get_column_letter(idx)].width = width
    ws.freeze_panes = "A2"

    for report in reports:
        ws.append(report_row(report))

    out = BytesIO()
    wb.save(out)
    out.seek(0)
    return out


def export_filename(today: date = None) -> str:
    today = today or date.today()
    return f"reports_{today.strftime('%Y%m%d')}.xlsx"
