from .category import Category
from .issue import Issue
from .solution import Solution
from .report import Report, REPORT_STATUSES, REPORT_PRIORITIES, PICTURE_SLOTS
from .message import Message
from .user import User

__all__ = [
    "Category",
    "Issue",
    "Solution",
    "Report",
    "REPORT_STATUSES",
    "REPORT_PRIORITIES",
    "PICTURE_SLOTS",
    "Message",
    "User",
]
