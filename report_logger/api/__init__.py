from .auth_routes import bp as auth_bp
from .message_routes import bp as messages_bp
from .category_routes import bp as categories_bp
from .issue_routes import bp as issues_bp
from .solution_routes import bp as solutions_bp
from .report_routes import bp as reports_bp, export_bp
from .upload_routes import bp as uploads_bp

__all__ = [
    "auth_bp",
    "messages_bp",
    "categories_bp",
    "issues_bp",
    "solutions_bp",
    "reports_bp",
    "export_bp",
    "uploads_bp",
]
