# seed_lookups.py
import os

from report_logger import create_app
from report_logger.extensions import db
from report_logger.models import Category, Issue, Solution, User
from report_logger.services import auth_service

app = create_app()

SEED = {
    "Network": {
        "issues": ["No internet connection", "Slow Wi-Fi"],
        "solutions": ["Restarted the router", "Moved the access point"],
    },
    "Printer": {
        "issues": ["Paper jam", "Printer offline"],
        "solutions": ["Cleared the paper path", "Reinstalled the driver"],
    },
    "Workstation": {
        "issues": ["Computer does not boot", "Application crashes"],
        "solutions": ["Replaced the power supply", "Reinstalled the application"],
    },
}

with app.app_context():
    for name, entries in SEED.items():
        category = Category.query.filter_by(name=name).first()
        if category is None:
            category = Category(name=name)
            db.session.add(category)
            db.session.flush()  # category.id

        for description in entries["issues"]:
            if not Issue.query.filter_by(category_id=category.id, description=description).first():
                db.session.add(Issue(description=description, category_id=category.id))
        for description in entries["solutions"]:
            if not Solution.query.filter_by(category_id=category.id, description=description).first():
                db.session.add(Solution(description=description, category_id=category.id))

    db.session.commit()

    admin_name = os.getenv("SEED_ADMIN_NAME", "admin")
    if not User.query.filter_by(name=admin_name).first():
        auth_service.create_user(admin_name, os.getenv("SEED_ADMIN_PASSWORD", "admin"))

    print("Seed data loaded.")
