from datetime import datetime

from report_logger.extensions import db


REPORT_STATUSES = ("in_progress", "done", "escalate")
REPORT_PRIORITIES = ("pendant", "high", "low")
PICTURE_SLOTS = ("pic_name1", "pic_name2", "pic_name3")


class Report(db.Model):
    __tablename__ = "reports"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)

    category_id = db.Column(
        db.Integer,
        db.ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    issue_id = db.Column(
        db.Integer,
        db.ForeignKey("issues.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    solution_id = db.Column(
        db.Integer,
        db.ForeignKey("solutions.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    datetime = db.Column(db.DateTime, default=datetime.now, nullable=False, index=True)
    notes = db.Column(db.Text, nullable=True)

    status = db.Column(
        db.Enum(*REPORT_STATUSES, name="report_status_enum"),
        default="in_progress",
        nullable=False,
    )
    priority = db.Column(
        db.Enum(*REPORT_PRIORITIES, name="report_priority_enum"),
        default="pendant",
        nullable=False,
    )
    escalate_name = db.Column(db.String(120), nullable=True)

    pic_name1 = db.Column(db.String(255), nullable=True)
    pic_name2 = db.Column(db.String(255), nullable=True)
    pic_name3 = db.Column(db.String(255), nullable=True)

    category = db.relationship("Category", lazy="joined", innerjoin=True)
    issue = db.relationship("Issue", lazy="joined", innerjoin=True)
    solution = db.relationship("Solution", lazy="joined", innerjoin=True)

    def __repr__(self) -> str:
        return f"<Report id={self.id} status={self.status} priority={self.priority}>"
