"""initial report logger schema

Revision ID: 20261018_0001
Revises:
Create Date: 2026-10-18

"""

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect


revision = "20261018_0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = inspect(bind)
    tables = set(insp.get_table_names())

    if "categories" not in tables:
        op.create_table(
            "categories",
            sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column("name", sa.String(length=120), nullable=False),
        )

    for table, text_column in (("issues", "description"), ("solutions", "desc")):
        if table not in tables:
            op.create_table(
                table,
                sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
                sa.Column(text_column, sa.String(length=500), nullable=False),
                sa.Column("category_id", sa.Integer(), nullable=False),
                sa.ForeignKeyConstraint(["category_id"], ["categories.id"], ondelete="RESTRICT"),
            )
            op.create_index(f"ix_{table}_category_id", table, ["category_id"], unique=False)

    if "reports" not in tables:
        op.create_table(
            "reports",
            sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column("category_id", sa.Integer(), nullable=False),
            sa.Column("issue_id", sa.Integer(), nullable=False),
            sa.Column("solution_id", sa.Integer(), nullable=False),
            sa.Column("datetime", sa.DateTime(), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=False),
            sa.Column("notes", sa.Text(), nullable=True),
            sa.Column(
                "status",
                sa.Enum("in_progress", "done", "escalate", name="report_status_enum"),
                server_default="in_progress",
                nullable=False,
            ),
            sa.Column(
                "priority",
                sa.Enum("pendant", "high", "low", name="report_priority_enum"),
                server_default="pendant",
                nullable=False,
            ),
            sa.Column("escalate_name", sa.String(length=120), nullable=True),
            sa.Column("pic_name1", sa.String(length=255), nullable=True),
            sa.Column("pic_name2", sa.String(length=255), nullable=True),
            sa.Column("pic_name3", sa.String(length=255), nullable=True),
            sa.ForeignKeyConstraint(["category_id"], ["categories.id"], ondelete="RESTRICT"),
            sa.ForeignKeyConstraint(["issue_id"], ["issues.id"], ondelete="RESTRICT"),
            sa.ForeignKeyConstraint(["solution_id"], ["solutions.id"], ondelete="RESTRICT"),
        )
        op.create_index("ix_reports_category_id", "reports", ["category_id"], unique=False)
        op.create_index("ix_reports_issue_id", "reports", ["issue_id"], unique=False)
        op.create_index("ix_reports_solution_id", "reports", ["solution_id"], unique=False)
        op.create_index("ix_reports_datetime", "reports", ["datetime"], unique=False)

    if "messages" not in tables:
        op.create_table(
            "messages",
            sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column("title", sa.String(length=255), nullable=False),
            sa.Column("content", sa.Text(), nullable=False),
            sa.Column("created_at", sa.DateTime(), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=False),
            sa.Column("updated_at", sa.DateTime(), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=False),
        )
        op.create_index("ix_messages_created_at", "messages", ["created_at"], unique=False)

    if "users" not in tables:
        op.create_table(
            "users",
            sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column("name", sa.String(length=100), nullable=False, unique=True),
            sa.Column("pass", sa.String(length=255), nullable=False),
        )


def downgrade():
    bind = op.get_bind()
    insp = inspect(bind)
    tables = set(insp.get_table_names())

    for table in ("users", "messages", "reports", "solutions", "issues", "categories"):
        if table in tables:
            op.drop_table(table)
