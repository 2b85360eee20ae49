from flask import Blueprint, jsonify, request

from report_logger.models import Issue
from report_logger.schemas.lookup_schemas import IssueSchema, IssueWithCategorySchema
from report_logger.services import lookup_service


bp = Blueprint("issue_routes", __name__)

issue_schema = IssueSchema()
issues_schema = IssueSchema(many=True)
issues_with_categories_schema = IssueWithCategorySchema(many=True)


@bp.get("")
def list_issues():
    return jsonify(issues_schema.dump(lookup_service.list_entries(Issue))), 200


@bp.get("/category/<int:category_id>")
def list_issues_by_category(category_id: int):
    """Bare descriptions, used to fill the issue dropdown of a category."""
    return jsonify(lookup_service.list_descriptions_by_category(Issue, category_id)), 200


@bp.get("/with-categories")
def list_issues_with_categories():
    issues = lookup_service.list_with_categories(Issue)
    return jsonify(issues_with_categories_schema.dump(issues)), 200


@bp.post("")
def create_issue():
    data = issue_schema.load(request.get_json(silent=True) or {})
    issue = lookup_service.create_entry(Issue, data)
    return jsonify(issue_schema.dump(issue)), 201


@bp.put("/<int:issue_id>")
def update_issue(issue_id: int):
    data = issue_schema.load(request.get_json(silent=True) or {})
    issue = lookup_service.update_entry(Issue, issue_id, data)
    return jsonify(issue_schema.dump(issue)), 200


@bp.delete("/<int:issue_id>")
def delete_issue(issue_id: int):
    lookup_service.delete_issue(issue_id)
    return "", 204
