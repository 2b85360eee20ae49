from flask import Blueprint, jsonify, request

from report_logger.models import Solution
from report_logger.schemas.lookup_schemas import SolutionSchema, SolutionWithCategorySchema
from report_logger.services import lookup_service


bp = Blueprint("solution_routes", __name__)

solution_schema = SolutionSchema()
solutions_schema = SolutionSchema(many=True)
solutions_with_categories_schema = SolutionWithCategorySchema(many=True)


@bp.get("")
def list_solutions():
    return jsonify(solutions_schema.dump(lookup_service.list_entries(Solution))), 200


@bp.get("/category/<int:category_id>")
def list_solutions_by_category(category_id: int):
    return jsonify(lookup_service.list_descriptions_by_category(Solution, category_id)), 200


@bp.get("/with-categories")
def list_solutions_with_categories():
    solutions = lookup_service.list_with_categories(Solution)
    return jsonify(solutions_with_categories_schema.dump(solutions)), 200


@bp.post("")
def create_solution():
    data = solution_schema.load(request.get_json(silent=True) or {})
    solution = lookup_service.create_entry(Solution, data)
    return jsonify(solution_schema.dump(solution)), 201


@bp.put("/<int:solution_id>")
def update_solution(solution_id: int):
    data = solution_schema.load(request.get_json(silent=True) or {})
    solution = lookup_service.update_entry(Solution, solution_id, data)
    return jsonify(solution_schema.dump(solution)), 200
