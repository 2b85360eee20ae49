from flask import Blueprint, jsonify, request

from report_logger.schemas.lookup_schemas import CategorySchema
from report_logger.services import lookup_service


bp = Blueprint("category_routes", __name__)

category_schema = CategorySchema()
categories_schema = CategorySchema(many=True)


@bp.get("")
def list_categories():
    categories = lookup_service.list_categories()
    return jsonify(categories_schema.dump(categories)), 200


@bp.post("")
def create_category():
    data = category_schema.load(request.get_json(silent=True) or {})
    category = lookup_service.create_category(data)
    return jsonify(category_schema.dump(category)), 201


@bp.put("/<int:category_id>")
def update_category(category_id: int):
    data = category_schema.load(request.get_json(silent=True) or {})
    category = lookup_service.update_category(category_id, data)
    return jsonify(category_schema.dump(category)), 200
