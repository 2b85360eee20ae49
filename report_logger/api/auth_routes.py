from flask import Blueprint, jsonify, request

from report_logger.schemas.auth_schemas import LoginSchema, UserSchema
from report_logger.services import auth_service


bp = Blueprint("auth_routes", __name__)

login_schema = LoginSchema()
users_schema = UserSchema(many=True)


@bp.get("/users")
def list_users():
    return jsonify(users_schema.dump(auth_service.list_users())), 200


@bp.post("/login")
def login():
    data = login_schema.load(request.get_json(silent=True) or {})
    result = auth_service.authenticate(data["username"], data["password"])
    return jsonify(result), 200
