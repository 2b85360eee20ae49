from flask import Blueprint, jsonify, request

from report_logger.schemas.message_schemas import MessageSchema
from report_logger.services import message_service


bp = Blueprint("message_routes", __name__)

message_schema = MessageSchema()
messages_schema = MessageSchema(many=True)


@bp.get("")
def list_messages():
    return jsonify(messages_schema.dump(message_service.list_messages())), 200


@bp.post("")
def create_message():
    data = message_schema.load(request.get_json(silent=True) or {})
    message = message_service.create_message(data)
    return jsonify(message_schema.dump(message)), 201


@bp.put("/<int:message_id>")
def update_message(message_id: int):
    data = message_schema.load(request.get_json(silent=True) or {})
    message = message_service.update_message(message_id, data)
    return jsonify(message_schema.dump(message)), 200


@bp.delete("/<int:message_id>")
def delete_message(message_id: int):
    message_service.delete_message(message_id)
    return "", 204
