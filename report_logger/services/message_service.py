from datetime import datetime
from typing import Any, Dict, List

from report_logger.extensions import db
from report_logger.models import Message
from report_logger.utils.errors import NotFoundError


def list_messages() -> List[Message]:
    return Message.query.order_by(Message.created_at.desc(), Message.id.desc()).all()


def create_message(data: Dict[str, Any]) -> Message:
    now = datetime.now()
    message = Message(title=data["title"], content=data["content"], created_at=now, updated_at=now)
    db.session.add(message)
    db.session.commit()
    return message


def update_message(message_id: int, data: Dict[str, Any]) -> Message:
    message = db.session.get(Message, message_id)
    if message is None:
        raise NotFoundError("Message not found")

    message.title = data["title"]
    message.content = data["content"]
    message.updated_at = datetime.now()
    db.session.commit()
    return message


def delete_message(message_id: int) -> None:
    message = db.session.get(Message, message_id)
    if message is None:
        raise NotFoundError("Message not found")

    db.session.delete(message)
    db.session.commit()
