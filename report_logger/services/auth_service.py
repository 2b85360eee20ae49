from typing import List

from flask_jwt_extended import create_access_token
from sqlalchemy.exc import IntegrityError

from report_logger.extensions import db, bcrypt
from report_logger.models import User
from report_logger.utils.errors import AuthError, ValidationError


def list_users() -> List[User]:
    return User.query.order_by(User.name.asc()).all()


def create_user(name: str, password: str) -> User:
    name = (name or "").strip()
    if not name or not password:
        raise ValidationError("Username and password are required")

    user = User(
        name=name,
        password_hash=bcrypt.generate_password_hash(password).decode("utf-8"),
    )
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ValidationError("Username already exists")
    return user


def authenticate(username: str, password: str) -> dict:
    user = User.query.filter_by(name=username.strip()).first()
    if not user:
        raise AuthError("Invalid username or password")

    try:
        password_ok = bcrypt.check_password_hash(user.password_hash or "", password)
    except (ValueError, TypeError):
        # A corrupt or legacy plain-text value must not turn into a 500
        raise AuthError("Invalid username or password")

    if not password_ok:
        raise AuthError("Invalid username or password")

    access_token = create_access_token(identity=str(user.id), additional_claims={"name": user.name})
    return {"id": user.id, "username": user.name, "access_token": access_token}
