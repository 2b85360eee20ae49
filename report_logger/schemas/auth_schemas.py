from marshmallow import EXCLUDE, fields, validate

from report_logger.extensions import ma


class LoginSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    username = fields.String(required=True, validate=validate.Length(min=1))
    password = fields.String(required=True, load_only=True, validate=validate.Length(min=1))


class UserSchema(ma.Schema):
    id = fields.Integer()
    name = fields.String()
