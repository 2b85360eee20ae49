from marshmallow import EXCLUDE, fields, validate

from report_logger.extensions import ma


class CategorySchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    id = fields.Integer(dump_only=True)
    name = fields.String(required=True, validate=validate.Length(min=1, max=120))


class IssueSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    id = fields.Integer(dump_only=True)
    description = fields.String(required=True, validate=validate.Length(min=1, max=500))
    category_id = fields.Integer(required=True)


class IssueWithCategorySchema(IssueSchema):
    category_name = fields.String(attribute="category.name", dump_only=True)


class SolutionSchema(ma.Schema):
    """Solutions expose their text as ``desc`` on the wire."""

    class Meta:
        unknown = EXCLUDE

    id = fields.Integer(dump_only=True)
    description = fields.String(
        data_key="desc",
        required=True,
        validate=validate.Length(min=1, max=500),
    )
    category_id = fields.Integer(required=True)


class SolutionWithCategorySchema(SolutionSchema):
    category_name = fields.String(attribute="category.name", dump_only=True)
