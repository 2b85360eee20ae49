from marshmallow import EXCLUDE, fields, pre_load, validate

from report_logger.extensions import ma
from report_logger.models import REPORT_STATUSES, REPORT_PRIORITIES


class ReportInputSchema(ma.Schema):
    """
    Body of POST/PUT /reports, sent either as JSON or as multipart form fields.
    """

    class Meta:
        unknown = EXCLUDE

    category_id = fields.Integer(required=True)
    issue_id = fields.Integer(required=True)
    solution_id = fields.Integer(required=True)
    notes = fields.String(required=False, allow_none=True, validate=validate.Length(max=1000))
    status = fields.String(required=False, validate=validate.OneOf(REPORT_STATUSES))
    priority = fields.String(required=False, validate=validate.OneOf(REPORT_PRIORITIES))
    escalate_name = fields.String(required=False, allow_none=True, validate=validate.Length(max=120))

    @pre_load
    def drop_blank_values(self, data, **kwargs):
        # Form posts send "" for untouched inputs
        cleaned = {}
        for key, value in dict(data).items():
            if isinstance(value, str):
                value = value.strip()
                if value == "":
                    if key in ("notes", "escalate_name"):
                        cleaned[key] = None
                    continue
            cleaned[key] = value
        return cleaned


class ReportSchema(ma.Schema):
    id = fields.Integer()
    category_id = fields.Integer()
    issue_id = fields.Integer()
    solution_id = fields.Integer()
    datetime = fields.DateTime()
    notes = fields.String(allow_none=True)
    status = fields.String()
    priority = fields.String()
    escalate_name = fields.String(allow_none=True)
    pic_name1 = fields.String(allow_none=True)
    pic_name2 = fields.String(allow_none=True)
    pic_name3 = fields.String(allow_none=True)

    category_name = fields.String(attribute="category.name")
    issue_description = fields.String(attribute="issue.description")
    solution_description = fields.String(attribute="solution.description")


class ReportExportSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    ids = fields.List(fields.Integer(), required=True, validate=validate.Length(min=1))


class PictureDeleteSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    path = fields.String(required=True, validate=validate.Length(min=1))
