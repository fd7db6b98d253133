"""Common schemas for the API."""

import typing as t

from ninja import ModelSchema, Schema
from pydantic import StringConstraints

from .models import File

NonEmptyString = t.Annotated[str, StringConstraints(min_length=1, strip_whitespace=True)]
OneToTwoFiftyFiveString = t.Annotated[str, StringConstraints(min_length=1, max_length=255, strip_whitespace=True)]


class VersionResponse(Schema):
    version: str


class ResponseOk(Schema):
    status: t.Literal["ok"] = "ok"


class ErrorResponse(Schema):
    error: str


class FieldError(Schema):
    field: str
    message: str


class ValidationErrorResponse(ErrorResponse):
    errors: list[FieldError]


class FileSchema(ModelSchema):
    path: str
    url: str

    class Meta:
        model = File
        fields = ["id"]

    @staticmethod
    def resolve_path(obj: File) -> str:
        return obj.path.name


class UploadedFileSchema(FileSchema):
    name: str
