"""Exception handlers for the API.

Every error response carries a human-readable ``error`` field. Input validation failures also
carry the list of offending fields under ``errors``.
"""

import typing as t
from copy import deepcopy

import orjson
import structlog
from django.core.exceptions import NON_FIELD_ERRORS, ValidationError
from django.http import Http404, HttpRequest
from ninja.errors import HttpError
from ninja.errors import ValidationError as SchemaValidationError
from ninja.responses import Response
from ninja_extra.exceptions import APIException

from accounts.exceptions import PasswordMismatchError, UserAlreadyExistsError
from meetups.exceptions import MeetupPermissionError, MeetupValidationError

logger = structlog.get_logger(__name__)

VALIDATION_FAILS = "Validation fails"


def handle_general_exception(request: HttpRequest, exc: Exception | t.Type[Exception]) -> Response:
    """Log an unexpected error and answer with a generic 500.

    Args:
        request: The incoming HTTP request.
        exc: The exception.

    Returns:
        The response.
    """
    json_payload = None
    if request.method in ("POST", "PUT", "PATCH") and request.content_type == "application/json":
        try:
            json_payload = obfuscate(orjson.loads(request.body))
        except orjson.JSONDecodeError:  # pragma: no cover
            json_payload = None
    logger.exception(
        "INTERNAL_SERVER_ERROR",
        method=request.method,
        path=request.path,
        payload=json_payload,
    )
    return Response(status=500, data={"error": "Internal Server Error."})


def handle_not_found(request: HttpRequest, exc: Http404 | t.Type[Http404]) -> Response:
    """Answer a lookup of a record that does not exist."""
    return Response(status=404, data={"error": "Not Found"})


def handle_schema_validation_error(
    request: HttpRequest, exc: SchemaValidationError | t.Type[SchemaValidationError]
) -> Response:
    """Turn pydantic errors raised while parsing the request into field errors.

    Locations look like ``("body", "payload", "title")`` or ``("query", "date")``; the leading
    source and argument names are dropped.
    """
    errors = []
    for error in exc.errors:  # type: ignore[union-attr]
        loc = [str(part) for part in error.get("loc", ())]
        field = loc[-1] if len(loc) <= 2 else ".".join(loc[2:])
        errors.append({"field": field, "message": error.get("msg", "")})
    logger.info("request_validation_failed", path=request.path, fields=[e["field"] for e in errors])
    return Response(status=400, data={"error": VALIDATION_FAILS, "errors": errors})


def handle_django_validation_error(request: HttpRequest, exc: ValidationError | t.Type[ValidationError]) -> Response:
    """Handle a model validation error.

    Args:
        request: The incoming HTTP request.
        exc: The exception.
    """
    logger.info("model_validation_failed", path=request.path)
    if hasattr(exc, "error_dict"):
        errors = [
            {"field": "__all__" if field == NON_FIELD_ERRORS else field, "message": message}
            for field, messages in exc.message_dict.items()  # type: ignore[union-attr]
            for message in messages
        ]
    else:
        errors = [{"field": "__all__", "message": message} for message in exc.messages]  # type: ignore[union-attr]
    return Response(status=400, data={"error": VALIDATION_FAILS, "errors": errors})


def handle_http_error(request: HttpRequest, exc: HttpError | t.Type[HttpError]) -> Response:
    """Handle errors raised by ninja itself, e.g. a missing bearer token."""
    return Response(status=exc.status_code, data={"error": str(exc)})  # type: ignore[union-attr]


def handle_api_exception(request: HttpRequest, exc: APIException | t.Type[APIException]) -> Response:
    """Handle ninja-extra errors: invalid tokens, bad credentials, throttling."""
    detail = exc.detail  # type: ignore[union-attr]
    if isinstance(detail, dict):
        message = detail.get("detail", VALIDATION_FAILS)
    elif isinstance(detail, list):
        message = detail[0] if detail else VALIDATION_FAILS
    else:
        message = detail
    return Response(status=exc.status_code, data={"error": str(message)})  # type: ignore[union-attr]


def handle_validation_error(
    request: HttpRequest, exc: MeetupValidationError | t.Type[MeetupValidationError]
) -> Response:
    """Handle a meetup rule violation caused by the request content."""
    return Response(status=400, data={"error": str(exc)})


def handle_permission_error(
    request: HttpRequest, exc: MeetupPermissionError | t.Type[MeetupPermissionError]
) -> Response:
    """Handle an action the caller may not perform on a meetup or subscription."""
    return Response(status=401, data={"error": str(exc)})


def handle_user_already_exists_error(
    request: HttpRequest, exc: UserAlreadyExistsError | t.Type[UserAlreadyExistsError]
) -> Response:
    """Handle a registration or email change to an address already in use."""
    return Response(status=400, data={"error": str(exc)})


def handle_password_mismatch_error(
    request: HttpRequest, exc: PasswordMismatchError | t.Type[PasswordMismatchError]
) -> Response:
    """Handle a wrong current password on profile update."""
    return Response(status=401, data={"error": str(exc)})


SENSITIVE_KEYS = {"password", "old_password", "confirm_password", "token", "refresh", "access"}


def obfuscate(data: t.Any) -> t.Any:
    """Obfuscate sensitive values in a request payload."""
    if not isinstance(data, dict):
        return data
    new_data = deepcopy(data)
    for key in data.keys():
        if key.lower() in SENSITIVE_KEYS:
            new_data[key] = "********"
    return new_data
