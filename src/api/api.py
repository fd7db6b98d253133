from django.conf import settings
from django.core.exceptions import ValidationError
from django.http import Http404, HttpRequest
from ninja.errors import HttpError
from ninja.errors import ValidationError as SchemaValidationError
from ninja_extra import NinjaExtraAPI
from ninja_extra.exceptions import APIException

from accounts.controllers.account import AccountController
from accounts.controllers.auth import AuthController
from accounts.exceptions import PasswordMismatchError, UserAlreadyExistsError
from common.controllers import FileController
from common.schema import ResponseOk, VersionResponse
from common.throttling import AnonDefaultThrottle, UserDefaultThrottle
from meetups.controllers import MeetupController, OrganizingController, SubscriptionController
from meetups.exceptions import MeetupPermissionError, MeetupValidationError

from .exception_handlers import (
    handle_api_exception,
    handle_django_validation_error,
    handle_general_exception,
    handle_http_error,
    handle_not_found,
    handle_password_mismatch_error,
    handle_permission_error,
    handle_schema_validation_error,
    handle_user_already_exists_error,
    handle_validation_error,
)

api = NinjaExtraAPI(
    title="Meetapp API",
    docs_url="/docs",
    version=settings.VERSION,
    description=f"Meetapp API {settings.VERSION}",
    app_name=f"meetapp-api-{settings.VERSION}",
    urls_namespace="api",
    servers=[
        {"url": settings.SERVICE_URL, "description": settings.SERVICE_DESCRIPTION},
    ],
    throttle=[AnonDefaultThrottle(), UserDefaultThrottle()],
)


@api.get("/version", tags=["Version"], response={200: VersionResponse})
def version(request: HttpRequest) -> tuple[int, VersionResponse]:
    """Get the API version.

    Args:
        request: The incoming HTTP request.

    Returns:
        The response status code and message.
    """
    return 200, VersionResponse(version=settings.VERSION)


@api.get("/healthcheck", tags=["Healthcheck"], response={200: ResponseOk})
def healthcheck(request: HttpRequest) -> tuple[int, ResponseOk]:
    """Check the health of the API."""
    return 200, ResponseOk()


api.register_controllers(
    # Auth/Account controllers
    AuthController,
    AccountController,
    # Common controllers
    FileController,
    # Meetup controllers
    MeetupController,
    OrganizingController,
    SubscriptionController,
)

EXCEPTION_HANDLERS = {
    Exception: handle_general_exception,
    Http404: handle_not_found,
    SchemaValidationError: handle_schema_validation_error,
    HttpError: handle_http_error,
    APIException: handle_api_exception,
    ValidationError: handle_django_validation_error,
    MeetupValidationError: handle_validation_error,
    MeetupPermissionError: handle_permission_error,
    UserAlreadyExistsError: handle_user_already_exists_error,
    PasswordMismatchError: handle_password_mismatch_error,
}

for exc, handler in EXCEPTION_HANDLERS.items():
    api.add_exception_handler(exc, handler)
