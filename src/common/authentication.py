import typing as t

import structlog
from django.http import HttpRequest
from ninja_jwt.authentication import JWTAuth


class MeetappJWTAuth(JWTAuth):
    """JWT authentication that binds the authenticated user to the log context.

    The request middleware runs before ninja authentication, so the user id is
    only known here. Binding it makes every log event emitted while handling the
    request carry ``user_id``.

    Usage:
        @api_controller("/meetups", auth=MeetappJWTAuth())
        class MeetupController:
            ...
    """

    def authenticate(self, request: HttpRequest, token: str) -> t.Any:
        """Authenticate the request and bind the user id to structlog.

        Args:
            request: The HTTP request object
            token: The JWT token string

        Returns:
            The authenticated user object

        Raises:
            AuthenticationFailed: If authentication fails
            InvalidToken: If the token is invalid
        """
        user = super().authenticate(request, token)
        if user is not None:
            structlog.contextvars.bind_contextvars(user_id=str(user.pk))
        return user
