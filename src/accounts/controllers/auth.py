"""This module contains the session (login) controller."""

import typing as t

from ninja_extra import api_controller, route
from ninja_jwt.controller import TokenObtainPairController
from ninja_jwt.schema import TokenObtainPairInputSchema, TokenRefreshInputSchema, TokenRefreshOutputSchema

from accounts import schema
from accounts.models import MeetappUser
from accounts.service import auth as auth_service
from common.throttling import AuthThrottle


@api_controller("/sessions", tags=["Auth"], throttle=AuthThrottle())
class AuthController(TokenObtainPairController):
    @route.post("", response=schema.SessionSchema, url_name="create_session")
    def obtain_token(self, user_token: TokenObtainPairInputSchema) -> schema.SessionSchema:
        """Authenticate with email and password to obtain JWT access/refresh tokens.

        Send the access token as `Authorization: Bearer <access>` on every other endpoint.
        Invalid credentials return 401.
        """
        user = t.cast(MeetappUser, user_token._user)
        return auth_service.create_session(user)

    @route.post("/refresh", response=TokenRefreshOutputSchema, url_name="refresh_session")
    def refresh_token(self, refresh_token: TokenRefreshInputSchema) -> TokenRefreshOutputSchema:
        """Exchange a refresh token for a new access token."""
        return t.cast(TokenRefreshOutputSchema, refresh_token.to_response_schema())  # type: ignore[no-untyped-call]
