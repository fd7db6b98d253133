"""This module contains the controllers for user accounts."""

from ninja_extra import api_controller, route

from accounts import schema
from accounts.models import MeetappUser
from accounts.service import account as account_service
from common.authentication import MeetappJWTAuth
from common.controllers import UserAwareController
from common.schema import ErrorResponse, ValidationErrorResponse
from common.throttling import UserRegistrationThrottle, WriteThrottle


@api_controller("/users", tags=["Users"])
class AccountController(UserAwareController):
    @route.post(
        "",
        response={200: schema.UserSchema, 400: ValidationErrorResponse | ErrorResponse},
        url_name="register_user",
        throttle=UserRegistrationThrottle(),
    )
    def register(self, payload: schema.RegisterUserSchema) -> MeetappUser:
        """Create a new user account with name, email and password.

        Returns 400 if the email is already registered. Use POST /sessions afterwards to log in.
        """
        return account_service.register_user(payload)

    @route.get("/me", response=schema.UserSchema, url_name="me", auth=MeetappJWTAuth())
    def me(self) -> MeetappUser:
        """Retrieve the authenticated user's profile."""
        return self.user()

    @route.put(
        "",
        response={200: schema.UserSchema, 400: ValidationErrorResponse | ErrorResponse, 401: ErrorResponse},
        url_name="update_user",
        auth=MeetappJWTAuth(),
        throttle=WriteThrottle(),
    )
    def update_profile(self, payload: schema.ProfileUpdateSchema) -> MeetappUser:
        """Update the authenticated user's name, email or password.

        Only provided fields are updated. To change the password send `old_password`, `password`
        and `confirm_password`; a wrong `old_password` returns 401.
        """
        return account_service.update_profile(self.user(), payload)
