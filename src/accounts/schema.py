"""Schema for accounts module."""

import typing as t

from ninja import ModelSchema, Schema
from pydantic import EmailStr, StringConstraints, model_validator

from common.schema import OneToTwoFiftyFiveString

from .models import MeetappUser

PasswordString = t.Annotated[str, StringConstraints(min_length=6, max_length=128)]


class UserSchema(ModelSchema):
    class Meta:
        model = MeetappUser
        fields = ["id", "name", "email"]


class RegisterUserSchema(Schema):
    name: OneToTwoFiftyFiveString
    email: EmailStr
    password: PasswordString


class ProfileUpdateSchema(Schema):
    name: OneToTwoFiftyFiveString | None = None
    email: EmailStr | None = None
    old_password: str | None = None
    password: PasswordString | None = None
    confirm_password: str | None = None

    @model_validator(mode="after")
    def validate_password_change(self) -> t.Self:
        """A password change needs the current password and a matching confirmation."""
        if self.old_password and not self.password:
            raise ValueError("A new password is required.")
        if self.password and not self.old_password:
            raise ValueError("The current password is required to set a new one.")
        if self.password and self.confirm_password != self.password:
            raise ValueError("Passwords do not match.")
        return self


class SessionSchema(Schema):
    user: UserSchema
    access: str
    refresh: str
