"""Meetup-related schemas."""

import typing as t
from datetime import datetime

from django.utils import timezone
from ninja import ModelSchema, Schema
from pydantic import AfterValidator, Field

from accounts.schema import UserSchema
from common.schema import FileSchema, NonEmptyString, OneToTwoFiftyFiveString

from .models import Meetup, Subscription


def _localize(value: datetime) -> datetime:
    """Read timestamps without an offset as local time."""
    if timezone.is_naive(value):
        return timezone.make_aware(value)
    return value


LocalDatetime = t.Annotated[datetime, AfterValidator(_localize)]


class MeetupEditSchema(Schema):
    title: OneToTwoFiftyFiveString | None = None
    description: NonEmptyString | None = None
    date: LocalDatetime | None = None
    location: OneToTwoFiftyFiveString | None = None
    banner_id: int | None = Field(None, description="Id of an uploaded file (POST /files)")


class MeetupCreateSchema(MeetupEditSchema):
    title: OneToTwoFiftyFiveString
    description: NonEmptyString
    date: LocalDatetime
    location: OneToTwoFiftyFiveString
    banner_id: int = Field(..., description="Id of an uploaded file (POST /files)")


class MeetupInListSchema(ModelSchema):
    past: bool
    creator: UserSchema
    banner: FileSchema

    class Meta:
        model = Meetup
        fields = ["id", "title", "description", "location", "date"]


class MeetupSchema(MeetupInListSchema):
    cancelable: bool


class MeetupUpdatedSchema(Schema):
    meetup: MeetupSchema
    creator_id: int


class SubscriptionSchema(ModelSchema):
    meetup: MeetupSchema

    class Meta:
        model = Subscription
        fields = ["id", "created_at"]
