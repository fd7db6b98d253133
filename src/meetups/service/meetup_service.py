"""Meetup lifecycle rules: listing, visibility, creation, edition and cancellation."""

from datetime import date, datetime

import structlog
from django.conf import settings
from django.db.models import QuerySet
from django.shortcuts import get_object_or_404
from django.utils import timezone

from accounts.models import MeetappUser
from meetups import schema
from meetups.exceptions import MeetupPermissionError, MeetupValidationError
from meetups.models import Meetup

from . import update_db_instance

logger = structlog.get_logger(__name__)


def _ensure_future(value: datetime) -> None:
    if value <= timezone.now():
        raise MeetupValidationError("Past dates are not allowed")


def _get_owned(user: MeetappUser, meetup_id: int, error_message: str) -> Meetup:
    meetup = get_object_or_404(Meetup.objects.full(), pk=meetup_id)
    if meetup.creator_id != user.pk:
        logger.warning("meetup_access_denied", meetup_id=meetup_id, creator_id=meetup.creator_id)
        raise MeetupPermissionError(error_message)
    return meetup


def list_meetups(day: date | None, page: int = 1) -> QuerySet[Meetup]:
    """Meetups on the given local calendar day, ordered by date, one page at a time.

    Raises:
        MeetupValidationError: If no day is given.
    """
    if day is None:
        raise MeetupValidationError("Invalid date")
    page_size = settings.MEETUP_PAGE_SIZE
    offset = (page - 1) * page_size
    return Meetup.objects.full().on_day(day).order_by("date", "id")[offset : offset + page_size]


def list_organized(user: MeetappUser) -> QuerySet[Meetup]:
    """Meetups created by the user, soonest first."""
    return Meetup.objects.full().organized_by(user).order_by("date", "id")


def get_meetup(user: MeetappUser, meetup_id: int) -> Meetup:
    """Fetch a meetup; only its creator may see it by id."""
    return _get_owned(user, meetup_id, "You are not allowed to view this meetup")


def create_meetup(user: MeetappUser, payload: schema.MeetupCreateSchema) -> Meetup:
    """Create a meetup owned by the user.

    Raises:
        MeetupValidationError: If the date is not strictly in the future.
    """
    _ensure_future(payload.date)
    meetup = Meetup(creator=user, **payload.model_dump())
    meetup.save()
    logger.info("meetup_created", meetup_id=meetup.pk, date=meetup.date.isoformat())
    # Re-read so the response carries the stored values.
    return Meetup.objects.full().get(pk=meetup.pk)


def update_meetup(user: MeetappUser, meetup_id: int, payload: schema.MeetupEditSchema) -> Meetup:
    """Apply a partial update to a meetup.

    Only the creator may edit, and only while the meetup is not past. A new date, when
    given, must be strictly in the future.

    Raises:
        MeetupPermissionError: If the caller is not the creator or the meetup is past.
        MeetupValidationError: If the new date is not in the future.
    """
    meetup = _get_owned(user, meetup_id, "You are not allowed to edit this meetup")
    if meetup.past:
        raise MeetupPermissionError("You cannot edit meetups that have already passed")
    if payload.date is not None:
        _ensure_future(payload.date)
    meetup = update_db_instance(meetup, payload)
    logger.info("meetup_updated", meetup_id=meetup.pk, fields=sorted(payload.model_fields_set))
    return Meetup.objects.full().get(pk=meetup.pk)


def cancel_meetup(user: MeetappUser, meetup_id: int) -> None:
    """Delete a meetup.

    Only the creator may cancel, and only while the meetup is cancelable.

    Raises:
        MeetupPermissionError: If the caller is not the creator or the notice period has started.
    """
    meetup = _get_owned(user, meetup_id, "You are not allowed to cancel this meetup")
    if not meetup.cancelable:
        hours = int(settings.MEETUP_CANCELLATION_NOTICE.total_seconds() // 3600)
        raise MeetupPermissionError(f"You can only cancel meetups {hours} hours in advance")
    meetup.delete()
    logger.info("meetup_cancelled", meetup_id=meetup_id)
