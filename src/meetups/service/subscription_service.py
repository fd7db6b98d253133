"""Subscriptions of users to meetups."""

import structlog
from django.db import transaction
from django.db.models import QuerySet
from django.shortcuts import get_object_or_404
from django.utils import timezone

from accounts.models import MeetappUser
from meetups import tasks
from meetups.exceptions import MeetupPermissionError, MeetupValidationError
from meetups.models import Meetup, Subscription

logger = structlog.get_logger(__name__)


def list_subscriptions(user: MeetappUser) -> QuerySet[Subscription]:
    """The user's subscriptions to meetups that have not happened yet, soonest first."""
    return (
        Subscription.objects.filter(user=user, meetup__date__gt=timezone.now())
        .select_related("meetup__creator", "meetup__banner")
        .order_by("meetup__date", "id")
    )


@transaction.atomic
def subscribe(user: MeetappUser, meetup_id: int) -> Subscription:
    """Subscribe the user to a meetup and notify its creator once committed.

    Raises:
        MeetupValidationError: If the user created the meetup, the meetup is past, the user is
            already subscribed, or holds a subscription to another meetup at the same time.
    """
    meetup = get_object_or_404(Meetup.objects.full(), pk=meetup_id)
    if meetup.creator_id == user.pk:
        raise MeetupValidationError("You can't subscribe to your own meetups")
    if meetup.past:
        raise MeetupValidationError("You can't subscribe to past meetups")
    if Subscription.objects.filter(user=user, meetup=meetup).exists():
        raise MeetupValidationError("You are already subscribed to this meetup")
    if Subscription.objects.filter(user=user, meetup__date=meetup.date).exists():
        raise MeetupValidationError("You can't subscribe to two meetups at the same time")

    subscription = Subscription.objects.create(user=user, meetup=meetup)
    logger.info("meetup_subscription_created", meetup_id=meetup.pk, subscription_id=subscription.pk)
    transaction.on_commit(lambda: tasks.send_subscription_mail.delay(subscription.pk))
    return subscription


def unsubscribe(user: MeetappUser, subscription_id: int) -> None:
    """Remove one of the user's subscriptions to a meetup that has not happened yet.

    Raises:
        MeetupPermissionError: If the subscription belongs to someone else or the meetup is past.
    """
    subscription = get_object_or_404(Subscription.objects.select_related("meetup"), pk=subscription_id)
    if subscription.user_id != user.pk:
        raise MeetupPermissionError("You are not allowed to cancel this subscription")
    if subscription.meetup.past:
        raise MeetupPermissionError("You can't cancel subscriptions to past meetups")
    subscription.delete()
    logger.info("meetup_subscription_cancelled", subscription_id=subscription_id)
