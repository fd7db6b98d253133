"""Celery tasks for meetups."""

import structlog
from celery import shared_task
from django.template.loader import render_to_string

from common.tasks import send_email

from .models import Subscription
from .utils import format_meetup_date

logger = structlog.get_logger(__name__)


@shared_task
def send_subscription_mail(subscription_id: int) -> None:
    """Tell a meetup creator that someone subscribed to their meetup."""
    subscription = Subscription.objects.select_related("user", "meetup__creator").get(pk=subscription_id)
    meetup = subscription.meetup
    creator = meetup.creator
    subscriber = subscription.user

    context = {
        "creator": creator.name,
        "meetup": meetup.title,
        "user": subscriber.name,
        "email": subscriber.email,
        "date": format_meetup_date(meetup.date),
    }
    send_email(
        to=creator.mailbox,
        subject=f"[{meetup.title}] Nova inscrição",
        body=render_to_string("meetups/emails/subscription.txt", context),
        html_body=render_to_string("meetups/emails/subscription.html", context),
    )
    logger.info("subscription_mail_sent", subscription_id=subscription_id, meetup_id=meetup.pk)
