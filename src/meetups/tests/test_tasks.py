import typing as t
from datetime import datetime
from datetime import timezone as dt_timezone

import pytest
from django.core import mail
from django.utils import timezone

from accounts.models import MeetappUser
from meetups.models import Meetup, Subscription
from meetups.tasks import send_subscription_mail
from meetups.utils import format_meetup_date

pytestmark = pytest.mark.django_db


def test_format_meetup_date_in_portuguese_local_time(settings: t.Any) -> None:
    settings.TIME_ZONE = "America/Sao_Paulo"
    value = timezone.make_aware(datetime(2030, 6, 5, 9, 5), timezone.get_current_timezone())

    assert format_meetup_date(value) == "dia 05 de junho, às 9:05h"


def test_format_meetup_date_converts_to_local_time(settings: t.Any) -> None:
    settings.TIME_ZONE = "America/Sao_Paulo"
    value = datetime(2030, 3, 1, 1, 30, tzinfo=dt_timezone.utc)

    assert format_meetup_date(value) == "dia 28 de fevereiro, às 22:30h"


def test_send_subscription_mail(other_user: MeetappUser, meetup: Meetup) -> None:
    subscription = Subscription.objects.create(user=other_user, meetup=meetup)

    send_subscription_mail(subscription.pk)

    assert len(mail.outbox) == 1
    message = mail.outbox[0]
    assert message.to == ["Diego Fernandes <diego@example.com>"]
    assert message.subject == "[Meetup React Native] Nova inscrição"
    assert "Cláudio Orlandi" in message.body
    assert "claudio@example.com" in message.body
    assert format_meetup_date(meetup.date) in message.body
    html, mimetype = message.alternatives[0]  # type: ignore[attr-defined]
    assert mimetype == "text/html"
    assert "Meetup React Native" in html
