import typing as t
from datetime import datetime, timedelta
from unittest.mock import MagicMock, patch

import pytest
from django.core import mail
from django.http import Http404
from freezegun import freeze_time

from accounts.models import MeetappUser
from common.models import File
from meetups.exceptions import MeetupPermissionError, MeetupValidationError
from meetups.models import Meetup, Subscription
from meetups.service import subscription_service

pytestmark = pytest.mark.django_db


@pytest.fixture
def concurrent_meetup(meetapp_user_factory: t.Any, banner: File, meetup: Meetup) -> Meetup:
    """A meetup by a third user at the very same date as ``meetup``."""
    return Meetup.objects.create(
        title="Same time",
        description="d",
        location="l",
        date=meetup.date,
        banner=banner,
        creator=meetapp_user_factory(),
    )


class TestSubscribe:
    def test_subscribes_and_mails_the_organizer(
        self, other_user: MeetappUser, meetup: Meetup, django_capture_on_commit_callbacks: t.Any
    ) -> None:
        with django_capture_on_commit_callbacks(execute=True) as callbacks:
            subscription = subscription_service.subscribe(other_user, meetup.pk)

        assert subscription.user == other_user
        assert subscription.meetup == meetup
        assert len(callbacks) == 1
        assert len(mail.outbox) == 1
        assert mail.outbox[0].to == ["Diego Fernandes <diego@example.com>"]
        assert mail.outbox[0].subject == "[Meetup React Native] Nova inscrição"

    def test_mail_is_only_enqueued_on_commit(self, other_user: MeetappUser, meetup: Meetup) -> None:
        with patch("meetups.tasks.send_subscription_mail.delay") as mock_delay:
            subscription_service.subscribe(other_user, meetup.pk)
        mock_delay.assert_not_called()

    def test_cannot_subscribe_to_own_meetup(self, user: MeetappUser, meetup: Meetup) -> None:
        with pytest.raises(MeetupValidationError, match="your own meetups"):
            subscription_service.subscribe(user, meetup.pk)

    def test_cannot_subscribe_to_past_meetup(self, other_user: MeetappUser, meetup: Meetup) -> None:
        with freeze_time(meetup.date + timedelta(hours=1)):
            with pytest.raises(MeetupValidationError, match="past meetups"):
                subscription_service.subscribe(other_user, meetup.pk)

    def test_cannot_subscribe_twice(self, other_user: MeetappUser, meetup: Meetup) -> None:
        Subscription.objects.create(user=other_user, meetup=meetup)
        with pytest.raises(MeetupValidationError, match="already subscribed"):
            subscription_service.subscribe(other_user, meetup.pk)

    def test_cannot_subscribe_to_two_meetups_at_the_same_time(
        self, other_user: MeetappUser, meetup: Meetup, concurrent_meetup: Meetup
    ) -> None:
        Subscription.objects.create(user=other_user, meetup=meetup)
        with pytest.raises(MeetupValidationError, match="two meetups at the same time"):
            subscription_service.subscribe(other_user, concurrent_meetup.pk)

    def test_missing_meetup(self, other_user: MeetappUser) -> None:
        with pytest.raises(Http404):
            subscription_service.subscribe(other_user, 999_999)


def test_list_subscriptions_only_upcoming_ordered_by_date(
    other_user: MeetappUser, user: MeetappUser, banner: File, meetup: Meetup, next_week: datetime
) -> None:
    tomorrow = Meetup.objects.create(
        title="Tomorrow",
        description="d",
        location="l",
        date=next_week - timedelta(days=6),
        banner=banner,
        creator=user,
    )
    later = Subscription.objects.create(user=other_user, meetup=meetup)
    sooner = Subscription.objects.create(user=other_user, meetup=tomorrow)
    Subscription.objects.create(user=user, meetup=meetup)

    assert list(subscription_service.list_subscriptions(other_user)) == [sooner, later]

    with freeze_time(tomorrow.date + timedelta(hours=1)):
        assert list(subscription_service.list_subscriptions(other_user)) == [later]


class TestUnsubscribe:
    def test_removes_own_subscription(self, other_user: MeetappUser, meetup: Meetup) -> None:
        subscription = Subscription.objects.create(user=other_user, meetup=meetup)

        subscription_service.unsubscribe(other_user, subscription.pk)

        assert not Subscription.objects.filter(pk=subscription.pk).exists()

    def test_cannot_remove_someone_elses_subscription(
        self, user: MeetappUser, other_user: MeetappUser, meetup: Meetup
    ) -> None:
        subscription = Subscription.objects.create(user=other_user, meetup=meetup)

        with pytest.raises(MeetupPermissionError):
            subscription_service.unsubscribe(user, subscription.pk)

    def test_cannot_remove_subscription_to_past_meetup(self, other_user: MeetappUser, meetup: Meetup) -> None:
        subscription = Subscription.objects.create(user=other_user, meetup=meetup)

        with freeze_time(meetup.date + timedelta(days=1)):
            with pytest.raises(MeetupPermissionError, match="past meetups"):
                subscription_service.unsubscribe(other_user, subscription.pk)


def test_subscribe_does_not_enqueue_when_rules_fail(user: MeetappUser, meetup: Meetup) -> None:
    mock_task = MagicMock()
    with patch("meetups.tasks.send_subscription_mail", mock_task):
        with pytest.raises(MeetupValidationError):
            subscription_service.subscribe(user, meetup.pk)
    mock_task.delay.assert_not_called()
