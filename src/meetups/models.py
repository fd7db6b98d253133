import typing as t
from datetime import date, datetime, time, timedelta

from django.conf import settings
from django.db import models
from django.utils import timezone

from accounts.models import MeetappUser
from common.models import TimeStampedModel


class MeetupQuerySet(models.QuerySet["Meetup"]):
    def full(self) -> t.Self:
        """Select the creator and the banner along with the meetup."""
        return self.select_related("creator", "banner")

    def on_day(self, day: date) -> t.Self:
        """Meetups taking place on the given calendar day, in local time.

        The range is half-open: ``[local midnight, next local midnight)``.
        """
        start = timezone.make_aware(datetime.combine(day, time.min))
        end = timezone.make_aware(datetime.combine(day + timedelta(days=1), time.min))
        return self.filter(date__gte=start, date__lt=end)

    def upcoming(self) -> t.Self:
        """Meetups that have not happened yet."""
        return self.filter(date__gt=timezone.now())

    def organized_by(self, user: MeetappUser) -> t.Self:
        """Meetups created by the given user."""
        return self.filter(creator=user)


class Meetup(TimeStampedModel):
    title = models.CharField(max_length=255)
    description = models.TextField()
    location = models.CharField(max_length=255)
    date = models.DateTimeField(db_index=True)
    banner = models.ForeignKey("common.File", on_delete=models.PROTECT, related_name="meetups")
    creator = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="meetups")

    objects = MeetupQuerySet.as_manager()

    class Meta:
        ordering = ["date"]

    def __str__(self) -> str:
        return self.title

    @property
    def past(self) -> bool:
        """Whether the meetup date has already elapsed."""
        return self.date < timezone.now()

    @property
    def cancelable(self) -> bool:
        """Whether more than the cancellation notice is left before the meetup."""
        return self.date - timezone.now() > settings.MEETUP_CANCELLATION_NOTICE


class Subscription(TimeStampedModel):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="subscriptions")
    meetup = models.ForeignKey(Meetup, on_delete=models.CASCADE, related_name="subscriptions")

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["user", "meetup"], name="unique_meetup_subscription"),
        ]

    def __str__(self) -> str:
        return f"{self.user} -> {self.meetup}"
