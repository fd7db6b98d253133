"""Shared fixtures for the whole test suite."""

import typing as t
from datetime import datetime, time, timedelta
from pathlib import Path

import faker
import pytest
from django.core.cache import cache
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test.client import Client
from django.utils import timezone

from accounts.models import MeetappUser
from common.models import File
from common.testing import auth_client_for
from meetups.models import Meetup


@pytest.fixture(autouse=True)
def enable_celery_eager_mode(settings: t.Any) -> None:
    """Enable Celery eager mode for tests so tasks execute synchronously."""
    settings.CELERY_TASK_ALWAYS_EAGER = True
    settings.CELERY_TASK_EAGER_PROPAGATES = True


@pytest.fixture(autouse=True)
def clear_cache() -> t.Iterator[None]:
    """Start every test with an empty cache so throttling counters do not leak between tests."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture(autouse=True)
def media_root(settings: t.Any, tmp_path: Path) -> Path:
    """Store uploads in a per-test temporary directory."""
    settings.MEDIA_ROOT = tmp_path / "files"
    return t.cast(Path, settings.MEDIA_ROOT)


class MeetappUserFactory:
    """Factory for creating MeetappUser instances for testing."""

    fake = faker.Faker()

    def create_user(self, **kwargs: t.Any) -> MeetappUser:
        name = kwargs.pop("name", self.fake.name())
        email = kwargs.pop("email", self.fake.unique.email())
        password = kwargs.pop("password", "password")
        return MeetappUser.objects.create_user(email=email, password=password, name=name, **kwargs)

    def __call__(self, **kwargs: t.Any) -> MeetappUser:
        return self.create_user(**kwargs)


@pytest.fixture
def meetapp_user_factory() -> MeetappUserFactory:
    return MeetappUserFactory()


@pytest.fixture
def user(meetapp_user_factory: MeetappUserFactory) -> MeetappUser:
    """A standard user, organizer of the meetups built by the ``meetup`` fixture."""
    return meetapp_user_factory(name="Diego Fernandes", email="diego@example.com", password="strong-password")


@pytest.fixture
def other_user(meetapp_user_factory: MeetappUserFactory) -> MeetappUser:
    """A second user, with no relation to ``user``'s meetups."""
    return meetapp_user_factory(name="Cláudio Orlandi", email="claudio@example.com", password="strong-password")


@pytest.fixture
def superuser(meetapp_user_factory: MeetappUserFactory) -> MeetappUser:
    """A superuser."""
    return meetapp_user_factory(is_superuser=True, is_staff=True)


@pytest.fixture
def auth_client(user: MeetappUser) -> Client:
    """API client authenticated as ``user``."""
    return auth_client_for(user)


@pytest.fixture
def other_client(other_user: MeetappUser) -> Client:
    """API client authenticated as ``other_user``."""
    return auth_client_for(other_user)


@pytest.fixture
def next_week() -> datetime:
    """Noon, local time, seven days from now."""
    today = timezone.now()
    same_time_next_week = today + timedelta(days=7)
    noon = time(hour=12, minute=0)
    return timezone.make_aware(
        datetime.combine(same_time_next_week.date(), noon),
        timezone.get_current_timezone(),
    )


@pytest.fixture
def banner() -> File:
    """An uploaded banner image."""
    instance = File(name="banner.png", path=SimpleUploadedFile("banner.png", b"\x89PNG\r\n", content_type="image/png"))
    instance.save()
    return instance


@pytest.fixture
def meetup(user: MeetappUser, banner: File, next_week: datetime) -> Meetup:
    """A meetup organized by ``user`` next week."""
    return Meetup.objects.create(
        title="Meetup React Native",
        description="Talks about the React Native ecosystem.",
        location="Rua Guilherme Gembala, 260",
        date=next_week,
        banner=banner,
        creator=user,
    )
