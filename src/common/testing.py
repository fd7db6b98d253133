"""Testing helpers shared by the test suites."""

from django.test.client import Client
from ninja_jwt.tokens import RefreshToken

from accounts.models import MeetappUser


def auth_client_for(user: MeetappUser) -> Client:
    """A test client sending a bearer access token for the given user.

    The token is issued at the current (possibly frozen) time, so build the client inside the
    ``freeze_time`` block it is used in.
    """
    refresh = RefreshToken.for_user(user)
    return Client(HTTP_AUTHORIZATION=f"Bearer {refresh.access_token}")  # type: ignore[attr-defined]
