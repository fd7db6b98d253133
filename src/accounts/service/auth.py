"""Session issuance."""

import structlog
from django.utils import timezone
from ninja_jwt.tokens import RefreshToken

from accounts import schema
from accounts.models import MeetappUser

logger = structlog.get_logger(__name__)


def create_session(user: MeetappUser) -> schema.SessionSchema:
    """Issue a JWT token pair for the user."""
    user.last_login = timezone.now()
    user.save(update_fields=["last_login"])

    refresh = RefreshToken.for_user(user)
    logger.info("session_created", user_id=user.pk)
    return schema.SessionSchema(
        user=schema.UserSchema.from_orm(user),
        access=str(refresh.access_token),  # type: ignore[attr-defined]
        refresh=str(refresh),
    )
