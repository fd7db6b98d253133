"""Service layer for user accounts."""

import structlog
from django.db import transaction

from accounts import schema
from accounts.exceptions import PasswordMismatchError, UserAlreadyExistsError
from accounts.models import MeetappUser

logger = structlog.get_logger(__name__)


def _email_taken(email: str, exclude: MeetappUser | None = None) -> bool:
    qs = MeetappUser.objects.filter(email__iexact=email)
    if exclude is not None:
        qs = qs.exclude(pk=exclude.pk)
    return qs.exists()


def register_user(payload: schema.RegisterUserSchema) -> MeetappUser:
    """Register a new user.

    Args:
        payload (schema.RegisterUserSchema): The user data.

    Returns:
        MeetappUser: The newly created user.

    Raises:
        UserAlreadyExistsError: If the email is already registered.
    """
    if _email_taken(payload.email):
        logger.warning("user_registration_duplicate", email=payload.email)
        raise UserAlreadyExistsError("User already exists")
    user = MeetappUser.objects.create_user(email=payload.email, password=payload.password, name=payload.name)
    logger.info("user_registration_completed", user_id=user.pk)
    return user


@transaction.atomic
def update_profile(user: MeetappUser, payload: schema.ProfileUpdateSchema) -> MeetappUser:
    """Apply a partial profile update.

    Only fields present in the payload are changed. Changing the password requires the
    current one.

    Raises:
        UserAlreadyExistsError: If the new email belongs to another user.
        PasswordMismatchError: If ``old_password`` is wrong.
    """
    if payload.email and payload.email.lower() != user.email.lower() and _email_taken(payload.email, exclude=user):
        raise UserAlreadyExistsError("User already exists")
    if payload.old_password and not user.check_password(payload.old_password):
        logger.warning("profile_update_wrong_password", user_id=user.pk)
        raise PasswordMismatchError("Password does not match")

    update_fields = []
    if payload.name is not None:
        user.name = payload.name
        update_fields.append("name")
    if payload.email is not None:
        user.email = MeetappUser.objects.normalize_email(payload.email)
        update_fields.append("email")
    if payload.password:
        user.set_password(payload.password)
        update_fields.append("password")
    if update_fields:
        user.save(update_fields=update_fields)
    logger.info("profile_updated", user_id=user.pk, fields=update_fields)
    return user
