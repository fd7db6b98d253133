import secrets
from pathlib import PurePath

import structlog
from django.core.files.uploadedfile import UploadedFile

from accounts.models import MeetappUser

from .models import File

logger = structlog.get_logger(__name__)


def random_file_name(original_name: str) -> str:
    """Build a collision-free storage name keeping the original extension."""
    return f"{secrets.token_hex(16)}{PurePath(original_name).suffix.lower()}"


def save_uploaded_file(*, file: UploadedFile, uploader: MeetappUser) -> File:
    """Store an uploaded file under a random name and record it.

    Args:
        file: The uploaded file.
        uploader: The user uploading the file.

    Returns:
        The created File record.
    """
    original_name = PurePath(file.name or "upload").name
    file.name = random_file_name(original_name)
    instance = File(name=original_name, path=file)
    instance.save()
    logger.info("file_uploaded", file_id=instance.pk, path=instance.path.name, uploader_id=uploader.pk)
    return instance
