import typing as t
from pathlib import PurePosixPath

from django.conf import settings
from django.db import models


class TimeStampedModel(models.Model):
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True, db_index=True)

    class Meta:
        abstract = True

    def save(self, *args: t.Any, **kwargs: t.Any) -> None:
        """Override the save method to call full_clean before saving."""
        self.full_clean()
        super().save(*args, **kwargs)


class File(TimeStampedModel):
    """An uploaded file, referenced by meetups as their banner."""

    name = models.CharField(max_length=255, help_text="Original file name")
    path = models.FileField(upload_to="", max_length=255, help_text="Stored file name")

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.name

    @property
    def url(self) -> str:
        """Absolute URL the uploaded file is served from."""
        return f"{settings.APP_URL.rstrip('/')}{settings.MEDIA_URL}{PurePosixPath(self.path.name).as_posix()}"
