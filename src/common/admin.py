from django.contrib import admin

from . import models


@admin.register(models.File)
class FileAdmin(admin.ModelAdmin):  # type: ignore[type-arg]
    list_display = ["id", "name", "path", "created_at"]
    readonly_fields = ["created_at", "updated_at"]
    search_fields = ["name", "path"]
