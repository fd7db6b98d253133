from django.contrib import admin

from .models import MeetappUser


@admin.register(MeetappUser)
class MeetappUserAdmin(admin.ModelAdmin):  # type: ignore[type-arg]
    ordering = ["email"]
    list_display = ["email", "name", "is_staff", "is_active", "date_joined"]
    list_filter = ["is_staff", "is_active"]
    search_fields = ["email", "name"]
    readonly_fields = ["password", "last_login", "date_joined"]
    filter_horizontal = ["groups", "user_permissions"]
