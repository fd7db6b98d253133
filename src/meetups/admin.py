from django.contrib import admin

from . import models


class SubscriptionInline(admin.TabularInline):  # type: ignore[type-arg]
    model = models.Subscription
    extra = 0
    autocomplete_fields = ["user"]
    readonly_fields = ["created_at"]


@admin.register(models.Meetup)
class MeetupAdmin(admin.ModelAdmin):  # type: ignore[type-arg]
    list_display = ["title", "date", "location", "creator", "created_at"]
    list_filter = ["date"]
    search_fields = ["title", "description", "location", "creator__email"]
    autocomplete_fields = ["creator"]
    raw_id_fields = ["banner"]
    date_hierarchy = "date"
    inlines = [SubscriptionInline]


@admin.register(models.Subscription)
class SubscriptionAdmin(admin.ModelAdmin):  # type: ignore[type-arg]
    list_display = ["user", "meetup", "created_at"]
    search_fields = ["user__email", "meetup__title"]
    autocomplete_fields = ["user", "meetup"]
