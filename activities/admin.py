# activities/admin.py
"""
Admin configuration for the activities application.

This module defines Django admin customizations for the
:class:`Activity` and :class:`ActivityParticipation` models.
Enrollment through the API is the path that enforces capacity;
the admin is meant for inspection and housekeeping.
"""

from django.contrib import admin
from .models import Activity, ActivityParticipation


class ActivityParticipationInline(admin.TabularInline):
    model = ActivityParticipation
    extra = 0
    fields = ("child", "status", "notes", "registered_at", "updated_at")
    readonly_fields = ("registered_at", "updated_at")


@admin.register(Activity)
class ActivityAdmin(admin.ModelAdmin):
    """
    Admin configuration for the Activity model.
    """
    # Fields displayed in the admin list view
    list_display = (
        "title",
        "activity_date",
        "location",
        "status",
        "max_participants",
        "created_by",
    )
    # Filters available in the right sidebar
    list_filter = ("status",)
    # Fields available for the admin search bar
    search_fields = ("title", "location")
    inlines = [ActivityParticipationInline]


@admin.register(ActivityParticipation)
class ActivityParticipationAdmin(admin.ModelAdmin):
    """
    Admin configuration for the ActivityParticipation model.
    """
    list_display = ("child", "activity", "status", "registered_at", "updated_at")
    list_filter = ("status", "activity")
    search_fields = ("child__full_name", "activity__title")
