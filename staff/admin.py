# staff/admin.py
"""
Admin configuration for the staff application.

Staff records are created and edited through the Django admin;
the activities core only reads them.
"""

from django.contrib import admin
from .models import Staff


@admin.register(Staff)
class StaffAdmin(admin.ModelAdmin):
    """
    Admin configuration for the Staff model.
    """

    # Columns displayed in the admin list view
    list_display = ("full_name", "position", "hire_date", "user")

    # Filters available in the right sidebar
    list_filter = ("position",)

    # Fields searchable in the admin search bar
    search_fields = ("full_name", "position", "user__username")
