# children/admin.py
"""
Admin configuration for the children application.

This module customizes the Django admin interface for the
Child model, providing list displays, filters, and search
capabilities.
"""

from django.contrib import admin
from .models import Child


@admin.register(Child)
class ChildAdmin(admin.ModelAdmin):
    """
    Admin configuration for the Child model.

    Attributes
    ----------
    list_display : tuple
        Fields displayed in the admin list view.
    list_filter : tuple
        Fields available as filters in the right sidebar.
    search_fields : tuple
        Fields searchable from the admin search bar.
    """

    # Columns displayed in the admin list view
    list_display = ("full_name", "date_of_birth", "gender", "admission_date")

    # Filters available in the right sidebar
    list_filter = ("gender", "education_level")

    # Fields searchable in the admin search bar
    search_fields = ("full_name",)
