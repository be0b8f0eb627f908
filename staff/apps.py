# staff/apps.py
"""
Application configuration for the staff module.

This module defines the app configuration for the staff
application, which holds the orphanage staff members.
"""

from django.apps import AppConfig


class StaffConfig(AppConfig):
    """
    Configuration class for the staff application.

    Attributes
    ----------
    default_auto_field : str
        Default primary key field type for models that do not
        explicitly define one.
    name : str
        Full Python path to the application.
    """

    default_auto_field = "django.db.models.BigAutoField"
    name = "staff"
