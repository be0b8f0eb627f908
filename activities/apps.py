# activities/apps.py
"""
Application configuration for the activities module.

The activities app holds the activity lifecycle, the
capacity-constrained enrollment of children, and the JSON API
exposing both.
"""

from django.apps import AppConfig


class ActivitiesConfig(AppConfig):
    """
    Configuration class for the activities application.

    Attributes
    ----------
    default_auto_field : str
        Primary key field type for models that do not define one.
    name : str
        The full Python path to the application.
    """

    default_auto_field = "django.db.models.BigAutoField"
    name = "activities"
    verbose_name = "Activities"
