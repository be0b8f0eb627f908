# children/apps.py
"""
Application configuration for the children module.

This module defines the app configuration for the children
application, which manages the children cared for by the orphanage.
"""

from django.apps import AppConfig


class ChildrenConfig(AppConfig):
    """
    Configuration class for the children application.

    Attributes
    ----------
    default_auto_field : str
        Default primary key field type for models that do not
        explicitly define one.
    name : str
        Full Python path to the application.
    """

    # Default primary key field type
    default_auto_field = "django.db.models.BigAutoField"

    # Application name used by Django to locate the app
    name = "children"
