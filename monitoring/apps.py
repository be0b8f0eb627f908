# monitoring/apps.py
"""
Application configuration for the monitoring module.

The monitoring app owns the HTML application log written by the
request layer and the view that displays it.
"""

from django.apps import AppConfig


class MonitoringConfig(AppConfig):
    """
    Configuration class for the monitoring application.
    """

    default_auto_field = "django.db.models.BigAutoField"
    name = "monitoring"
    verbose_name = "Monitoring"
