# monitoring/urls.py
"""
URL routes of the monitoring application.
"""

from django.urls import path
from .views import logs_view

app_name = "monitoring"

urlpatterns = [
    # HTML application log, staff members only
    path("logs/", logs_view, name="logs"),
]
