"""
Root URL configuration for the orphanage project.

This module defines the global URL routes and delegates
to application-specific ``urls.py`` modules.

For more details, see:
https://docs.djangoproject.com/en/stable/topics/http/urls/
"""

from django.contrib import admin
from django.urls import path, include

#: Global URL patterns for the project
urlpatterns = [
    # Django admin interface (staff and children records are managed here)
    path("admin/", admin.site.urls),

    # Activities JSON API (activities and participations)
    path("api/activities/", include("activities.urls")),

    # Monitoring application (application logs)
    path("monitoring/", include("monitoring.urls")),
]
