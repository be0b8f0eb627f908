# activities/urls.py
"""
URL configuration for the activities API.

This module defines all routes related to activities and
participations. Each route maps to a DRF view in
:mod:`activities.views`.
"""

from django.urls import path
from .views import (
    ActivityDetailView,
    ActivityListCreateView,
    ActivityParticipationListView,
    ActivityStatusView,
    ChildParticipationListView,
    EnrollView,
    ParticipationDetailView,
    ParticipationStatusView,
    UpcomingActivityListView,
)

# Application namespace used for reverse lookups
app_name = "activities"

#: URL patterns for the activities API
urlpatterns = [
    # GET: all activities, POST: create an activity
    path("", ActivityListCreateView.as_view(), name="list"),

    # Next activities to come
    path("upcoming/", UpcomingActivityListView.as_view(), name="upcoming"),

    # GET / PATCH a single activity
    path("<int:pk>/", ActivityDetailView.as_view(), name="detail"),

    # POST-only status change
    path("<int:pk>/status/", ActivityStatusView.as_view(), name="status"),

    # Participations of an activity
    path(
        "<int:pk>/participations/",
        ActivityParticipationListView.as_view(),
        name="activity_participations",
    ),

    # Participations of a child
    path(
        "children/<int:child_id>/participations/",
        ChildParticipationListView.as_view(),
        name="child_participations",
    ),

    # POST: enroll a child
    path("participations/", EnrollView.as_view(), name="enroll"),

    # DELETE: remove a participation
    path(
        "participations/<int:pk>/",
        ParticipationDetailView.as_view(),
        name="participation_detail",
    ),

    # POST-only participation status change
    path(
        "participations/<int:pk>/status/",
        ParticipationStatusView.as_view(),
        name="participation_status",
    ),
]
