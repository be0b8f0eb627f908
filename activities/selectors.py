# activities/selectors.py
"""
Read accessors for activities and participations.

These functions never validate references and never fail on
missing data: unknown ids yield an empty queryset or None.
"""

from typing import Optional

from django.db.models import QuerySet
from django.utils import timezone

from .models import Activity, ActivityParticipation


def get_all_activities() -> QuerySet:
    """
    Return every activity, ordered by date.

    Returns
    -------
    QuerySet
        All activities; empty when none exist.
    """
    return Activity.objects.all()


def get_activity_by_id(activity_id: int) -> Optional[Activity]:
    """
    Return a single activity.

    Parameters
    ----------
    activity_id : int
        Id of the activity.

    Returns
    -------
    Activity or None
        The activity, or None if it does not exist.
    """
    return Activity.objects.filter(pk=activity_id).first()


def get_upcoming_activities(limit: int = 10) -> QuerySet:
    """
    Return the next activities still to come.

    Activities dated now or later, excluding cancelled and completed
    ones, ordered by date.

    Parameters
    ----------
    limit : int
        Maximum number of activities returned.
    """
    return (
        Activity.objects.filter(activity_date__gte=timezone.now())
        .exclude(status__in=[Activity.Status.CANCELLED, Activity.Status.COMPLETED])
        .order_by("activity_date", "id")[:limit]
    )


def get_participations_by_activity(activity_id: int) -> QuerySet:
    """
    Return the participations of an activity.

    Parameters
    ----------
    activity_id : int
        Id of the activity. It is not checked for existence.

    Returns
    -------
    QuerySet
        Matching participations; empty, never an error, when the
        activity has none or does not exist.
    """
    return ActivityParticipation.objects.filter(activity_id=activity_id)


def get_participations_by_child(child_id: int) -> QuerySet:
    """
    Return the participations of a child.

    Parameters
    ----------
    child_id : int
        Id of the child. It is not checked for existence.

    Returns
    -------
    QuerySet
        Matching participations; empty, never an error, when the
        child has none or does not exist.
    """
    return ActivityParticipation.objects.filter(child_id=child_id)
