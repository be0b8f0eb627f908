"""
Shared fixtures for the activities test suite.
"""

from datetime import date, timedelta

from django.utils import timezone

from activities.lifecycle import ActivityInput, ActivityLifecycleManager
from children.models import Child
from staff.models import Staff


def make_staff(full_name="Test Staff", **kwargs):
    kwargs.setdefault("position", "Coordinator")
    kwargs.setdefault("hire_date", date(2023, 1, 1))
    return Staff.objects.create(full_name=full_name, **kwargs)


def make_child(full_name="Test Child", **kwargs):
    kwargs.setdefault("date_of_birth", date(2015, 1, 1))
    kwargs.setdefault("gender", Child.Gender.MALE)
    kwargs.setdefault("admission_date", date(2023, 1, 1))
    return Child.objects.create(full_name=full_name, **kwargs)


def make_activity(staff, **kwargs):
    kwargs.setdefault("title", "Test Activity")
    kwargs.setdefault("activity_date", timezone.now() + timedelta(days=7))
    return ActivityLifecycleManager().create(ActivityInput(created_by=staff.pk, **kwargs))


class RecordingDirectory:
    """
    Directory gateway that records every lookup it answers.

    Answers from the database, like the local gateway.
    """

    def __init__(self):
        self.calls = []

    def staff_exists(self, staff_id):
        self.calls.append(("staff", staff_id))
        return Staff.objects.filter(pk=staff_id).exists()

    def child_exists(self, child_id):
        self.calls.append(("child", child_id))
        return Child.objects.filter(pk=child_id).exists()
