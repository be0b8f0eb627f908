# activities/models.py
"""
Database models for the activities application.

This module defines the Activity and ActivityParticipation models.
Activities are events organised by staff members, while
participations record a child's enrollment in a specific activity.

Capacity is never stored as a counter: the number of participations
referencing an activity is counted whenever a new enrollment is checked.
"""

from django.db import models
from django.utils import timezone
from children.models import Child
from staff.models import Staff


class Activity(models.Model):
    """
    Model representing an activity.

    Attributes
    ----------
    title : CharField
        The title of the activity.
    description : TextField
        Optional description of the activity.
    activity_date : DateTimeField
        When the activity takes place. Past dates are accepted.
    location : CharField
        Optional location of the activity.
    status : CharField
        Current status, one of the ``Status`` choices. Any status can be
        set from any other status.
    max_participants : PositiveIntegerField
        Optional maximum number of participations. Null means unlimited.
    created_by : ForeignKey
        The staff member who created the activity.
    created_at : DateTimeField
        Creation timestamp.
    updated_at : DateTimeField
        Refreshed on every update.
    """

    class Status(models.TextChoices):
        """
        Enumeration of activity statuses.

        PLANNED
            Initial status, set at creation.
        ONGOING
            The activity is taking place.
        COMPLETED
            The activity is over.
        CANCELLED
            The activity has been called off.
        """

        PLANNED = "PLANNED", "Planned"
        ONGOING = "ONGOING", "Ongoing"
        COMPLETED = "COMPLETED", "Completed"
        CANCELLED = "CANCELLED", "Cancelled"

    title = models.CharField("Title", max_length=200)
    description = models.TextField("Description", blank=True, null=True)
    activity_date = models.DateTimeField("Activity date")
    location = models.CharField("Location", max_length=200, blank=True, null=True)
    status = models.CharField(
        "Status",
        max_length=16,
        choices=Status.choices,
        default=Status.PLANNED,
    )
    max_participants = models.PositiveIntegerField(
        "Maximum participants", null=True, blank=True
    )
    created_by = models.ForeignKey(
        Staff,
        on_delete=models.PROTECT,
        related_name="activities",
        verbose_name="Created by",
    )
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["activity_date", "id"]
        verbose_name_plural = "activities"

    def __str__(self) -> str:
        """
        Return a string representation of the activity.

        Returns
        -------
        str
            The activity title.
        """
        return self.title


class ActivityParticipation(models.Model):
    """
    Model representing a child's participation in an activity.

    Attributes
    ----------
    activity : ForeignKey
        The activity the child is enrolled in.
    child : ForeignKey
        The enrolled child (related to children.Child).
    status : CharField
        Current status, one of the ``Status`` choices. The initial value
        is chosen by the caller of the enrollment.
    notes : TextField
        Optional free-text notes.
    registered_at : DateTimeField
        Enrollment timestamp, never modified afterwards.
    updated_at : DateTimeField
        Refreshed on every status change.
    """

    class Status(models.TextChoices):
        """
        Enumeration of participation statuses.

        REGISTERED
            The child is enrolled.
        ATTENDED
            The child attended the activity.
        ABSENT
            The child did not show up.
        CANCELLED
            The enrollment was cancelled but the record is kept.
        """

        REGISTERED = "REGISTERED", "Registered"
        ATTENDED = "ATTENDED", "Attended"
        ABSENT = "ABSENT", "Absent"
        CANCELLED = "CANCELLED", "Cancelled"

    activity = models.ForeignKey(
        Activity,
        on_delete=models.CASCADE,
        related_name="participations",
        verbose_name="Activity",
    )
    child = models.ForeignKey(
        Child,
        on_delete=models.CASCADE,
        related_name="participations",
        verbose_name="Child",
    )
    status = models.CharField(
        "Status",
        max_length=16,
        choices=Status.choices,
        default=Status.REGISTERED,
    )
    notes = models.TextField("Notes", blank=True, null=True)
    registered_at = models.DateTimeField("Registered at", default=timezone.now)
    updated_at = models.DateTimeField("Updated at", default=timezone.now)

    class Meta:
        """
        Metadata options for the ActivityParticipation model.

        Attributes
        ----------
        constraints : list
            One participation per (activity, child) pair, whatever its
            status. Backs up the duplicate check done at enrollment.
        ordering : list
            Enrollment order.
        """

        constraints = [
            models.UniqueConstraint(
                fields=["activity", "child"],
                name="unique_participation_per_activity_child",
            ),
        ]
        ordering = ["registered_at", "id"]

    def __str__(self) -> str:
        return f"{self.child} -> {self.activity} ({self.status})"
