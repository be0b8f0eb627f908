# activities/lifecycle.py
"""
Activity lifecycle management.

This module creates activities, applies partial updates to their
metadata, and changes their status. Status changes are not checked
against a transition table: any status can follow any other one.

Partial updates are described with :class:`ActivityChanges`, where
every field defaults to :data:`UNSET`. This keeps "field omitted"
distinct from "field explicitly set to None", which matters for the
nullable fields (description, location, max_participants).
"""

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, Dict, Optional
import logging

from django.utils import timezone

from .exceptions import ReferenceNotFound
from .gateways import DirectoryGateway, get_directory_gateway
from .models import Activity

logger = logging.getLogger(__name__)


class _Unset:
    """Marker type for fields absent from a partial update."""

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()

# Empty strings are stored as NULL for these fields.
_NULLABLE_TEXT_FIELDS = ("description", "location")

# Never cleared by a partial update.
_REQUIRED_FIELDS = ("title", "activity_date", "created_by")


@dataclass
class ActivityInput:
    """
    Data required to create an activity.

    Attributes
    ----------
    title : str
        Title of the activity.
    activity_date : datetime
        When the activity takes place.
    created_by : int
        Id of the staff member creating the activity.
    description : str, optional
        Free-text description.
    location : str, optional
        Where the activity takes place.
    max_participants : int, optional
        Maximum number of participations; None means unlimited.
    """

    title: str
    activity_date: datetime
    created_by: int
    description: Optional[str] = None
    location: Optional[str] = None
    max_participants: Optional[int] = None


@dataclass
class ActivityChanges:
    """
    Partial update of an activity's metadata.

    Fields left to :data:`UNSET` are not touched. Status is not part
    of the changes; use :meth:`ActivityLifecycleManager.update_status`.
    """

    title: Any = UNSET
    description: Any = UNSET
    activity_date: Any = UNSET
    location: Any = UNSET
    max_participants: Any = UNSET
    created_by: Any = UNSET

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ActivityChanges":
        """
        Build changes from a mapping holding only the provided fields.

        Unknown keys are ignored.
        """
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def present(self) -> Dict[str, Any]:
        """
        Return the fields that were provided, with their values.
        """
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }


@dataclass
class ActivityLifecycleManager:
    """
    Create and update activities.

    Attributes
    ----------
    directory : DirectoryGateway
        Gateway used to check that the creating staff member exists.
    """

    directory: DirectoryGateway = field(default_factory=get_directory_gateway)

    def _require_staff(self, staff_id: int) -> None:
        if not self.directory.staff_exists(staff_id):
            logger.warning("Staff %s not found", staff_id)
            raise ReferenceNotFound("staff", staff_id)

    def create(self, data: ActivityInput) -> Activity:
        """
        Create a new activity in the ``PLANNED`` status.

        Parameters
        ----------
        data : ActivityInput
            The activity attributes.

        Returns
        -------
        Activity
            The persisted activity.

        Raises
        ------
        ReferenceNotFound
            If ``created_by`` does not reference an existing staff member.
        """
        self._require_staff(data.created_by)

        now = timezone.now()
        activity = Activity.objects.create(
            title=data.title,
            description=data.description or None,
            activity_date=data.activity_date,
            location=data.location or None,
            status=Activity.Status.PLANNED,
            max_participants=data.max_participants,
            created_by_id=data.created_by,
            created_at=now,
            updated_at=now,
        )
        logger.info(
            "Activity created id=%s created_by=%s max_participants=%s",
            activity.pk,
            data.created_by,
            data.max_participants,
        )
        return activity

    def update(self, activity_id: int, changes: ActivityChanges) -> Optional[Activity]:
        """
        Apply a partial update to an activity.

        Parameters
        ----------
        activity_id : int
            Id of the activity to update.
        changes : ActivityChanges
            The provided fields. Status cannot be changed here.

        Returns
        -------
        Activity or None
            The updated activity, or None if it does not exist.

        Raises
        ------
        ReferenceNotFound
            If ``created_by`` is provided and does not reference an
            existing staff member. Nothing is written in that case.
        ValueError
            If a required field (title, activity_date, created_by) is
            set to None.
        """
        activity = Activity.objects.filter(pk=activity_id).first()
        if activity is None:
            return None

        values = changes.present()
        for name in _REQUIRED_FIELDS:
            if name in values and values[name] is None:
                raise ValueError(f"Activity field {name!r} cannot be null")

        if "created_by" in values:
            self._require_staff(values["created_by"])

        update_fields = ["updated_at"]
        for name, value in values.items():
            if name in _NULLABLE_TEXT_FIELDS:
                value = value or None
            if name == "created_by":
                activity.created_by_id = value
            else:
                setattr(activity, name, value)
            update_fields.append(name)

        activity.updated_at = timezone.now()
        activity.save(update_fields=update_fields)
        logger.info("Activity updated id=%s fields=%s", activity.pk, sorted(values))
        return activity

    def update_status(self, activity_id: int, status: str) -> Optional[Activity]:
        """
        Set the status of an activity.

        Any status may follow any other status.

        Parameters
        ----------
        activity_id : int
            Id of the activity.
        status : str
            One of :class:`Activity.Status`.

        Returns
        -------
        Activity or None
            The updated activity, or None if it does not exist.

        Raises
        ------
        ValueError
            If ``status`` is not a valid activity status.
        """
        if status not in Activity.Status.values:
            raise ValueError(f"Invalid activity status: {status!r}")

        activity = Activity.objects.filter(pk=activity_id).first()
        if activity is None:
            return None

        activity.status = status
        activity.updated_at = timezone.now()
        activity.save(update_fields=["status", "updated_at"])
        logger.info("Activity id=%s status set to %s", activity.pk, status)
        return activity
