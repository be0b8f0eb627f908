# activities/enrollment.py
"""
Participation enrollment engine.

This module enrolls children into activities and manages the
resulting participations. Enrollment enforces two invariants:

- at most one participation per (activity, child) pair, whatever
  its status;
- the number of participations of an activity never exceeds its
  ``max_participants`` when one is set.

The duplicate check, the capacity count and the insert run in a
single transaction while the activity row is locked, so that
concurrent enrollments into the same activity are serialized.
Enrollments into different activities do not wait for each other.
"""

from dataclasses import dataclass, field
from typing import Optional
import logging

from django.db import IntegrityError, transaction
from django.utils import timezone

from .exceptions import CapacityExceeded, DuplicateEnrollment, ReferenceNotFound
from .gateways import DirectoryGateway, get_directory_gateway
from .models import Activity, ActivityParticipation

logger = logging.getLogger(__name__)


@dataclass
class ParticipationEnrollmentEngine:
    """
    Enroll children into activities and manage their participations.

    The engine keeps no state between calls; coordination between
    concurrent calls relies on database locks and constraints.

    Attributes
    ----------
    directory : DirectoryGateway
        Gateway used to check that the enrolled child exists.
    """

    directory: DirectoryGateway = field(default_factory=get_directory_gateway)

    def enroll(
        self,
        *,
        activity_id: int,
        child_id: int,
        status: str,
        notes: Optional[str] = None,
    ) -> ActivityParticipation:
        """
        Enroll a child into an activity.

        Checks are made in this order: the activity exists, the child
        exists, the pair is not already enrolled, the activity is not
        full. The child lookup is skipped when the activity is missing.

        Parameters
        ----------
        activity_id : int
            Id of the activity.
        child_id : int
            Id of the child.
        status : str
            Initial participation status, one of
            :class:`ActivityParticipation.Status`.
        notes : str, optional
            Free-text notes.

        Returns
        -------
        ActivityParticipation
            The persisted participation.

        Raises
        ------
        ReferenceNotFound
            If the activity or the child does not exist.
        DuplicateEnrollment
            If the child already has a participation for the activity.
        CapacityExceeded
            If the activity already holds ``max_participants`` participations.
        ValueError
            If ``status`` is not a valid participation status.
        """
        if status not in ActivityParticipation.Status.values:
            raise ValueError(f"Invalid participation status: {status!r}")

        # No lock is held during the reference lookups
        if not Activity.objects.filter(pk=activity_id).exists():
            raise ReferenceNotFound("activity", activity_id)

        if not self.directory.child_exists(child_id):
            raise ReferenceNotFound("child", child_id)

        with transaction.atomic():
            # Lock the activity row: enrollments for the same activity queue here
            activity = (
                Activity.objects.select_for_update()
                .filter(pk=activity_id)
                .first()
            )
            if activity is None:
                raise ReferenceNotFound("activity", activity_id)

            existing = ActivityParticipation.objects.filter(
                activity_id=activity.pk, child_id=child_id
            )
            if existing.exists():
                logger.info(
                    "Duplicate enrollment rejected activity=%s child=%s",
                    activity.pk,
                    child_id,
                )
                raise DuplicateEnrollment(activity.pk, child_id)

            if activity.max_participants is not None:
                current = ActivityParticipation.objects.filter(
                    activity_id=activity.pk
                ).count()
                if current >= activity.max_participants:
                    logger.warning(
                        "Capacity reached for activity %s (%s/%s)",
                        activity.pk,
                        current,
                        activity.max_participants,
                    )
                    raise CapacityExceeded(activity.pk, activity.max_participants)

            now = timezone.now()
            try:
                with transaction.atomic():
                    participation = ActivityParticipation.objects.create(
                        activity=activity,
                        child_id=child_id,
                        status=status,
                        notes=notes or None,
                        registered_at=now,
                        updated_at=now,
                    )
            except IntegrityError:
                # A concurrent enrollment of the same pair won the race
                if existing.exists():
                    raise DuplicateEnrollment(activity.pk, child_id) from None
                raise

        logger.info(
            "Participation created id=%s activity=%s child=%s status=%s",
            participation.pk,
            activity.pk,
            child_id,
            status,
        )
        return participation

    def update_status(
        self, participation_id: int, status: str
    ) -> Optional[ActivityParticipation]:
        """
        Set the status of a participation.

        Any status may follow any other status, and capacity is not
        checked again.

        Parameters
        ----------
        participation_id : int
            Id of the participation.
        status : str
            One of :class:`ActivityParticipation.Status`.

        Returns
        -------
        ActivityParticipation or None
            The updated participation, or None if it does not exist.

        Raises
        ------
        ValueError
            If ``status`` is not a valid participation status.
        """
        if status not in ActivityParticipation.Status.values:
            raise ValueError(f"Invalid participation status: {status!r}")

        participation = ActivityParticipation.objects.filter(pk=participation_id).first()
        if participation is None:
            return None

        participation.status = status
        participation.updated_at = timezone.now()
        participation.save(update_fields=["status", "updated_at"])
        logger.info("Participation id=%s status set to %s", participation.pk, status)
        return participation

    def remove(self, participation_id: int) -> bool:
        """
        Permanently delete a participation.

        Parameters
        ----------
        participation_id : int
            Id of the participation.

        Returns
        -------
        bool
            True if a participation was deleted, False if none existed.
        """
        deleted, _ = ActivityParticipation.objects.filter(pk=participation_id).delete()
        if deleted:
            logger.info("Participation id=%s removed", participation_id)
        return deleted > 0
