# activities/exceptions.py
"""
Custom exceptions for the activities application.

This module defines domain-specific exceptions raised by the
activity lifecycle manager and the participation enrollment
engine. Every message names the offending kind and id so that
the API layer can return it as-is.
"""


class ActivityError(Exception):
    """
    Base class for activity and participation errors.

    All custom exceptions of the activities core inherit from
    this class. ``code`` is a stable machine-readable identifier
    returned by the API next to the message.
    """

    code = "activity_error"


class ReferenceNotFound(ActivityError):
    """
    Raised when a referenced entity does not exist.

    Parameters
    ----------
    kind : str
        The kind of the missing entity: ``"staff"``, ``"activity"``
        or ``"child"``.
    ref_id : int
        The id that could not be resolved.
    """

    code = "reference_not_found"

    def __init__(self, kind: str, ref_id):
        self.kind = kind
        self.ref_id = ref_id
        super().__init__(f"{kind.capitalize()} with id {ref_id} does not exist")


class DuplicateEnrollment(ActivityError):
    """
    Raised when a child already has a participation for an activity.

    The existing participation blocks a new one whatever its
    status, including ``CANCELLED``.
    """

    code = "duplicate_enrollment"

    def __init__(self, activity_id, child_id):
        self.activity_id = activity_id
        self.child_id = child_id
        super().__init__(
            f"Child {child_id} is already registered for activity {activity_id}"
        )


class CapacityExceeded(ActivityError):
    """
    Raised when an activity has reached its maximum number of participants.
    """

    code = "capacity_exceeded"

    def __init__(self, activity_id, max_participants):
        self.activity_id = activity_id
        self.max_participants = max_participants
        super().__init__(
            f"Activity {activity_id} has reached its maximum of "
            f"{max_participants} participants"
        )
