# activities/views.py
"""
API views for the activities application.

This module exposes the activity lifecycle manager, the
participation enrollment engine and the read accessors as JSON
endpoints. Domain errors are returned as ``{"error", "code"}``
bodies; "not found" results of reads and updates map to 404.
"""

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from monitoring.html_logger import info, warn

from . import selectors
from .enrollment import ParticipationEnrollmentEngine
from .exceptions import ActivityError, CapacityExceeded, DuplicateEnrollment, ReferenceNotFound
from .lifecycle import ActivityChanges, ActivityInput, ActivityLifecycleManager
from .serializers import (
    ActivityInputSerializer,
    ActivitySerializer,
    ActivityStatusSerializer,
    EnrollmentSerializer,
    ParticipationSerializer,
    ParticipationStatusSerializer,
    UpcomingQuerySerializer,
)

#: HTTP status returned for each domain error
ERROR_STATUS = (
    (ReferenceNotFound, status.HTTP_404_NOT_FOUND),
    (DuplicateEnrollment, status.HTTP_409_CONFLICT),
    (CapacityExceeded, status.HTTP_409_CONFLICT),
)


def api_error(message: str, code: str, status_code=status.HTTP_400_BAD_REQUEST):
    """
    Build an error response.

    Always returns ``{"error": <message>, "code": <code>}`` with the
    given status code.
    """
    return Response({"error": message, "code": code}, status=status_code)


def domain_error(exc: ActivityError, request):
    """
    Turn a domain error into an error response and log it.
    """
    status_code = status.HTTP_400_BAD_REQUEST
    for cls, mapped in ERROR_STATUS:
        if isinstance(exc, cls):
            status_code = mapped
            break
    warn(f"{exc} (user={request.user.id}, code={exc.code}).")
    return api_error(str(exc), exc.code, status_code)


def not_found(kind: str, pk: int):
    return api_error(f"{kind} {pk} not found", "not_found", status.HTTP_404_NOT_FOUND)


class LifecycleMixin:
    """Give views access to the activity lifecycle manager."""

    def get_lifecycle(self) -> ActivityLifecycleManager:
        return ActivityLifecycleManager()


class EnrollmentMixin:
    """Give views access to the participation enrollment engine."""

    def get_engine(self) -> ParticipationEnrollmentEngine:
        return ParticipationEnrollmentEngine()


class ActivityListCreateView(LifecycleMixin, APIView):
    """
    List all activities or create a new one.
    """

    def get(self, request):
        activities = selectors.get_all_activities()
        return Response(ActivitySerializer(activities, many=True).data)

    def post(self, request):
        """
        Create an activity in the ``PLANNED`` status.

        Returns 201 with the activity, 400 on invalid input, 404 when
        ``created_by`` does not reference an existing staff member.
        """
        serializer = ActivityInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            activity = self.get_lifecycle().create(
                ActivityInput(**serializer.validated_data)
            )
        except ActivityError as exc:
            return domain_error(exc, request)

        info(f"Activity created activity_id={activity.id} (user={request.user.id}).")
        return Response(ActivitySerializer(activity).data, status=status.HTTP_201_CREATED)


class UpcomingActivityListView(APIView):
    """
    List the next activities still to come, ``?limit=`` (default 10).
    """

    def get(self, request):
        query = UpcomingQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        activities = selectors.get_upcoming_activities(query.validated_data["limit"])
        return Response(ActivitySerializer(activities, many=True).data)


class ActivityDetailView(LifecycleMixin, APIView):
    """
    Retrieve or partially update an activity.
    """

    def get(self, request, pk):
        activity = selectors.get_activity_by_id(pk)
        if activity is None:
            return not_found("Activity", pk)
        return Response(ActivitySerializer(activity).data)

    def patch(self, request, pk):
        """
        Update the provided fields of an activity.

        Fields absent from the payload are left untouched; nullable
        fields explicitly sent as null are cleared. Status cannot be
        changed here.
        """
        serializer = ActivityInputSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        try:
            activity = self.get_lifecycle().update(
                pk, ActivityChanges.from_dict(serializer.validated_data)
            )
        except ActivityError as exc:
            return domain_error(exc, request)

        if activity is None:
            return not_found("Activity", pk)
        return Response(ActivitySerializer(activity).data)


class ActivityStatusView(LifecycleMixin, APIView):
    """
    Set the status of an activity. Any status may follow any other.
    """

    def post(self, request, pk):
        serializer = ActivityStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        new_status = serializer.validated_data["status"]
        activity = self.get_lifecycle().update_status(pk, new_status)
        if activity is None:
            return not_found("Activity", pk)

        info(f"Activity {pk} status set to {new_status} (user={request.user.id}).")
        return Response(ActivitySerializer(activity).data)


class ActivityParticipationListView(APIView):
    """
    List the participations of an activity. Unknown activities yield [].
    """

    def get(self, request, pk):
        participations = selectors.get_participations_by_activity(pk)
        return Response(ParticipationSerializer(participations, many=True).data)


class ChildParticipationListView(APIView):
    """
    List the participations of a child. Unknown children yield [].
    """

    def get(self, request, child_id):
        participations = selectors.get_participations_by_child(child_id)
        return Response(ParticipationSerializer(participations, many=True).data)


class EnrollView(EnrollmentMixin, APIView):
    """
    Enroll a child into an activity.
    """

    def post(self, request):
        """
        Handle POST request to enroll a child in an activity.

        Returns
        -------
        Response
            201 with the participation; 404 if the activity or the child
            does not exist; 409 if the child is already enrolled or the
            activity is full; 400 on invalid input.
        """
        serializer = EnrollmentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            participation = self.get_engine().enroll(
                activity_id=data["activity_id"],
                child_id=data["child_id"],
                status=data["status"],
                notes=data.get("notes"),
            )
        except ActivityError as exc:
            return domain_error(exc, request)

        info(
            f"Participation created participation_id={participation.id} "
            f"activity={data['activity_id']} child={data['child_id']} "
            f"(user={request.user.id})."
        )
        return Response(
            ParticipationSerializer(participation).data, status=status.HTTP_201_CREATED
        )


class ParticipationDetailView(EnrollmentMixin, APIView):
    """
    Permanently remove a participation.
    """

    def delete(self, request, pk):
        removed = self.get_engine().remove(pk)
        if removed:
            info(f"Participation {pk} removed (user={request.user.id}).")
        return Response({"success": removed})


class ParticipationStatusView(EnrollmentMixin, APIView):
    """
    Set the status of a participation. Capacity is not checked again.
    """

    def post(self, request, pk):
        serializer = ParticipationStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        participation = self.get_engine().update_status(
            pk, serializer.validated_data["status"]
        )
        if participation is None:
            return not_found("Participation", pk)
        return Response(ParticipationSerializer(participation).data)
