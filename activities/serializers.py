# activities/serializers.py
"""
Serializers for the activities API.

Output serializers render activities and participations; input
serializers validate request payloads before they reach the
lifecycle manager or the enrollment engine.
"""

from rest_framework import serializers

from .models import Activity, ActivityParticipation


class ActivitySerializer(serializers.ModelSerializer):
    created_by = serializers.IntegerField(source="created_by_id", read_only=True)

    class Meta:
        model = Activity
        fields = [
            "id",
            "title",
            "description",
            "activity_date",
            "location",
            "status",
            "max_participants",
            "created_by",
            "created_at",
            "updated_at",
        ]


class ActivityInputSerializer(serializers.Serializer):
    """
    Validate activity creation payloads.

    Used with ``partial=True`` for updates: only the keys present in
    the request end up in ``validated_data``, which keeps omitted
    fields apart from fields explicitly set to null.
    """

    title = serializers.CharField(max_length=200)
    description = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    activity_date = serializers.DateTimeField()
    location = serializers.CharField(
        max_length=200, required=False, allow_null=True, allow_blank=True
    )
    max_participants = serializers.IntegerField(
        min_value=1, required=False, allow_null=True
    )
    created_by = serializers.IntegerField()


class ActivityStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Activity.Status.choices)


class ParticipationSerializer(serializers.ModelSerializer):
    activity_id = serializers.IntegerField(read_only=True)
    child_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = ActivityParticipation
        fields = [
            "id",
            "activity_id",
            "child_id",
            "status",
            "notes",
            "registered_at",
            "updated_at",
        ]


class EnrollmentSerializer(serializers.Serializer):
    activity_id = serializers.IntegerField()
    child_id = serializers.IntegerField()
    status = serializers.ChoiceField(choices=ActivityParticipation.Status.choices)
    notes = serializers.CharField(required=False, allow_null=True, allow_blank=True)


class ParticipationStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=ActivityParticipation.Status.choices)


class UpcomingQuerySerializer(serializers.Serializer):
    limit = serializers.IntegerField(min_value=1, max_value=100, default=10)
