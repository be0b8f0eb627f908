"""
Initial migration for the activities application.

This migration creates the core models for the activities app:
- Activity: an event organised by a staff member.
- ActivityParticipation: a child's enrollment in an activity, unique
  per (activity, child) pair.
"""

from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):
    """
    Initial migration class for the activities application.

    Attributes
    ----------
    initial : bool
        Indicates that this is the first migration for the app.
    dependencies : list
        The staff and children apps, whose models are referenced.
    operations : list
        Creation of Activity and ActivityParticipation, including the
        uniqueness constraint on participations.
    """

    initial = True

    dependencies = [
        ("staff", "0001_initial"),
        ("children", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Activity",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("title", models.CharField(max_length=200, verbose_name="Title")),
                (
                    "description",
                    models.TextField(blank=True, null=True, verbose_name="Description"),
                ),
                ("activity_date", models.DateTimeField(verbose_name="Activity date")),
                (
                    "location",
                    models.CharField(
                        blank=True, max_length=200, null=True, verbose_name="Location"
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("PLANNED", "Planned"),
                            ("ONGOING", "Ongoing"),
                            ("COMPLETED", "Completed"),
                            ("CANCELLED", "Cancelled"),
                        ],
                        default="PLANNED",
                        max_length=16,
                        verbose_name="Status",
                    ),
                ),
                (
                    "max_participants",
                    models.PositiveIntegerField(
                        blank=True, null=True, verbose_name="Maximum participants"
                    ),
                ),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("updated_at", models.DateTimeField(default=django.utils.timezone.now)),
                # Foreign key to Staff
                (
                    "created_by",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="activities",
                        to="staff.staff",
                        verbose_name="Created by",
                    ),
                ),
            ],
            options={
                "ordering": ["activity_date", "id"],
                "verbose_name_plural": "activities",
            },
        ),
        migrations.CreateModel(
            name="ActivityParticipation",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("REGISTERED", "Registered"),
                            ("ATTENDED", "Attended"),
                            ("ABSENT", "Absent"),
                            ("CANCELLED", "Cancelled"),
                        ],
                        default="REGISTERED",
                        max_length=16,
                        verbose_name="Status",
                    ),
                ),
                ("notes", models.TextField(blank=True, null=True, verbose_name="Notes")),
                (
                    "registered_at",
                    models.DateTimeField(
                        default=django.utils.timezone.now, verbose_name="Registered at"
                    ),
                ),
                (
                    "updated_at",
                    models.DateTimeField(
                        default=django.utils.timezone.now, verbose_name="Updated at"
                    ),
                ),
                # Foreign key to Activity
                (
                    "activity",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="participations",
                        to="activities.activity",
                        verbose_name="Activity",
                    ),
                ),
                # Foreign key to Child
                (
                    "child",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="participations",
                        to="children.child",
                        verbose_name="Child",
                    ),
                ),
            ],
            options={"ordering": ["registered_at", "id"]},
        ),
        migrations.AddConstraint(
            model_name="activityparticipation",
            constraint=models.UniqueConstraint(
                fields=("activity", "child"),
                name="unique_participation_per_activity_child",
            ),
        ),
    ]
