"""
Initial migration for the children application.

This migration creates the Child model.
"""

from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):
    """
    Initial migration class for the children application.

    Attributes
    ----------
    initial : bool
        Marks this migration as the first for the app.
    dependencies : list
        Declares a dependency on the swappable user model
        to support custom AUTH_USER_MODEL.
    operations : list
        Creates the Child model with its fields and metadata.
    """

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Child",
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
                ("full_name", models.CharField(max_length=200, verbose_name="Full name")),
                ("date_of_birth", models.DateField(verbose_name="Date of birth")),
                (
                    "gender",
                    models.CharField(
                        choices=[("MALE", "Male"), ("FEMALE", "Female")],
                        max_length=16,
                        verbose_name="Gender",
                    ),
                ),
                ("admission_date", models.DateField(verbose_name="Admission date")),
                (
                    "health_status",
                    models.TextField(blank=True, null=True, verbose_name="Health status"),
                ),
                (
                    "education_level",
                    models.CharField(
                        blank=True, max_length=100, null=True, verbose_name="Education level"
                    ),
                ),
                (
                    "photo_url",
                    models.URLField(blank=True, null=True, verbose_name="Photo URL"),
                ),
                (
                    "background_story",
                    models.TextField(blank=True, null=True, verbose_name="Background story"),
                ),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("updated_at", models.DateTimeField(default=django.utils.timezone.now)),
                (
                    "user",
                    models.OneToOneField(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="child_profile",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={"ordering": ["full_name"]},
        ),
    ]
