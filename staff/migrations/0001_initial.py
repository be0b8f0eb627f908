"""
Initial migration for the staff application.

This migration creates the Staff model.
"""

from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Staff",
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
                ("position", models.CharField(max_length=100, verbose_name="Position")),
                (
                    "phone",
                    models.CharField(blank=True, max_length=50, null=True, verbose_name="Phone"),
                ),
                ("address", models.TextField(blank=True, null=True, verbose_name="Address")),
                ("hire_date", models.DateField(verbose_name="Hire date")),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("updated_at", models.DateTimeField(default=django.utils.timezone.now)),
                (
                    "user",
                    models.OneToOneField(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="staff_profile",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={"ordering": ["full_name"], "verbose_name_plural": "staff"},
        ),
    ]
