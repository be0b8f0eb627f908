# activities/management/commands/bootstrap_demo.py
"""
Management command to initialize demo data.

This command creates an administrator, a staff member, children
and activities so that the API can be tried out right away.
It can be executed using::

    python manage.py bootstrap_demo

Running it several times does not duplicate anything.
"""

from datetime import date, datetime, time, timedelta

from django.contrib.auth.models import User
from django.core.management.base import BaseCommand
from django.utils import timezone

from activities.lifecycle import ActivityInput, ActivityLifecycleManager
from activities.models import Activity
from children.models import Child
from staff.models import Staff


class Command(BaseCommand):
    """
    Django management command for demo initialization.

    Creates:
    - An administrator account.
    - A coordinator staff member.
    - Two children.
    - A football session limited to 10 participants next week and
      an unlimited reading club the week after.

    Attributes
    ----------
    help : str
        Short description displayed in ``python manage.py help``.
    """

    help = "Create demo staff, children and activities."

    def handle(self, *args, **options):
        """
        Execute the command.

        Notes
        -----
        - Admin credentials: ``admin/admin123``.
        - Activity dates are computed from the current date.
        """
        # --- Create administrator account ---
        admin, created = User.objects.get_or_create(
            username="admin",
            defaults={"is_staff": True, "is_superuser": True},
        )
        if created:
            admin.set_password("admin123")
            admin.save()
            self.stdout.write(self.style.SUCCESS("Admin : admin/admin123"))

        # --- Create coordinator ---
        coordinator, _ = Staff.objects.get_or_create(
            full_name="Grace Coordinator",
            defaults={"position": "Activity coordinator", "hire_date": date(2023, 1, 1)},
        )

        # --- Create demo children ---
        Child.objects.get_or_create(
            full_name="Alice Demo",
            defaults={
                "date_of_birth": date(2015, 6, 1),
                "gender": Child.Gender.FEMALE,
                "admission_date": date(2022, 9, 1),
            },
        )
        Child.objects.get_or_create(
            full_name="Bob Demo",
            defaults={
                "date_of_birth": date(2014, 3, 12),
                "gender": Child.Gender.MALE,
                "admission_date": date(2021, 1, 15),
            },
        )

        # --- Create activities through the lifecycle manager ---
        today = timezone.localdate()
        lifecycle = ActivityLifecycleManager()
        demo_activities = [
            ActivityInput(
                title="Football session",
                description="Weekly football training",
                activity_date=self._at(today + timedelta(days=7), 15),
                location="Playground",
                max_participants=10,
                created_by=coordinator.pk,
            ),
            ActivityInput(
                title="Reading club",
                description="Open reading afternoon",
                activity_date=self._at(today + timedelta(days=14), 14),
                location="Library",
                created_by=coordinator.pk,
            ),
        ]
        for data in demo_activities:
            if not Activity.objects.filter(title=data.title).exists():
                lifecycle.create(data)

        self.stdout.write(self.style.SUCCESS("Demo data initialized."))

    @staticmethod
    def _at(day: date, hour: int) -> datetime:
        return timezone.make_aware(datetime.combine(day, time(hour=hour)))
