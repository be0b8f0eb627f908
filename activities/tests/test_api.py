"""
Tests for the activities JSON API.

Exercises every endpoint through DRF's APIClient, including the
mapping of domain errors to HTTP responses.
"""

from pathlib import Path
import tempfile

from django.contrib.auth.models import User
from django.test import TestCase, override_settings
from rest_framework import status
from rest_framework.test import APIClient

from activities.models import Activity, ActivityParticipation
from activities.tests.helpers import make_activity, make_child, make_staff


class ApiTestCase(TestCase):
    """
    Authenticated API client with the HTML log redirected to a temp dir.
    """

    def setUp(self):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        logs = override_settings(MONITORING_LOG_FILE=Path(tmp.name) / "app.log.html")
        logs.enable()
        self.addCleanup(logs.disable)

        self.user = User.objects.create_user(username="staffer", password="p")
        self.client = APIClient()
        self.client.force_authenticate(user=self.user)
        self.staff = make_staff()
        self.child = make_child("Child One")


class ActivityApiTests(ApiTestCase):
    def test_requires_authentication(self):
        resp = APIClient().get("/api/activities/")
        self.assertIn(
            resp.status_code, (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN)
        )

    def test_create_activity(self):
        resp = self.client.post(
            "/api/activities/",
            {
                "title": "Football",
                "activity_date": "2030-05-01T15:00:00Z",
                "created_by": self.staff.pk,
                "max_participants": 10,
            },
            format="json",
        )

        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        data = resp.json()
        self.assertEqual(data["status"], "PLANNED")
        self.assertEqual(data["created_by"], self.staff.pk)
        self.assertEqual(data["max_participants"], 10)
        self.assertIsNone(data["description"])

    def test_create_ignores_requested_status(self):
        resp = self.client.post(
            "/api/activities/",
            {
                "title": "Football",
                "activity_date": "2030-05-01T15:00:00Z",
                "created_by": self.staff.pk,
                "status": "COMPLETED",
            },
            format="json",
        )
        self.assertEqual(resp.json()["status"], "PLANNED")

    def test_create_with_unknown_staff(self):
        resp = self.client.post(
            "/api/activities/",
            {"title": "X", "activity_date": "2030-05-01T15:00:00Z", "created_by": 9999},
            format="json",
        )

        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(resp.json()["code"], "reference_not_found")
        self.assertIn("9999", resp.json()["error"])

    def test_create_validates_input(self):
        for payload in (
            {"title": "", "activity_date": "2030-05-01T15:00:00Z", "created_by": self.staff.pk},
            {"title": "X", "activity_date": "2030-05-01T15:00:00Z", "created_by": self.staff.pk,
             "max_participants": 0},
            {"title": "X", "created_by": self.staff.pk},
        ):
            resp = self.client.post("/api/activities/", payload, format="json")
            self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST, payload)
        self.assertFalse(Activity.objects.exists())

    def test_list_and_detail(self):
        activity = make_activity(self.staff, title="Chess")

        listing = self.client.get("/api/activities/")
        self.assertEqual([a["title"] for a in listing.json()], ["Chess"])

        detail = self.client.get(f"/api/activities/{activity.pk}/")
        self.assertEqual(detail.status_code, status.HTTP_200_OK)
        self.assertEqual(detail.json()["id"], activity.pk)

        missing = self.client.get("/api/activities/9999/")
        self.assertEqual(missing.status_code, status.HTTP_404_NOT_FOUND)

    def test_partial_update(self):
        activity = make_activity(self.staff, title="Chess", location="Hall", description="Club")

        resp = self.client.patch(
            f"/api/activities/{activity.pk}/", {"location": None}, format="json"
        )

        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        data = resp.json()
        self.assertIsNone(data["location"])
        self.assertEqual(data["title"], "Chess")
        self.assertEqual(data["description"], "Club")

    def test_partial_update_rejects_null_required_field(self):
        activity = make_activity(self.staff, title="Chess")

        resp = self.client.patch(
            f"/api/activities/{activity.pk}/", {"title": None}, format="json"
        )

        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        activity.refresh_from_db()
        self.assertEqual(activity.title, "Chess")

    def test_update_missing_activity(self):
        resp = self.client.patch("/api/activities/9999/", {"title": "X"}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)

    def test_update_with_unknown_staff(self):
        activity = make_activity(self.staff)
        resp = self.client.patch(
            f"/api/activities/{activity.pk}/", {"created_by": 9999}, format="json"
        )
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(resp.json()["code"], "reference_not_found")

    def test_status_update(self):
        activity = make_activity(self.staff)

        resp = self.client.post(
            f"/api/activities/{activity.pk}/status/", {"status": "COMPLETED"}, format="json"
        )
        self.assertEqual(resp.json()["status"], "COMPLETED")

        resp = self.client.post(
            f"/api/activities/{activity.pk}/status/", {"status": "PLANNED"}, format="json"
        )
        self.assertEqual(resp.json()["status"], "PLANNED")

        bad = self.client.post(
            f"/api/activities/{activity.pk}/status/", {"status": "DONE"}, format="json"
        )
        self.assertEqual(bad.status_code, status.HTTP_400_BAD_REQUEST)

        missing = self.client.post(
            "/api/activities/9999/status/", {"status": "ONGOING"}, format="json"
        )
        self.assertEqual(missing.status_code, status.HTTP_404_NOT_FOUND)

    def test_upcoming(self):
        make_activity(self.staff, title="A")
        make_activity(self.staff, title="B")

        resp = self.client.get("/api/activities/upcoming/?limit=1")
        self.assertEqual(len(resp.json()), 1)

        bad = self.client.get("/api/activities/upcoming/?limit=0")
        self.assertEqual(bad.status_code, status.HTTP_400_BAD_REQUEST)


class ParticipationApiTests(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.other_child = make_child("Child Two")
        self.activity = make_activity(self.staff, max_participants=1)

    def enroll(self, child_id, activity_id=None, **extra):
        payload = {
            "activity_id": activity_id or self.activity.pk,
            "child_id": child_id,
            "status": "REGISTERED",
            **extra,
        }
        return self.client.post("/api/activities/participations/", payload, format="json")

    def test_enroll_then_capacity_exceeded(self):
        first = self.enroll(self.child.pk, notes="Bring boots")
        self.assertEqual(first.status_code, status.HTTP_201_CREATED)
        data = first.json()
        self.assertEqual(data["status"], "REGISTERED")
        self.assertEqual(data["notes"], "Bring boots")
        self.assertEqual(data["registered_at"], data["updated_at"])

        second = self.enroll(self.other_child.pk)
        self.assertEqual(second.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(second.json()["code"], "capacity_exceeded")

    def test_duplicate_enrollment(self):
        self.enroll(self.child.pk)
        resp = self.enroll(self.child.pk)

        self.assertEqual(resp.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(resp.json()["code"], "duplicate_enrollment")

    def test_enroll_unknown_activity(self):
        resp = self.enroll(9999, activity_id=999)

        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
        self.assertIn("Activity with id 999", resp.json()["error"])

    def test_enroll_requires_status(self):
        resp = self.client.post(
            "/api/activities/participations/",
            {"activity_id": self.activity.pk, "child_id": self.child.pk},
            format="json",
        )
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)

    def test_participation_lists(self):
        created = self.enroll(self.child.pk).json()

        by_activity = self.client.get(f"/api/activities/{self.activity.pk}/participations/")
        self.assertEqual([p["id"] for p in by_activity.json()], [created["id"]])

        by_child = self.client.get(f"/api/activities/children/{self.child.pk}/participations/")
        self.assertEqual([p["activity_id"] for p in by_child.json()], [self.activity.pk])

        empty = self.client.get("/api/activities/9999/participations/")
        self.assertEqual(empty.json(), [])

    def test_participation_status(self):
        created = self.enroll(self.child.pk).json()

        resp = self.client.post(
            f"/api/activities/participations/{created['id']}/status/",
            {"status": "ATTENDED"},
            format="json",
        )
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.json()["status"], "ATTENDED")

        missing = self.client.post(
            "/api/activities/participations/9999/status/",
            {"status": "ATTENDED"},
            format="json",
        )
        self.assertEqual(missing.status_code, status.HTTP_404_NOT_FOUND)

    def test_remove_participation(self):
        created = self.enroll(self.child.pk).json()
        url = f"/api/activities/participations/{created['id']}/"

        self.assertEqual(self.client.delete(url).json(), {"success": True})
        self.assertEqual(self.client.delete(url).json(), {"success": False})
        self.assertFalse(ActivityParticipation.objects.exists())

        listing = self.client.get(f"/api/activities/{self.activity.pk}/participations/")
        self.assertEqual(listing.json(), [])
