"""
Concurrent enrollment tests.

These tests hit the database from several threads at once. On
PostgreSQL the enrollments queue on the activity row lock; on SQLite
the test database is a file and IMMEDIATE transactions serialize the
writers.
"""

import threading

from django.db import connection, transaction
from django.test import TransactionTestCase

from activities.enrollment import ParticipationEnrollmentEngine
from activities.exceptions import CapacityExceeded, DuplicateEnrollment
from activities.models import ActivityParticipation
from activities.tests.helpers import (
    RecordingDirectory,
    make_activity,
    make_child,
    make_staff,
)

REGISTERED = ActivityParticipation.Status.REGISTERED


class ConcurrentEnrollmentTests(TransactionTestCase):
    def _race(self, calls):
        """
        Run each ``(activity_id, child_id)`` enrollment in its own thread,
        all released together. Returns the list of outcomes.
        """
        barrier = threading.Barrier(len(calls))
        outcomes = []
        lock = threading.Lock()

        def worker(activity_id, child_id):
            try:
                barrier.wait()
                ParticipationEnrollmentEngine().enroll(
                    activity_id=activity_id, child_id=child_id, status=REGISTERED
                )
                result = "ok"
            except (CapacityExceeded, DuplicateEnrollment) as exc:
                result = exc.code
            finally:
                connection.close()
            with lock:
                outcomes.append(result)

        threads = [threading.Thread(target=worker, args=call) for call in calls]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        return outcomes

    def test_capacity_never_exceeded(self):
        staff = make_staff()
        activity = make_activity(staff, max_participants=3)
        children = [make_child(f"Child {i}") for i in range(10)]

        outcomes = self._race([(activity.pk, child.pk) for child in children])

        self.assertEqual(outcomes.count("ok"), 3)
        self.assertEqual(outcomes.count("capacity_exceeded"), 7)
        self.assertEqual(ActivityParticipation.objects.filter(activity=activity).count(), 3)

    def test_same_pair_enrolled_once(self):
        staff = make_staff()
        activity = make_activity(staff)
        child = make_child()

        outcomes = self._race([(activity.pk, child.pk)] * 5)

        self.assertEqual(outcomes.count("ok"), 1)
        self.assertEqual(outcomes.count("duplicate_enrollment"), 4)

    def test_different_activities_do_not_interfere(self):
        staff = make_staff()
        first = make_activity(staff, title="First", max_participants=1)
        second = make_activity(staff, title="Second", max_participants=1)
        child = make_child()

        outcomes = self._race([(first.pk, child.pk), (second.pk, child.pk)])

        self.assertEqual(outcomes, ["ok", "ok"])

    def test_sqlite_uses_immediate_transactions(self):
        if connection.vendor != "sqlite":
            self.skipTest("SQLite only")
        options = connection.settings_dict["OPTIONS"]
        self.assertEqual(options["transaction_mode"], "IMMEDIATE")
        self.assertFalse(connection.is_in_memory_db())


class TransactionScopeTests(TransactionTestCase):
    def test_child_lookup_runs_outside_the_transaction(self):
        staff = make_staff()
        activity = make_activity(staff, max_participants=2)
        child = make_child()
        seen = []

        class ScopeRecordingDirectory(RecordingDirectory):
            def child_exists(self, child_id):
                seen.append(transaction.get_connection().in_atomic_block)
                return super().child_exists(child_id)

        directory = ScopeRecordingDirectory()
        ParticipationEnrollmentEngine(directory=directory).enroll(
            activity_id=activity.pk, child_id=child.pk, status=REGISTERED
        )

        self.assertEqual(seen, [False])
        self.assertEqual(directory.calls, [("child", child.pk)])
        self.assertTrue(
            ActivityParticipation.objects.filter(activity=activity, child=child).exists()
        )
