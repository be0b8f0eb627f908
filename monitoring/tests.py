"""
Tests for the monitoring application: HTML log writing and the log view.
"""

from pathlib import Path
import tempfile

from django.contrib.auth.models import User
from django.test import TestCase, override_settings

from monitoring import html_logger


class HtmlLoggerTests(TestCase):
    def setUp(self):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.log_path = Path(tmp.name) / "nested" / "app.log.html"
        logs = override_settings(MONITORING_LOG_FILE=self.log_path)
        logs.enable()
        self.addCleanup(logs.disable)

    def test_entries_are_appended_and_escaped(self):
        with self.assertLogs("orphanage", level="INFO") as captured:
            html_logger.info("Participation created <b>1</b>")
            html_logger.warn("Capacity reached")
            html_logger.error("Boom")

        content = self.log_path.read_text(encoding="utf-8")
        self.assertTrue(content.startswith("<!doctype html>"))
        self.assertIn('class="log-info"', content)
        self.assertIn('class="log-warn"', content)
        self.assertIn('class="log-error"', content)
        self.assertIn("&lt;b&gt;1&lt;/b&gt;", content)
        self.assertEqual(len(captured.records), 3)

    def test_logs_view_is_staff_only(self):
        html_logger.info("visible entry")

        User.objects.create_user(username="plain", password="p")
        self.client.login(username="plain", password="p")
        resp = self.client.get("/monitoring/logs/")
        self.assertEqual(resp.status_code, 302)

        User.objects.create_user(username="boss", password="p", is_staff=True)
        self.client.login(username="boss", password="p")
        resp = self.client.get("/monitoring/logs/")
        self.assertEqual(resp.status_code, 200)
        self.assertContains(resp, "visible entry")

    def test_logs_view_placeholder(self):
        User.objects.create_user(username="boss", password="p", is_staff=True)
        self.client.login(username="boss", password="p")
        resp = self.client.get("/monitoring/logs/")
        self.assertContains(resp, "No logs yet.")
