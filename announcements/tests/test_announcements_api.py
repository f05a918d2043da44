"""
Integration tests for the announcement widget and JSON API.

We keep these tests in the announcements app.
"""
from datetime import timedelta
from unittest import mock

from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from announcements.exceptions import StoreConnectionError
from announcements.renderer import NO_ANNOUNCEMENTS_HTML
from announcements.tests.factories import make_announcement, make_category


class AnnouncementsApiTests(APITestCase):
    def setUp(self):
        now = timezone.now()
        self.ugt = make_category("UGT")
        self.pgt = make_category("PGT")
        self.staff = make_category("Staff")

        self.a1 = make_announcement(
            self.pgt,
            subject="PGT induction",
            message="word " * 100,
            sent=now - timedelta(hours=1),
            close_date=now + timedelta(days=10),
            show_close=True,
        )
        self.a2 = make_announcement(
            self.ugt,
            subject="UGT exams",
            sent=now - timedelta(hours=2),
            close_date=now + timedelta(days=2),
        )
        self.a3 = make_announcement(self.staff, subject="Staff briefing")
        self.future = make_announcement(
            self.ugt, subject="Next term", open_date=now + timedelta(days=3)
        )

    def _subjects(self, r):
        return [a["subject"] for a in r.data["announcements"]]

    def test_list_for_group_audience(self):
        r = self.client.get("/api/announcements/", {"audience": "Students_all"})
        self.assertEqual(r.status_code, status.HTTP_200_OK)
        self.assertEqual(r.data["categories"], ["UGT", "PGT", "PGR"])
        self.assertEqual(self._subjects(r), ["PGT induction", "UGT exams"])

    def test_truncation_decision_is_exposed(self):
        r = self.client.get("/api/announcements/", {"audience": "PGT"})
        (item,) = r.data["announcements"]
        self.assertTrue(item["truncated"])
        self.assertFalse(item["expanded"])
        self.assertLessEqual(len(item["brief"]), 300)
        self.assertEqual(item["message"], "word " * 100)
        self.assertTrue(item["show_close_date"])
        self.assertIsNotNone(item["close_at"])
        self.assertEqual(item["author_email"], "jo.bloggs@example.ac.uk")

    def test_deadline_order(self):
        r = self.client.get("/api/announcements/", {"audience": "Students_taught", "order": "deadline"})
        self.assertEqual(r.data["order"], "deadline")
        self.assertEqual(self._subjects(r), ["UGT exams", "PGT induction"])

    def test_include_future(self):
        r = self.client.get("/api/announcements/", {"audience": "UGT"})
        self.assertNotIn("Next term", self._subjects(r))
        r = self.client.get("/api/announcements/", {"audience": "UGT", "include_future": "1"})
        self.assertIn("Next term", self._subjects(r))

    def test_unknown_audience_is_empty_not_an_error(self):
        r = self.client.get("/api/announcements/", {"audience": "Alumni"})
        self.assertEqual(r.status_code, status.HTTP_200_OK)
        self.assertEqual(r.data["announcements"], [])

    def test_audience_is_required(self):
        r = self.client.get("/api/announcements/")
        self.assertEqual(r.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("audience", r.data)

    def test_invalid_order_rejected(self):
        r = self.client.get("/api/announcements/", {"audience": "UGT", "order": "random"})
        self.assertEqual(r.status_code, status.HTTP_400_BAD_REQUEST)

    def test_store_down_is_503(self):
        with mock.patch("announcements.views.fetch_for_audience", side_effect=StoreConnectionError("default")):
            r = self.client.get("/api/announcements/", {"audience": "UGT"})
        self.assertEqual(r.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
        self.assertNotIn("announcements", r.data)


class AnnouncementWidgetTests(APITestCase):
    def setUp(self):
        self.pgt = make_category("PGT")
        self.staff = make_category("Staff")

    def test_widget_renders_block_and_script(self):
        make_announcement(self.pgt, subject="PGT induction")
        r = self.client.get("/announcements/Students_all/")
        self.assertEqual(r.status_code, status.HTTP_200_OK)
        body = r.content.decode()
        self.assertIn("PGT induction", body)
        self.assertIn("announcements/megaphone.js", body)

    def test_widget_framing_is_governed_by_csp_only(self):
        r = self.client.get("/announcements/Staff/")
        self.assertNotIn("X-Frame-Options", r.headers)
        self.assertIn("frame-ancestors 'self'", r["Content-Security-Policy"])

    def test_widget_placeholder_when_nothing_open(self):
        r = self.client.get("/announcements/Staff/")
        self.assertEqual(r.status_code, status.HTTP_200_OK)
        self.assertIn(NO_ANNOUNCEMENTS_HTML, r.content.decode())

    def test_widget_store_down_is_503(self):
        with mock.patch("announcements.views.show_announcements", side_effect=StoreConnectionError("default")):
            r = self.client.get("/announcements/UGT/")
        self.assertEqual(r.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
        self.assertIn("temporarily unavailable", r.content.decode())
        self.assertNotIn("megaphone-announcement\"", r.content.decode())
