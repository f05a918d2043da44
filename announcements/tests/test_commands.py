import json
import os
import tempfile
from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase, override_settings

from announcements.models import Category, Message
from announcements.renderer import NO_ANNOUNCEMENTS_HTML


class SeedMegaphoneTests(TestCase):
    def test_demo_seed_is_idempotent(self):
        out = StringIO()
        call_command("seed_megaphone", stdout=out)
        self.assertIn("Seeded 3 announcement(s).", out.getvalue())
        call_command("seed_megaphone", stdout=StringIO())
        self.assertEqual(Message.objects.count(), 3)
        self.assertEqual(
            sorted(Category.objects.values_list("category", flat=True)),
            ["PGR", "PGT", "Staff", "UGT"],
        )

    def test_seed_from_json(self):
        path = self._write_json({
            "categories": ["Alumni"],
            "announcements": [{
                "subject": "Reunion",
                "message": "See you there.",
                "author": {"name": "Alumni Office", "email": "alumni@example.ac.uk"},
                "categories": ["Alumni"],
                "sent": "2024-01-03T12:00:00+00:00",
            }],
        })
        call_command("seed_megaphone", path, stdout=StringIO())
        out = StringIO()
        call_command("show_announcements", "Alumni", stdout=out)
        self.assertIn("Reunion", out.getvalue())
        self.assertIn("alumni@example.ac.uk", out.getvalue())

    def test_missing_file(self):
        with self.assertRaises(CommandError):
            call_command("seed_megaphone", "/nonexistent/announcements.json")

    @override_settings(MEGAPHONE_DATABASE_ALIAS="megaphone")
    def test_refuses_real_store(self):
        with self.assertRaises(CommandError):
            call_command("seed_megaphone")

    def _write_json(self, payload):
        handle = tempfile.NamedTemporaryFile("w", suffix=".json", delete=False, encoding="utf-8")
        with handle:
            json.dump(payload, handle)
        self.addCleanup(os.remove, handle.name)
        return handle.name


class ShowAnnouncementsCommandTests(TestCase):
    def test_prints_placeholder_when_empty(self):
        out = StringIO()
        call_command("show_announcements", "Staff", stdout=out)
        self.assertIn(NO_ANNOUNCEMENTS_HTML, out.getvalue())

    def test_prints_seeded_announcements(self):
        call_command("seed_megaphone", stdout=StringIO())
        out = StringIO()
        call_command("show_announcements", "Staff", "--order", "deadline", stdout=out)
        self.assertIn("Staff meeting", out.getvalue())
        self.assertIn("Library opening hours", out.getvalue())
        self.assertNotIn("Summer project proposals", out.getvalue())
