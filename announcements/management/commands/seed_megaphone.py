"""
Management command: seed_megaphone
----------------------------------

Purpose:
    Fill a local copy of the Megaphone tables with categories and
    announcements so the widget has something to show in development.

Behavior:
    - Idempotent: get_or_create on category names, authors (by email) and
      announcements (by author + subject).
    - Without a path, a small built-in demo set is loaded. With a path, the
      JSON file must look like:

        {
          "categories": ["UGT", "PGT", "PGR", "Staff"],
          "announcements": [
            {"subject": "...", "message": "...",
             "author": {"name": "...", "email": "..."},
             "categories": ["UGT"],
             "sent": "2024-01-01T09:00:00+00:00",
             "open_date": null, "close_date": "2024-02-01T17:00:00+00:00",
             "link": "", "show_link": false, "show_close": true}
          ]
        }

Usage:
    python manage.py seed_megaphone [path/to/announcements.json]

Notes:
    * The app ships no migrations (Megaphone owns the schema). Create the
      local tables first with `python manage.py migrate --run-syncdb`.
    * Refuses to run when a real Megaphone server is configured
      (MEGAPHONE_DB_SERVER); Megaphone owns that data.
"""
import json
from datetime import timedelta
from pathlib import Path

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone
from django.utils.dateparse import parse_datetime

from announcements.audiences import AUDIENCES
from announcements.models import AnnounceData, Author, Category, Message, MessageCategory


def _demo_data():
    now = timezone.now().replace(microsecond=0)
    author = {"name": "Megaphone Demo", "email": "megaphone@example.ac.uk"}
    return {
        "categories": ["UGT", "PGT", "PGR", "Staff"],
        "announcements": [
            {
                "subject": "Library opening hours over the holidays",
                "message": "The library will close at 17:00 from Friday.\nNormal hours resume in January.",
                "author": author,
                "categories": ["UGT", "PGT", "PGR", "Staff"],
                "sent": (now - timedelta(days=1)).isoformat(),
                "link": "https://example.ac.uk/library",
                "show_link": True,
            },
            {
                "subject": "Summer project proposals",
                "message": " ".join(["Proposals for summer research projects are now open."] * 12),
                "author": author,
                "categories": ["UGT"],
                "sent": (now - timedelta(days=3)).isoformat(),
                "close_date": (now + timedelta(days=14)).isoformat(),
                "show_close": True,
                "link": "https://example.ac.uk/projects",
            },
            {
                "subject": "Staff meeting",
                "message": "The termly staff meeting is on Wednesday at 14:00.",
                "author": author,
                "categories": ["Staff"],
                "sent": (now - timedelta(hours=6)).isoformat(),
            },
        ],
    }


def _when(value):
    if not value:
        return None
    parsed = parse_datetime(value)
    if parsed is None:
        raise CommandError(f"Invalid datetime: {value!r}")
    return parsed


class Command(BaseCommand):
    help = "Seed local Megaphone tables with demo announcements (idempotent)."

    def add_arguments(self, parser):
        parser.add_argument("json_path", nargs="?", type=str, help="Path to announcements JSON")

    def handle(self, *args, **opts):
        if settings.MEGAPHONE_DATABASE_ALIAS != "default":
            raise CommandError("A Megaphone server is configured; refusing to write to it.")

        if opts.get("json_path"):
            path = Path(opts["json_path"])
            if not path.exists():
                raise CommandError(f"File not found: {path}")
            data = json.loads(path.read_text(encoding="utf-8"))
        else:
            data = _demo_data()

        names = set(data.get("categories", [])) or {n for group in AUDIENCES.values() for n in group}
        categories = {}
        for name in sorted(names):
            categories[name], _ = Category.objects.get_or_create(category=name)

        created = 0
        for x in data.get("announcements", []):
            author_data = x.get("author") or {}
            author, _ = Author.objects.get_or_create(
                email=author_data.get("email", ""),
                defaults={"realname": author_data.get("name", "")},
            )
            message, made = Message.objects.get_or_create(
                author=author,
                subject=x.get("subject", ""),
                defaults=dict(
                    message=x.get("message", ""),
                    sent=_when(x.get("sent")) or timezone.now(),
                    visible=x.get("visible", True),
                    status=x.get("status", Message.Status.SENT),
                ),
            )
            AnnounceData.objects.get_or_create(
                message=message,
                defaults=dict(
                    open_date=_when(x.get("open_date")),
                    close_date=_when(x.get("close_date")),
                    announce_link=x.get("link") or "",
                    show_link=bool(x.get("show_link", False)),
                    show_close=bool(x.get("show_close", False)),
                ),
            )
            for name in x.get("categories", []):
                category = categories.get(name)
                if category is None:
                    category, _ = Category.objects.get_or_create(category=name)
                    categories[name] = category
                MessageCategory.objects.get_or_create(message=message, category=category)
            created += 1 if made else 0

        self.stdout.write(self.style.SUCCESS(f"Seeded {created} announcement(s)."))
