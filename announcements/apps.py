"""
announcements/apps.py

AppConfig for the Announcements app.

Why this app exists
-------------------
Host pages show a block of Megaphone announcements for one audience
(undergraduates, staff, ...). This app reads those announcements from the
Megaphone store and renders them:

1) /announcements/<audience>/  — the rendered HTML block
2) /api/announcements/         — the same data as JSON

Keep this app read-only. Megaphone itself creates, edits and retires
announcements.
"""
from django.apps import AppConfig


class AnnouncementsConfig(AppConfig):
    name = "announcements"
    verbose_name = "Megaphone Announcements"
    default_auto_field = "django.db.models.AutoField"
