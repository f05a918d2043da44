"""
announcements/renderer.py

Turns AnnouncementRecords into the widget markup.

Two steps, so other presentation layers can reuse the first one:
1) prepare(): pure data. Each record gets its brief/full message and the
   truncation decision, plus an `expanded` flag (False on first render).
2) render(): feeds that data to announcements/announcement_list.html.

Messages come from Megaphone already escaped for HTML, so they are marked
safe and only have newlines turned into <br>. Every other field goes through
normal template auto-escaping.
"""
import re
from dataclasses import dataclass
from typing import Optional

from django.conf import settings
from django.template.loader import render_to_string
from django.utils.safestring import mark_safe

from .records import AnnouncementRecord

DEFAULT_TRUNCATE_AT = 300
DEFAULT_DATE_FORMAT = "jS F Y"

NO_ANNOUNCEMENTS_HTML = "<ul><li>There are currently no announcements.</li></ul>"

TEMPLATE_NAME = "announcements/announcement_list.html"

# last whitespace character in a string
_LAST_SPACE = re.compile(r"\s\S*\Z")


def truncate_message(message: str, limit: int) -> tuple[str, bool]:
    """Return (brief, truncated).

    Messages longer than `limit` are cut at `limit` characters and trimmed back
    to the last whitespace, so words are never split. A cut with no whitespace
    in it at all is kept as is.
    """
    if len(message) <= limit:
        return message, False
    cut = message[:limit]
    match = _LAST_SPACE.search(cut)
    if match:
        cut = cut[:match.start()]
    return cut, True


@dataclass(frozen=True)
class RenderedAnnouncement:
    record: AnnouncementRecord
    brief: str
    full: str
    truncated: bool
    expanded: bool = False

    @property
    def inline_link(self) -> Optional[str]:
        """Link shown as a small "(link)" next to the subject."""
        if self.record.link and not self.record.show_link_inline:
            return self.record.link
        return None

    @property
    def block_link(self) -> Optional[str]:
        """Link shown literally on its own line."""
        if self.record.link and self.record.show_link_inline:
            return self.record.link
        return None

    @property
    def close_at(self):
        if self.record.close_at and self.record.show_close_date:
            return self.record.close_at
        return None

    @property
    def brief_id(self) -> str:
        return f"messagebrief-{self.record.id}"

    @property
    def full_id(self) -> str:
        return f"messagefull-{self.record.id}"


class AnnouncementRenderer:
    def __init__(self, truncate_at: Optional[int] = None, date_format: Optional[str] = None):
        self.truncate_at = truncate_at if truncate_at is not None else getattr(
            settings, "MEGAPHONE_TRUNCATE_AT", DEFAULT_TRUNCATE_AT
        )
        self.date_format = date_format or getattr(settings, "MEGAPHONE_DATE_FORMAT", DEFAULT_DATE_FORMAT)

    def prepare_one(self, record: AnnouncementRecord, expanded: bool = False) -> RenderedAnnouncement:
        brief, truncated = truncate_message(record.message, self.truncate_at)
        return RenderedAnnouncement(
            record=record,
            brief=mark_safe(brief),
            full=mark_safe(record.message),
            truncated=truncated,
            expanded=expanded and truncated,
        )

    def prepare(self, records, expanded=()) -> list[RenderedAnnouncement]:
        """Structured view data, in input order. `expanded` holds ids to show in full."""
        expanded = set(expanded)
        return [self.prepare_one(r, expanded=r.id in expanded) for r in records]

    def render(self, records, expanded=()) -> str:
        items = self.prepare(records, expanded=expanded)
        if not items:
            return mark_safe(NO_ANNOUNCEMENTS_HTML)
        html = render_to_string(TEMPLATE_NAME, {"announcements": items, "date_format": self.date_format})
        return mark_safe(html.strip())


def render_announcements(records, truncate_at: int = DEFAULT_TRUNCATE_AT, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    return AnnouncementRenderer(truncate_at=truncate_at, date_format=date_format).render(records)
