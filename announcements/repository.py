"""
announcements/repository.py

Query layer over the Megaphone store.

AnnouncementRepository.fetch() turns a list of category names into the list of
announcements a reader should currently see:

- category names are resolved to ids (case-insensitive exact match; "_" and "%"
  are literal characters, never wildcards). Unknown names are skipped.
- an announcement qualifies if it is linked to any resolved category, is
  visible, has status "sent", has not closed, and (unless include_future) has
  already opened.
- message, metadata and author rows are joined into one record per
  announcement, de-duplicated across categories.
- ordering is by sent time (newest first) or by closing date (soonest first,
  announcements without a closing date ahead of the rest, as MySQL sorts NULLs).
"""
import enum
import logging

from django.db.models import F, Q
from django.utils import timezone

from .models import Category, Message
from .records import AnnouncementRecord
from .store import default_alias

logger = logging.getLogger(__name__)


class Order(enum.Enum):
    BY_SENT_DESC = "submission"
    BY_CLOSE_ASC = "deadline"

    @classmethod
    def parse(cls, value) -> "Order":
        """Map 'submission' / 'deadline' (or an Order) to an Order; anything else is the default."""
        if isinstance(value, cls):
            return value
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.BY_SENT_DESC


class AnnouncementRepository:
    def __init__(self, using=None):
        self.using = using or default_alias()

    def category_id(self, name):
        """Return the id of category `name`, or None if Megaphone has no such category."""
        return (
            Category.objects.using(self.using)
            .filter(category__iexact=name)
            .order_by("id")
            .values_list("id", flat=True)
            .first()
        )

    def category_ids(self, names):
        ids = []
        for name in names:
            cat_id = self.category_id(name)
            if cat_id is None:
                logger.debug("Skipping unknown announcement category %r", name)
                continue
            if cat_id not in ids:
                ids.append(cat_id)
        return ids

    def eligible(self, category_ids, *, include_future=False, now=None):
        """Queryset of eligible messages linked to any of `category_ids`."""
        now = now or timezone.now()
        qs = (
            Message.objects.using(self.using)
            .select_related("author", "announcement")
            .filter(
                category_links__category__in=category_ids,
                announcement__isnull=False,
                visible=True,
                status=Message.Status.SENT,
            )
            .filter(Q(announcement__close_date__isnull=True) | Q(announcement__close_date__gt=now))
        )
        if not include_future:
            qs = qs.filter(Q(announcement__open_date__isnull=True) | Q(announcement__open_date__lte=now))
        return qs.distinct()

    def fetch(self, categories, order=Order.BY_SENT_DESC, include_future=False, *, now=None):
        """Return AnnouncementRecords for `categories`, ordered per `order`."""
        categories = list(categories or [])
        if not categories:
            return []

        ids = self.category_ids(categories)
        if not ids:
            logger.info("No known categories among %s; nothing to show", categories)
            return []

        qs = self.eligible(ids, include_future=include_future, now=now)
        if Order.parse(order) is Order.BY_CLOSE_ASC:
            qs = qs.order_by(F("announcement__close_date").asc(nulls_first=True), "-sent")
        else:
            qs = qs.order_by("-sent")

        records = [AnnouncementRecord.from_message(m) for m in qs]
        logger.info(
            "Fetched %d announcement(s) for categories %s (order=%s, include_future=%s)",
            len(records), categories, Order.parse(order).value, include_future,
        )
        return records
