"""
announcements/handler.py

The one call host pages make:

    from announcements.handler import show_announcements
    html = show_announcements("UGT")

It resolves the audience label, fetches the currently open announcements
(newest first, nothing scheduled for later) and renders them. The store
connection is held only for the duration of the call. StoreConnectionError is
not caught here: a page that cannot reach Megaphone shows its own failure page.
"""
import logging

from .audiences import resolve_audience
from .renderer import AnnouncementRenderer
from .repository import AnnouncementRepository, Order
from .store import store_connection

logger = logging.getLogger(__name__)


def fetch_for_audience(audience_label, *, order=Order.BY_SENT_DESC, include_future=False, using=None):
    categories = resolve_audience(audience_label)
    with store_connection(using) as connection:
        repository = AnnouncementRepository(using=connection.alias)
        return repository.fetch(categories, order=order, include_future=include_future)


def show_announcements(audience_label, *, using=None, renderer=None):
    """Return the rendered announcement block for `audience_label`."""
    records = fetch_for_audience(audience_label, using=using)
    logger.debug("Rendering %d announcement(s) for audience %r", len(records), audience_label)
    return (renderer or AnnouncementRenderer()).render(records)
