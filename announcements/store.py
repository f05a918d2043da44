"""
announcements/store.py

Scoped access to the Megaphone store connection.

Every widget request opens the connection, runs its queries and releases it
again, even when a query fails. Connection failures (the store cannot be
reached, or the link drops mid-request) are reported as StoreConnectionError.
Any other database error from a live connection, such as a missing table or
bad SQL, propagates unchanged.
"""
import logging
from contextlib import contextmanager

from django.conf import settings
from django.db import InterfaceError, OperationalError, connections

from .exceptions import StoreConnectionError

logger = logging.getLogger(__name__)


def default_alias() -> str:
    return getattr(settings, "MEGAPHONE_DATABASE_ALIAS", "default")


@contextmanager
def store_connection(using=None):
    """Yield a live connection for `using`, releasing it on exit."""
    alias = using or default_alias()
    connection = connections[alias]
    try:
        connection.ensure_connection()
    except (OperationalError, InterfaceError) as exc:
        logger.error("Megaphone store %r unreachable: %s", alias, exc)
        raise StoreConnectionError(alias) from exc

    try:
        yield connection
    except (OperationalError, InterfaceError) as exc:
        if connection.connection is not None and connection.is_usable():
            raise
        logger.exception("Megaphone store %r failed during the request", alias)
        raise StoreConnectionError(alias, f"Lost connection to the Megaphone store ({alias!r}).") from exc
    finally:
        # An enclosing atomic block still owns the connection.
        if not connection.in_atomic_block:
            connection.close()
