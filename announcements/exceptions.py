"""
announcements/exceptions.py

Errors raised by the announcement pipeline.

Only store connectivity is an error here. Unknown categories, empty category
lists and empty result sets all degrade to "show nothing" instead.
"""


class MegaphoneError(Exception):
    """Base class for announcement pipeline errors."""


class StoreConnectionError(MegaphoneError):
    """The Megaphone store could not be reached or refused our credentials."""

    def __init__(self, alias: str, message: str = ""):
        self.alias = alias
        super().__init__(message or f"Cannot connect to the Megaphone store ({alias!r}).")
