"""
announcements/fields.py

Megaphone stores every timestamp as a UNIX epoch integer. UnixTimestampField
keeps that column type while exposing aware UTC datetimes to Python, so
querysets can compare against timezone.now() directly.
"""
from datetime import datetime, timezone as dt_timezone

from django.db import models
from django.utils import timezone


class UnixTimestampField(models.IntegerField):
    description = "UNIX timestamp stored as an integer"

    def from_db_value(self, value, expression, connection):
        if value is None:
            return None
        return datetime.fromtimestamp(int(value), tz=dt_timezone.utc)

    def to_python(self, value):
        if value is None or isinstance(value, datetime):
            return value
        return datetime.fromtimestamp(int(value), tz=dt_timezone.utc)

    def get_prep_value(self, value):
        if value is None:
            return None
        if isinstance(value, datetime):
            if timezone.is_naive(value):
                value = timezone.make_aware(value, dt_timezone.utc)
            return int(value.timestamp())
        return int(value)
