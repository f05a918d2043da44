"""
announcements/serializers.py

DRF serializers for the widget's JSON API.
Keep these thin and explicit; they are our API contract.

The API returns the same structured data the HTML renderer works from
(RenderedAnnouncement), so a frontend can draw its own markup and keep the
show more / show less state itself.
"""
from rest_framework import serializers

from .repository import Order


class AnnouncementQuerySerializer(serializers.Serializer):
    audience = serializers.CharField(max_length=80, help_text="Audience label, e.g. UGT or Students_all")
    order = serializers.ChoiceField(
        choices=[o.value for o in Order],
        required=False,
        help_text="submission (newest first, default) or deadline (closing soonest first)",
    )
    include_future = serializers.BooleanField(
        default=False, help_text="Also return announcements that have not opened yet"
    )

    def validate_audience(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("audience must not be blank")
        return value


class AnnouncementSerializer(serializers.Serializer):
    id = serializers.IntegerField(source="record.id")
    subject = serializers.CharField(source="record.subject")
    message = serializers.CharField(source="full")
    brief = serializers.CharField()
    truncated = serializers.BooleanField()
    expanded = serializers.BooleanField()
    author_name = serializers.CharField(source="record.author_name")
    author_email = serializers.CharField(source="record.author_email")
    sent_at = serializers.DateTimeField(source="record.sent_at")
    open_at = serializers.DateTimeField(source="record.open_at", allow_null=True)
    close_at = serializers.DateTimeField(source="record.close_at", allow_null=True)
    link = serializers.CharField(source="record.link", allow_null=True)
    show_link_inline = serializers.BooleanField(source="record.show_link_inline")
    show_close_date = serializers.BooleanField(source="record.show_close_date")