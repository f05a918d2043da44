"""
announcements/models.py

Read models over the Megaphone schema:
- Author:          mp_users (who sent the message)
- Message:         mp_messages (core fields: subject, body, sent time, visibility, status)
- AnnounceData:    mp_messages_announcedata (open/close window, link, display flags)
- Category:        mp_announce_categories (category name -> id)
- MessageCategory: mp_messages_announcecats (announcement <-> category)

Notes & design choices
----------------------
- Megaphone owns these tables; this app only reads them. No migrations ship
  with the app, tests build the tables straight from these models and a local
  demo database is created with `manage.py migrate --run-syncdb`.
- Timestamps are UNIX integers in the schema (see fields.UnixTimestampField).
- db_table/db_column names match Megaphone so the same models work against
  the production schema and a local SQLite copy.
"""
from django.db import models

from .fields import UnixTimestampField


class Author(models.Model):
    user_id = models.AutoField(primary_key=True)
    realname = models.CharField(max_length=255)
    email = models.CharField(max_length=255)

    class Meta:
        db_table = "mp_users"

    def __str__(self) -> str:
        return f"{self.realname} <{self.email}>"


class Category(models.Model):
    category = models.CharField(max_length=80, help_text="e.g. UGT, PGT, PGR, Staff")

    class Meta:
        db_table = "mp_announce_categories"
        ordering = ["id"]
        verbose_name_plural = "categories"

    def __str__(self) -> str:
        return self.category


class Message(models.Model):
    class Status(models.TextChoices):
        PENDING = "pending", "Pending"
        SENT = "sent", "Sent"

    author = models.ForeignKey(Author, on_delete=models.DO_NOTHING, db_column="user_id", related_name="messages")
    subject = models.CharField(max_length=255)
    message = models.TextField(help_text="HTML-safe body; newlines become line breaks.")
    sent = UnixTimestampField(db_index=True)
    visible = models.BooleanField(default=True)
    status = models.CharField(max_length=10, choices=Status.choices, default=Status.SENT)

    categories = models.ManyToManyField(Category, through="MessageCategory", related_name="messages")

    class Meta:
        db_table = "mp_messages"
        ordering = ["-sent"]

    def __str__(self) -> str:
        return self.subject


class AnnounceData(models.Model):
    message = models.OneToOneField(
        Message,
        on_delete=models.DO_NOTHING,
        primary_key=True,
        db_column="message_id",
        related_name="announcement",
    )
    open_date = UnixTimestampField(null=True, blank=True)
    close_date = UnixTimestampField(null=True, blank=True, db_index=True)
    announce_link = models.CharField(max_length=500, blank=True, default="")
    show_link = models.BooleanField(default=False, help_text="Show the link on its own line.")
    show_close = models.BooleanField(default=False, help_text="Show the closing date to readers.")

    class Meta:
        db_table = "mp_messages_announcedata"


class MessageCategory(models.Model):
    message = models.ForeignKey(Message, on_delete=models.DO_NOTHING, db_column="message_id", related_name="category_links")
    category = models.ForeignKey(Category, on_delete=models.DO_NOTHING, db_column="cat_id", related_name="message_links")

    class Meta:
        db_table = "mp_messages_announcecats"
        constraints = [
            models.UniqueConstraint(fields=["message", "category"], name="uniq_message_category"),
        ]
