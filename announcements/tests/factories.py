"""Helpers that write Megaphone rows for tests (the app itself never writes)."""
from datetime import timedelta

from django.utils import timezone

from announcements.models import AnnounceData, Author, Category, Message, MessageCategory


def make_category(name):
    return Category.objects.create(category=name)


def make_author(name="Jo Bloggs", email="jo.bloggs@example.ac.uk"):
    author, _ = Author.objects.get_or_create(email=email, defaults={"realname": name})
    return author


def make_announcement(
    *categories,
    subject="Subject",
    message="Body",
    author=None,
    sent=None,
    open_date=None,
    close_date=None,
    link="",
    show_link=False,
    show_close=False,
    visible=True,
    status=Message.Status.SENT,
    with_data=True,
):
    msg = Message.objects.create(
        author=author or make_author(),
        subject=subject,
        message=message,
        sent=sent or timezone.now() - timedelta(hours=1),
        visible=visible,
        status=status,
    )
    if with_data:
        AnnounceData.objects.create(
            message=msg,
            open_date=open_date,
            close_date=close_date,
            announce_link=link,
            show_link=show_link,
            show_close=show_close,
        )
    for category in categories:
        MessageCategory.objects.create(message=msg, category=category)
    return msg
