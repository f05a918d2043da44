from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class AnnouncementRecord:
    """One eligible announcement, flattened from message, metadata and author rows."""

    id: int
    subject: str
    message: str
    author_name: str
    author_email: str
    sent_at: datetime
    open_at: Optional[datetime] = None
    close_at: Optional[datetime] = None
    link: Optional[str] = None
    show_link_inline: bool = False
    show_close_date: bool = False

    @classmethod
    def from_message(cls, message) -> "AnnouncementRecord":
        """Build a record from a Message loaded with its author and announcement data."""
        data = message.announcement
        return cls(
            id=message.pk,
            subject=message.subject,
            message=message.message,
            author_name=message.author.realname,
            author_email=message.author.email,
            sent_at=message.sent,
            open_at=data.open_date,
            close_at=data.close_date,
            link=data.announce_link or None,
            show_link_inline=bool(data.show_link),
            show_close_date=bool(data.show_close),
        )
