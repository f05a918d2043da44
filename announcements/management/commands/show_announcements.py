from django.core.management.base import BaseCommand, CommandError

from announcements.audiences import known_audiences
from announcements.exceptions import StoreConnectionError
from announcements.handler import fetch_for_audience
from announcements.renderer import AnnouncementRenderer
from announcements.repository import Order


class Command(BaseCommand):
    help = "Print the announcement markup for an audience label."

    def add_arguments(self, parser):
        parser.add_argument(
            "audience", type=str,
            help=f"Audience label ({', '.join(known_audiences())}) or a category name",
        )
        parser.add_argument("--order", choices=[o.value for o in Order], default=Order.BY_SENT_DESC.value)
        parser.add_argument("--include-future", action="store_true", help="Include announcements not yet open")
        parser.add_argument("--truncate", type=int, default=None, help="Characters before 'show more'")
        parser.add_argument("--date-format", type=str, default=None, help="Django date format string")
        parser.add_argument("--database", type=str, default=None, help="Database alias of the Megaphone store")

    def handle(self, *args, **opts):
        try:
            records = fetch_for_audience(
                opts["audience"],
                order=Order.parse(opts["order"]),
                include_future=opts["include_future"],
                using=opts["database"],
            )
        except StoreConnectionError as exc:
            raise CommandError(str(exc)) from exc

        renderer = AnnouncementRenderer(truncate_at=opts["truncate"], date_format=opts["date_format"])
        self.stdout.write(renderer.render(records))
