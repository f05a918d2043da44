"""
WSGI config for the Megaphone Announcements widget.

    gunicorn megaphone_backend.wsgi:application --log-file -
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "megaphone_backend.settings")

application = get_wsgi_application()
