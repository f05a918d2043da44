"""
announcements/urls.py

HTML widget + JSON API for announcements.
Included at the project root (see megaphone_backend/urls.py).
"""
from django.urls import path

from .views import AnnouncementListView, AnnouncementWidgetView


app_name = "announcements"

urlpatterns = [
    path("api/announcements/", AnnouncementListView.as_view(), name="announcement-list"),
    path("announcements/<str:audience>/", AnnouncementWidgetView.as_view(), name="widget"),
]
