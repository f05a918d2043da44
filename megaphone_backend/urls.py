"""
urls.py — Root URL configuration for the Megaphone Announcements widget

Purpose
===============================================================================
- Wire the announcements app (HTML widget + JSON API).
- Provide interactive API docs:
    * /api/docs/   → Swagger UI
    * /api/schema/ → OpenAPI JSON (machine-readable)

Notes
- There is no admin and no auth: announcements are authored in Megaphone.
"""

from django.urls import path, include
from rest_framework import permissions

# ----------------------------------------------------------------------------- #
# API Docs (Swagger/OpenAPI via drf-yasg)                                       #
# ----------------------------------------------------------------------------- #
from drf_yasg.views import get_schema_view
from drf_yasg import openapi

schema_view = get_schema_view(
    openapi.Info(
        title="Megaphone Announcements API",
        default_version="v1",
        description=(
            "Read-only access to the announcements currently open in Megaphone. "
            "Key endpoints: "
            "/api/announcements/?audience=<label> (JSON), "
            "/announcements/<label>/ (HTML widget block)."
        ),
    ),
    public=True,
    permission_classes=[permissions.AllowAny],
)

# ----------------------------------------------------------------------------- #
# URL Patterns                                                                  #
# ----------------------------------------------------------------------------- #
urlpatterns = [
    path("", include("announcements.urls", namespace="announcements")),

    # API docs
    path("api/docs/",   schema_view.with_ui("swagger", cache_timeout=0), name="api-docs-swagger"),
    path("api/schema/", schema_view.without_ui(cache_timeout=0),         name="openapi-schema"),
]
