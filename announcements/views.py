"""
announcements/views.py

Endpoints:
- /announcements/<audience>/  (GET) HTML widget block for host pages (public)
- /api/announcements/         (GET) the same announcements as structured JSON (public)

Query parameters for the JSON API:
- audience=<label>            (required) e.g. UGT, Staff, Students_all
- order=submission|deadline   (default submission: newest first)
- include_future=1            also list announcements that have not opened yet

When the Megaphone store is unreachable both endpoints answer 503; no partial
results are ever returned.
"""
import logging

from django.http import HttpResponse
from django.template.loader import render_to_string
from django.views import View
from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from .audiences import known_audiences, resolve_audience
from .exceptions import StoreConnectionError
from .handler import fetch_for_audience, show_announcements
from .renderer import AnnouncementRenderer
from .repository import Order
from .serializers import AnnouncementQuerySerializer, AnnouncementSerializer

# Swagger / OpenAPI
from drf_yasg.utils import swagger_auto_schema
from drf_yasg import openapi

logger = logging.getLogger(__name__)


# ----------------------------------------------------------------------------- #
# HTML widget                                                                   #
# ----------------------------------------------------------------------------- #
class AnnouncementWidgetView(View):
    """
    Render the announcement block for one audience label, wrapped with the
    toggle script. Host pages can embed this in an <iframe> or fetch it.
    """
    template_name = "announcements/widget.html"
    unavailable_template_name = "announcements/unavailable.html"

    def get(self, request, audience):
        try:
            block = show_announcements(audience)
        except StoreConnectionError:
            logger.error("Announcement widget unavailable for audience %r", audience)
            return HttpResponse(
                render_to_string(self.unavailable_template_name, request=request),
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )
        return HttpResponse(render_to_string(self.template_name, {"block": block}, request=request))


# ----------------------------------------------------------------------------- #
# JSON API                                                                      #
# ----------------------------------------------------------------------------- #
class AnnouncementListView(APIView):
    """
    Return the currently open announcements for an audience label.

    Public on purpose: the host pages decide who gets to see the widget.
    """
    permission_classes = [permissions.AllowAny]

    @swagger_auto_schema(
        tags=["Announcements"],
        operation_description=(
            "List currently open announcements for an audience.\n\n"
            "Audience labels: " + ", ".join(f"`{a}`" for a in known_audiences()) + ".\n"
            "Any other label is looked up as a category name as-is.\n\n"
            "Responses:\n"
            "- 200: OK\n"
            "- 400: missing or invalid parameters\n"
            "- 503: Megaphone store unavailable"
        ),
        query_serializer=AnnouncementQuerySerializer,
        responses={
            200: openapi.Response("OK", AnnouncementSerializer(many=True)),
            400: "Bad Request",
            503: "Service Unavailable",
        },
    )
    def get(self, request):
        params = AnnouncementQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        audience = params.validated_data["audience"]
        order = Order.parse(params.validated_data.get("order"))
        include_future = params.validated_data["include_future"]

        try:
            records = fetch_for_audience(audience, order=order, include_future=include_future)
        except StoreConnectionError:
            return Response(
                {"detail": "Announcements are temporarily unavailable."},
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )

        items = AnnouncementRenderer().prepare(records)
        return Response({
            "audience": audience,
            "categories": resolve_audience(audience),
            "order": order.value,
            "include_future": include_future,
            "announcements": AnnouncementSerializer(items, many=True).data,
        })
