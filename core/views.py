import logging

from django.db import DatabaseError
from django.http import HttpResponse
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from .probes import ping_database

logger = logging.getLogger(__name__)


def api_running(request):
    return HttpResponse("API Running", content_type="text/plain")


class HealthView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        try:
            ping_database()
        except DatabaseError as exc:
            logger.error("Database health check failed: %s", exc)
            return Response(
                {"status": "unavailable", "message": "Database unavailable"},
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )
        return Response({"status": "ok"})
