"""Service-level API endpoints."""

import time
from typing import Any

from rest_framework.response import Response
from rest_framework.views import APIView


class HealthView(APIView):
    """Liveness probe; answers without authentication or the API envelope."""

    authentication_classes: list[Any] = []
    permission_classes: list[Any] = []

    # noinspection PyMethodMayBeStatic
    def get(self, request):
        return Response({"status": "ok", "timestamp": int(time.time())})
