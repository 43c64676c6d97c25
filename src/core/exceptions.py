"""DRF exception handler enforcing the ``{data, errors}`` API envelope."""

from typing import Any

from django.conf import settings
from django.db import DatabaseError
from rest_framework import status
from rest_framework.exceptions import AuthenticationFailed, NotAuthenticated
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from articles.exceptions import ArticleNotFound
from authentication.services import BlocklistUnavailable

UNAUTHORIZED_MESSAGE = (
    "Authentication credentials were not provided or are invalid, "
    "token revoked, or user is inactive."
)
FORBIDDEN_MESSAGE = "You do not have permission to perform this action on this resource."


def _normalize_errors(payload: Any) -> list[Any]:
    """Convert DRF's response.data into a list for the envelope."""

    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict) and "detail" in payload:
        return [payload["detail"]]
    return [payload]


def _envelope_error(message: str, status_code: int) -> Response:
    return Response({"data": None, "errors": [message]}, status=status_code)


def api_exception_handler(exc: Exception, context: dict[str, Any]) -> Response | None:
    """Wrap API errors in ``{"data": null, "errors": [...]}``.

    - Missing articles become 404 with the service's message.
    - Blocklist and database outages become 503.
    - 401/403 messages are normalized unless DEBUG_AUTH_ERRORS is enabled.
    """

    if isinstance(exc, ArticleNotFound):
        return _envelope_error(str(exc), status.HTTP_404_NOT_FOUND)

    if isinstance(exc, BlocklistUnavailable):
        return _envelope_error("Authentication service unavailable (blocklist).", status.HTTP_503_SERVICE_UNAVAILABLE)

    if isinstance(exc, DatabaseError):
        return _envelope_error("Service temporarily unavailable.", status.HTTP_503_SERVICE_UNAVAILABLE)

    response = drf_exception_handler(exc, context)
    if response is None:
        return response

    if isinstance(exc, (AuthenticationFailed, NotAuthenticated)):
        response.status_code = status.HTTP_401_UNAUTHORIZED

    if response.status_code == status.HTTP_401_UNAUTHORIZED:
        if getattr(settings, "DEBUG_AUTH_ERRORS", False):
            errors = _normalize_errors(response.data)
        else:
            errors = [UNAUTHORIZED_MESSAGE]
    elif response.status_code == status.HTTP_403_FORBIDDEN:
        errors = [FORBIDDEN_MESSAGE]
    else:
        errors = _normalize_errors(response.data)

    response.data = {"data": None, "errors": errors}
    return response
