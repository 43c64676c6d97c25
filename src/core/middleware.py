"""Project middleware: lifecycle hook dispatch and bearer-token authentication."""

import sys
import threading
from typing import Optional

from django.conf import settings
from django.contrib.auth import get_user_model
from django.http import JsonResponse
from django.urls import Resolver404, resolve
from django.utils.deprecation import MiddlewareMixin
from rest_framework import status
from rest_framework.exceptions import AuthenticationFailed

from authentication.services import BlocklistUnavailable, TokenService
from .lifecycle import EXCEPTION, REQUEST, RESPONSE, ExceptionEvent, RequestEvent, ResponseEvent, build_dispatcher

# Nesting depth of requests currently dispatched on this thread.
_dispatch_state = threading.local()


def _dispatch_exception(dispatcher, request, exception) -> ExceptionEvent:
    request.lifecycle_exception_dispatched = True
    return dispatcher.dispatch(
        EXCEPTION,
        ExceptionEvent(
            request=request,
            is_main_request=getattr(request, "is_main_request", True),
            exception=exception,
        ),
    )


class HttpLifecycleMiddleware:
    """Fire the ``HTTP_LIFECYCLE`` hooks around every request.

    The outermost request on a thread is the primary request; anything
    dispatched through this middleware while it is still in flight is marked
    as a sub-request (``request.is_main_request = False``).

    View failures reach the exception hooks through ``process_exception``.
    Failures raised further down the middleware chain only surface through
    Django's ``got_request_exception`` signal, handled by
    :func:`dispatch_uncaught_exception`.
    """

    def __init__(self, get_response):
        self.get_response = get_response
        self.dispatcher = build_dispatcher(getattr(settings, "HTTP_LIFECYCLE", {}))

    def __call__(self, request):
        depth = getattr(_dispatch_state, "depth", 0)
        request.is_main_request = depth == 0
        request.lifecycle_dispatcher = self.dispatcher
        _dispatch_state.depth = depth + 1
        try:
            event = self.dispatcher.dispatch(
                REQUEST, RequestEvent(request=request, is_main_request=request.is_main_request)
            )
            response = event.response
            if response is None:
                response = self.get_response(request)

            event = self.dispatcher.dispatch(
                RESPONSE,
                ResponseEvent(request=request, is_main_request=request.is_main_request, response=response),
            )
            return event.response
        finally:
            _dispatch_state.depth = depth

    def process_exception(self, request, exception):
        """Let exception hooks log the failure and optionally supply a response."""
        return _dispatch_exception(self.dispatcher, request, exception).response


def dispatch_uncaught_exception(sender, request=None, **kwargs):
    """``got_request_exception`` receiver for failures ``process_exception`` missed.

    The 500 response is already decided by then, so hooks can only observe.
    """
    dispatcher = getattr(request, "lifecycle_dispatcher", None)
    if dispatcher is None or getattr(request, "lifecycle_exception_dispatched", False):
        return
    _dispatch_exception(dispatcher, request, sys.exc_info()[1])


class JWTAuthMiddleware(MiddlewareMixin):
    """Authenticate ``Authorization: Bearer`` requests and attach request.user.

    Requests without a bearer header keep the session user set by Django's
    ``AuthenticationMiddleware``. Routes named in ``JWT_EXEMPT_URL_NAMES``
    ignore the header entirely.
    """

    def process_request(self, request):  # type: ignore[override]
        auth_header = request.META.get("HTTP_AUTHORIZATION", "")
        if not auth_header.startswith("Bearer ") or self._is_exempt(request):
            return None

        token = auth_header.split(" ", 1)[1]

        try:
            payload = TokenService.decode_token(token)
            if TokenService.is_token_blocked(payload["jti"]):
                return _unauthorized()

            user = self._get_user(payload.get("sub"))
            if not user or not user.is_active:
                return _unauthorized()

            request.user = user
            return None

        except AuthenticationFailed:
            return _unauthorized()
        except BlocklistUnavailable:
            return _service_unavailable()

    @staticmethod
    def _is_exempt(request) -> bool:
        try:
            match = resolve(request.path_info, getattr(request, "urlconf", None))
        except Resolver404:
            return False
        return match.url_name in getattr(settings, "JWT_EXEMPT_URL_NAMES", ())

    @staticmethod
    def _get_user(user_id: Optional[str]):
        if not user_id:
            return None
        return get_user_model().objects.with_roles().filter(pk=user_id).first()


def _unauthorized() -> JsonResponse:
    return JsonResponse(
        {
            "data": None,
            "errors": [
                "Authentication credentials were not provided or are invalid, token revoked, or user is inactive."
            ],
        },
        status=status.HTTP_401_UNAUTHORIZED,
    )


def _service_unavailable() -> JsonResponse:
    return JsonResponse(
        {"data": None, "errors": ["Authentication service unavailable (blocklist)."]},
        status=status.HTTP_503_SERVICE_UNAVAILABLE,
    )


__all__ = ["HttpLifecycleMiddleware", "JWTAuthMiddleware", "dispatch_uncaught_exception"]
