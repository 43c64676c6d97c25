"""API authentication endpoints (login, logout, profile) and session login pages."""

import logging
from typing import Any

from django.contrib.auth import views as auth_views
from rest_framework import status
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.response import Response
from rest_framework.views import APIView

from core.response import api_response
from .serializers import LoginSerializer, UserDetailSerializer
from .services import TokenService

logger = logging.getLogger(__name__)


class LoginView(APIView):
    permission_classes: list[Any] = []

    # noinspection PyMethodMayBeStatic
    def post(self, request):
        """Authenticate and issue an access token."""
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data["user"]
        logger.info("API login succeeded for user %s", user.pk)
        return api_response({"access": TokenService.generate_token(user)})


class LogoutView(APIView):
    """Revoke the bearer token used for this request."""

    permission_classes: list[Any] = []

    # noinspection PyMethodMayBeStatic
    def post(self, request):
        """Blocklist the bearer access token and return 204 No Content."""
        token = _get_bearer_token(request)
        if not token:
            raise AuthenticationFailed("Missing token.")

        payload = TokenService.decode_token(token)
        TokenService.block_token(payload["jti"], payload["exp"])
        logger.info("API token revoked for user %s", payload.get("sub"))
        # 204 responses must not include a body.
        return Response(status=status.HTTP_204_NO_CONTENT)


class MeView(APIView):
    permission_classes: list[Any] = []

    # noinspection PyMethodMayBeStatic
    def get(self, request):
        """Return the current user's profile and role tags."""
        if not request.user.is_authenticated:
            raise AuthenticationFailed("Authentication required")
        return api_response(UserDetailSerializer(request.user).data)


class AdminLoginView(auth_views.LoginView):
    """Session login form for the HTML back office."""

    template_name = "registration/login.html"
    redirect_authenticated_user = True


def _get_bearer_token(request) -> str | None:
    """Extract the Bearer token from Authorization header if present."""
    auth_header = request.META.get("HTTP_AUTHORIZATION", "")
    if auth_header.startswith("Bearer "):
        return auth_header.split(" ", 1)[1]
    return None
