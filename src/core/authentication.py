"""DRF authentication that reuses the user resolved by the middleware stack.

Bearer tokens are verified by ``JWTAuthMiddleware`` and browser sessions by
Django's ``AuthenticationMiddleware``. Either way the user already sits on the
underlying Django request, so DRF only has to surface it.
"""

from typing import Any, Optional, Tuple

from rest_framework.authentication import BaseAuthentication


class RequestUserAuthentication(BaseAuthentication):
    """Expose ``request._request.user`` to DRF views."""

    def authenticate(self, request) -> Optional[Tuple[Any, None]]:
        # DRF's Request wraps the Django HttpRequest as ``_request``.
        django_request = getattr(request, "_request", None)
        user = getattr(django_request, "user", None)
        if user is None or not getattr(user, "is_authenticated", False):
            return None
        return user, None

    def authenticate_header(self, request) -> str:
        # A WWW-Authenticate value makes DRF answer NotAuthenticated with 401.
        return 'Bearer realm="api"'


__all__ = ["RequestUserAuthentication"]
