"""Policy-backed guards for DRF API views and Django HTML views."""

from django.contrib.auth.mixins import AccessMixin
from rest_framework import permissions

from .policy import ArticlePermission, has_role, is_granted


class ArticlePolicyPermission(permissions.BasePermission):
    """Grant access when the user holds the role the view's permission requires.

    Views declare ``required_permission`` (an ``ArticlePermission``). Views
    without it are denied. Anonymous users fail ``has_permission`` so DRF
    raises ``NotAuthenticated``, which the exception handler turns into 401.
    """

    message = "You do not have permission to perform this action on this resource."

    def has_permission(self, request, view) -> bool:
        permission = getattr(view, "required_permission", None)
        if permission is None:
            return False
        return is_granted(permission, getattr(request, "user", None))

    def has_object_permission(self, request, view, obj) -> bool:
        permission = getattr(view, "required_permission", None)
        if permission is None:
            return False
        return is_granted(permission, getattr(request, "user", None), obj)


class RoleRequiredMixin(AccessMixin):
    """Gate every method of an HTML view on ``required_role``.

    Anonymous users are redirected to the login page; authenticated users
    without the role get a 403 (``AccessMixin.handle_no_permission``).
    """

    required_role: str | None = None

    def dispatch(self, request, *args, **kwargs):
        if not request.user.is_authenticated:
            return self.handle_no_permission()
        if self.required_role is not None and not has_role(request.user, self.required_role):
            return self.handle_no_permission()
        return super().dispatch(request, *args, **kwargs)

    def is_granted(self, permission: ArticlePermission, article=None) -> bool:
        """Check a policy permission for the current user."""
        return is_granted(permission, self.request.user, article)


__all__ = ["ArticlePolicyPermission", "RoleRequiredMixin"]
