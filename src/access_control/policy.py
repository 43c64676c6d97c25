"""Role-based authorization policy for article operations.

The policy is a lookup table from permission to the role tag it requires.
Decisions depend only on the actor's roles; the article itself is accepted so
callers can pass the subject they are acting on, but it is never consulted.
"""

from enum import Enum
from typing import Any, Iterable, Optional

from .models import RoleName


class ArticlePermission(str, Enum):
    """Operations that can be performed on an article."""

    VIEW = "ARTICLE_VIEW"
    EDIT = "ARTICLE_EDIT"
    DELETE = "ARTICLE_DELETE"


ARTICLE_POLICY: dict[ArticlePermission, str] = {
    ArticlePermission.VIEW: RoleName.ADMIN,
    ArticlePermission.EDIT: RoleName.ADMIN,
    ArticlePermission.DELETE: RoleName.SUPER_ADMIN,
}


def decide(permission: ArticlePermission | str, roles: Iterable[str]) -> bool:
    """Return True when ``roles`` contains the role required for ``permission``."""

    try:
        permission = ArticlePermission(permission)
    except ValueError:
        return False

    required = ARTICLE_POLICY.get(permission)
    if required is None:
        return False
    return str(required) in {str(role) for role in roles}


def roles_of(user: Any) -> set[str]:
    """Return the role tags of an authenticated user, or an empty set."""

    if user is None or not getattr(user, "is_authenticated", False):
        return set()
    get_roles = getattr(user, "get_roles", None)
    if get_roles is None:
        return set()
    return set(get_roles())


def is_granted(permission: ArticlePermission | str, user: Any, article: Optional[Any] = None) -> bool:
    """Check ``permission`` for ``user``; anonymous users are always denied."""

    if user is None or not getattr(user, "is_authenticated", False):
        return False
    return decide(permission, roles_of(user))


def has_role(user: Any, role: str) -> bool:
    """Return True when an authenticated ``user`` holds ``role``."""

    return str(role) in roles_of(user)


__all__ = ["ARTICLE_POLICY", "ArticlePermission", "decide", "has_role", "is_granted", "roles_of"]
