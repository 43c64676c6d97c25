"""Custom User model identified by email and carrying role tags.

Roles are plain tags (``ROLE_ADMIN`` and friends) stored in the
``access_control.Role`` table; the authorization policy only ever looks at
the set returned by ``User.get_roles()``.
"""

from typing import ClassVar

from django.contrib.auth.models import AbstractBaseUser
from django.db import models

from .managers import UserManager


class User(AbstractBaseUser):
    """Back-office account identified by email."""

    email = models.EmailField(unique=True)
    roles = models.ManyToManyField("access_control.Role", blank=True, related_name="users")
    is_active = models.BooleanField(default=True)
    date_joined = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    USERNAME_FIELD = "email"
    EMAIL_FIELD = "email"
    REQUIRED_FIELDS: ClassVar[list[str]] = []

    objects = UserManager()

    class Meta:
        """Default ordering shows newest users first."""
        ordering = ["-date_joined"]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.email

    def get_roles(self) -> set[str]:
        """Return the role tags granted to this user."""
        return {role.name for role in self.roles.all()}

    def grant_roles(self, *names: str) -> None:
        """Grant role tags, creating missing Role rows on the way."""
        from access_control.models import Role

        roles = [Role.objects.get_or_create(name=str(name))[0] for name in names]
        self.roles.add(*roles)


__all__ = ["User"]
