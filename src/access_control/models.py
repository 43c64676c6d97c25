"""Role model holding the role tags assigned to users."""

from django.db import models


class RoleName(models.TextChoices):
    """Role tags understood by the authorization policy."""

    USER = "ROLE_USER", "User"
    ADMIN = "ROLE_ADMIN", "Administrator"
    SUPER_ADMIN = "ROLE_SUPER_ADMIN", "Super administrator"


class Role(models.Model):
    """A role tag that can be granted to any number of users."""

    name = models.CharField(max_length=50, unique=True, choices=RoleName.choices)
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.name


__all__ = ["Role", "RoleName"]
