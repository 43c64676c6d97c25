"""Custom user manager creating email-identified users with role tags."""

from typing import Iterable

from django.contrib.auth.base_user import BaseUserManager


class UserManager(BaseUserManager):
    """Manager to create users and attach their role tags."""

    use_in_migrations = True

    def _create_user(self, email: str, password: str, roles: Iterable[str] = (), **extra_fields):
        if not email:
            raise ValueError("The Email must be set")
        email = self.normalize_email(email)
        user = self.model(email=email, **extra_fields)
        # Hashed with the first entry of PASSWORD_HASHERS (bcrypt).
        user.set_password(password)
        user.save(using=self._db)
        if roles:
            user.grant_roles(*roles)
        return user

    def create_user(self, email: str, password: str | None = None, roles: Iterable[str] = (), **extra_fields):
        """Create a regular user; ROLE_USER is always granted."""
        if password is None:
            raise ValueError("Password must be provided")
        from access_control.models import RoleName

        roles = {RoleName.USER, *roles}
        return self._create_user(email, password, roles=roles, **extra_fields)

    def create_superuser(self, email: str, password: str, **extra_fields):
        """Create an account holding every role tag."""
        from access_control.models import RoleName

        extra_fields.setdefault("is_active", True)
        return self._create_user(email, password, roles=RoleName.values, **extra_fields)

    def with_roles(self):
        """Queryset that prefetches roles for policy checks."""
        return self.get_queryset().prefetch_related("roles")


__all__ = ["UserManager"]
