"""App configuration for the authentication app."""

from django.apps import AppConfig


class AuthenticationConfig(AppConfig):
    """Holds the User model, session login pages and API bearer tokens."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "authentication"
    verbose_name = "Authentication"
