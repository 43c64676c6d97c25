"""App configuration for the core project utilities."""

from django.apps import AppConfig
from django.core.signals import got_request_exception


class CoreConfig(AppConfig):
    """Core app holds settings, URLs, lifecycle hooks and shared templates."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "core"

    def ready(self):
        from .middleware import dispatch_uncaught_exception

        got_request_exception.connect(dispatch_uncaught_exception, dispatch_uid="core.lifecycle.uncaught_exception")
