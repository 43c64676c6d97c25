"""System checks for the article authorization policy."""

from django.core.checks import Error, register

from access_control.models import RoleName
from access_control.policy import ARTICLE_POLICY, ArticlePermission


@register()
def article_policy_is_complete(app_configs, **kwargs):
    """Ensure every ArticlePermission maps to a known role tag.

    A permission without a policy entry is silently denied at runtime, so a
    missing row is reported here instead of surfacing as unexplained 403s.
    """
    errors: list[Error] = []
    known_roles = set(RoleName.values)

    for permission in ArticlePermission:
        required = ARTICLE_POLICY.get(permission)
        if required is None:
            errors.append(
                Error(
                    f"{permission.name} has no entry in ARTICLE_POLICY.",
                    obj=permission,
                    id="access_control.E001",
                )
            )
        elif str(required) not in known_roles:
            errors.append(
                Error(
                    f"{permission.name} requires unknown role {required!r}.",
                    obj=permission,
                    id="access_control.E002",
                )
            )

    return errors
