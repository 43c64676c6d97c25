"""Intent-scoped anti-forgery tokens.

Django's CSRF token protects every POST the same way. Destructive actions
additionally carry a token bound to one intent (``delete42``) and to the
caller's session, so a token rendered for one article cannot delete another.
"""

from django.utils.crypto import constant_time_compare, salted_hmac

_KEY_SALT = "core.csrf.intent-token"


def _session_key(request) -> str:
    session = getattr(request, "session", None)
    if session is None:
        return ""
    if session.session_key is None:
        session.save()
    return session.session_key or ""


def make_intent_token(request, intent: str) -> str:
    """Return the token for ``intent`` in the current session."""
    return salted_hmac(_KEY_SALT, f"{intent}:{_session_key(request)}", algorithm="sha256").hexdigest()


def is_intent_token_valid(request, intent: str, token: str | None) -> bool:
    """Check a submitted token against ``intent`` for the current session."""
    if not token:
        return False
    return constant_time_compare(make_intent_token(request, intent), token)


__all__ = ["is_intent_token_valid", "make_intent_token"]
