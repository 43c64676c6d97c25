"""Shared helpers for tests (users with roles, articles, clocks, fake Redis)."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Dict

from django.contrib.auth import get_user_model

from access_control.models import RoleName
from articles.models import Article
from articles.services import ArticleService

User = get_user_model()


class FakeRedis:
    """Minimal Redis stub supporting the commands used by TokenService."""

    def __init__(self):
        self._store: Dict[str, str] = {}

    def setex(self, key: str, ttl_seconds: int, value: str) -> None:
        """Mimic Redis SETEX; TTL is ignored in tests."""
        self._store[key] = value

    def get(self, key: str):
        """Return stored value for key or None, matching Redis GET semantics."""
        return self._store.get(key)


class StepClock:
    """Deterministic clock advancing by ``step`` on every call."""

    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(minutes=1)):
        self.current = start or datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
        self.step = step

    def __call__(self) -> datetime:
        now = self.current
        self.current = self.current + self.step
        return now


def create_user(email: str, password: str = "Secret123", *roles: str, **extra):
    """Create a user holding exactly ``roles``."""

    user = User.objects.create(email=email, **extra)
    user.set_password(password)
    user.save()
    if roles:
        user.grant_roles(*roles)
    return user


def create_admin(email: str = "admin@test.com", password: str = "Secret123"):
    return create_user(email, password, RoleName.ADMIN, RoleName.USER)


def create_super_admin(email: str = "super@test.com", password: str = "Secret123"):
    return create_user(email, password, RoleName.SUPER_ADMIN, RoleName.ADMIN, RoleName.USER)


def create_article(title: str, description: str, service: ArticleService | None = None) -> Article:
    """Persist an article through the service so timestamps are stamped."""

    article = Article(title=title, description=description)
    (service or ArticleService()).create(article)
    return article
