"""Bearer tokens for the JSON API: JWT issuance, decoding and a Redis blocklist."""

import logging
import time
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
import redis
from django.conf import settings
from rest_framework.exceptions import AuthenticationFailed

logger = logging.getLogger(__name__)

_client: redis.Redis | None = None


class BlocklistUnavailable(Exception):
    """Raised when the Redis blocklist cannot be reached (fail-closed)."""


def get_redis_client() -> redis.Redis:
    """Return a process-wide Redis client built from ``settings.REDIS_URL``."""

    global _client
    if _client is None:
        _client = redis.Redis.from_url(settings.REDIS_URL, decode_responses=True, socket_timeout=2)
    return _client


class TokenService:
    """Issue and validate access tokens; revoke them through the blocklist."""

    ALGORITHM = "HS256"
    TOKEN_TYPE = "access"
    BLOCKLIST_PREFIX = "blocklist:token:"

    @classmethod
    def access_ttl(cls) -> timedelta:
        return timedelta(minutes=settings.JWT_ACCESS_TTL_MINUTES)

    @classmethod
    def generate_token(cls, user) -> str:
        """Return a signed access token carrying the user's id and role tags."""

        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(user.pk),
            "jti": uuid.uuid4().hex,
            "iat": int(now.timestamp()),
            "exp": int((now + cls.access_ttl()).timestamp()),
            "roles": sorted(user.get_roles()),
            "type": cls.TOKEN_TYPE,
        }
        return jwt.encode(payload, settings.SECRET_KEY, algorithm=cls.ALGORITHM)

    @classmethod
    def decode_token(cls, token: str) -> dict[str, Any]:
        """Decode and validate an access token."""

        try:
            payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[cls.ALGORITHM])
        except jwt.ExpiredSignatureError as exc:
            raise AuthenticationFailed("Token has expired") from exc
        except jwt.InvalidTokenError as exc:
            raise AuthenticationFailed("Invalid token") from exc

        if payload.get("type") != cls.TOKEN_TYPE:
            raise AuthenticationFailed("Invalid token type")
        if not payload.get("jti"):
            raise AuthenticationFailed("Invalid token")
        return payload

    @classmethod
    def block_token(cls, jti: str, exp: int) -> None:
        """Blocklist a token id until its expiry."""

        ttl_seconds = max(1, exp - int(time.time()))
        try:
            get_redis_client().setex(f"{cls.BLOCKLIST_PREFIX}{jti}", ttl_seconds, "1")
        except redis.RedisError as exc:
            logger.error("Token blocklist write failed: %s", exc)
            raise BlocklistUnavailable("Redis unavailable while blocklisting") from exc

    @classmethod
    def is_token_blocked(cls, jti: str) -> bool:
        """Return True when the token id has been revoked."""

        try:
            return get_redis_client().get(f"{cls.BLOCKLIST_PREFIX}{jti}") is not None
        except redis.RedisError as exc:
            logger.error("Token blocklist read failed: %s", exc)
            raise BlocklistUnavailable("Redis unavailable while checking blocklist") from exc


__all__ = ["BlocklistUnavailable", "TokenService", "get_redis_client"]
