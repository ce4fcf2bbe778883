from __future__ import annotations

from datetime import timedelta
from typing import Optional

from django.conf import settings
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import AccessToken

from apps.api.exceptions import InvalidSessionToken
from apps.api.policy import Identity
from apps.common import get_logger

logger = get_logger(__name__).bind(component="auth", layer="tokens")

ID_CLAIM = "id"
ROLE_CLAIM = "role"


def session_lifetime() -> timedelta:
    return timedelta(days=int(getattr(settings, "SESSION_TOKEN_LIFETIME_DAYS", 365)))


class SessionTokenService:
    """Signs and verifies the ``{id, role}`` session token carried in the cookie."""

    def __init__(self, lifetime: Optional[timedelta] = None):
        self.lifetime = lifetime
        self.logger = logger.bind(service="SessionTokenService")

    def issue(self, user_id: int, role: Optional[str]) -> str:
        token = AccessToken()
        token.set_exp(lifetime=self.lifetime or session_lifetime())
        token[ID_CLAIM] = user_id
        token[ROLE_CLAIM] = role
        self.logger.debug("Session token issued", user_id=user_id, role=role)
        return str(token)

    def verify(self, raw: str) -> Identity:
        try:
            token = AccessToken(raw)
        except TokenError as exc:
            self.logger.warning("Session token rejected", error=str(exc))
            raise InvalidSessionToken() from exc
        user_id = token.get(ID_CLAIM)
        try:
            user_id = int(user_id)
        except (TypeError, ValueError):
            self.logger.warning("Session token carries no usable id claim")
            raise InvalidSessionToken()
        return Identity(id=user_id, role=token.get(ROLE_CLAIM))


__all__ = ["SessionTokenService", "session_lifetime", "ID_CLAIM", "ROLE_CLAIM"]
