from typing import Any, Dict, Mapping, Optional

from django.conf import settings
from django.http import HttpRequest

from apps.api.exceptions import ApplicationError, Unauthenticated
from apps.api.policy import Action, Identity, authorize
from apps.auth.tokens import SessionTokenService
from apps.common import get_logger

logger = get_logger(__name__).bind(component="api", layer="gate")


def cookie_name() -> str:
    return getattr(settings, "SESSION_COOKIE_NAME_TOKEN", "auth_token")


class AccessGate:
    """Resolves the caller behind a request from its session cookie."""

    def __init__(self, tokens: Optional[SessionTokenService] = None):
        self.tokens = tokens or SessionTokenService()

    def resolve(self, request: HttpRequest) -> Identity:
        raw = request.COOKIES.get(cookie_name())
        if not raw:
            raise Unauthenticated()
        return self.tokens.verify(raw)


_default_gate = AccessGate()


def required_action(view_class: Any, method: Optional[str]) -> Optional[Action]:
    access: Mapping[str, Action] = getattr(view_class, "access", None) or {}
    return access.get((method or "").upper())


def gate_request(
    request: HttpRequest,
    view_class: Any,
    view_kwargs: Dict[str, Any],
    gate: Optional[AccessGate] = None,
):
    """
    Gate one request against the view's ``access`` mapping.

    Returns ``None`` when the request may proceed (with ``request.identity``
    attached for gated methods) or a rendered JSON error response.
    """
    method = getattr(request, "method", None)
    action = required_action(view_class, method)
    if action is None:
        return None
    view_name = getattr(view_class, "__name__", str(view_class))
    gate = gate or _default_gate
    try:
        identity = gate.resolve(request)
        authorize(identity, action)
    except ApplicationError as exc:
        logger.warning(
            "Request rejected by access gate",
            view=view_name,
            method=method,
            action=action.value,
            code=exc.code,
        )
        return exc.to_json_response()
    request.identity = identity
    logger.debug(
        "Request admitted by access gate",
        view=view_name,
        method=method,
        action=action.value,
        user_id=identity.id,
    )
    return None


__all__ = ["AccessGate", "cookie_name", "gate_request", "required_action"]
