import logging
from typing import Any, Dict, Optional

REDACTED = "***"
# Matched as key suffixes, so ``new_psw`` and ``session_token`` are covered too.
SECRET_SUFFIXES = ("password", "psw", "token", "secret")
EMAIL_KEYS = frozenset({"email"})


def _is_secret(key: str) -> bool:
    return key.lower().endswith(SECRET_SUFFIXES)


def mask_email(value: str) -> str:
    """Keep the first character and the domain: ``alice@example.com`` -> ``a***@example.com``."""
    local, sep, domain = value.partition("@")
    if not sep:
        return REDACTED
    return f"{local[:1]}{REDACTED}@{domain}"


def scrub(key: str, value: Any) -> Any:
    """Return ``value`` with secrets removed and customer emails masked, recursing into dicts."""
    if value is None:
        return None
    if _is_secret(key):
        return REDACTED
    if key.lower() in EMAIL_KEYS and isinstance(value, str):
        return mask_email(value)
    if isinstance(value, dict):
        return {k: scrub(str(k), v) for k, v in value.items()}
    return value


class AppLogger:
    """Stdlib logger with bound ``key=value`` context; customer secrets never reach the output."""

    def __init__(
        self,
        name: str,
        context: Optional[Dict[str, Any]] = None,
        _logger: Optional[logging.Logger] = None,
    ):
        self._logger = _logger or logging.getLogger(name)
        self._name = name
        self._context = context or {}

    @property
    def context(self) -> Dict[str, Any]:
        return dict(self._context)

    def bind(self, **extra: Any) -> "AppLogger":
        return AppLogger(self._name, {**self._context, **extra}, _logger=self._logger)

    def debug(self, message: str, **context: Any) -> None:
        self._emit(logging.DEBUG, message, context)

    def info(self, message: str, **context: Any) -> None:
        self._emit(logging.INFO, message, context)

    def warning(self, message: str, **context: Any) -> None:
        self._emit(logging.WARNING, message, context)

    def error(self, message: str, **context: Any) -> None:
        self._emit(logging.ERROR, message, context)

    def exception(self, message: str, **context: Any) -> None:
        """Log at ERROR with the active traceback attached."""
        self._emit(logging.ERROR, message, context, exc_info=True)

    def _emit(self, level: int, message: str, context: Dict[str, Any], exc_info: bool = False) -> None:
        if not self._logger.isEnabledFor(level):
            return
        self._logger.log(
            level, self.render(message, {**self._context, **context}), exc_info=exc_info
        )

    @staticmethod
    def render(message: str, context: Dict[str, Any]) -> str:
        if not context:
            return message
        pairs = []
        for key, value in context.items():
            value = scrub(key, value)
            if not isinstance(value, (str, int, float, bool)) and value is not None:
                value = repr(value)
            pairs.append(f"{key}={value}")
        return f"{message} | {' '.join(pairs)}"


def get_logger(name: str) -> AppLogger:
    return AppLogger(name)
