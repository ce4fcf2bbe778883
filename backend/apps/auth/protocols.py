from __future__ import annotations

from typing import Any, Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from apps.users.models import User


class CredentialRepositoryProtocol(Protocol):
    using: str

    def email_exists(self, email: str) -> bool: ...

    def get(self, **filters) -> Optional["User"]: ...

    def get_by_email(self, email: str) -> Optional["User"]: ...

    def create_user(self, **data: Any) -> "User": ...

    def set_password(self, user: "User", raw_password: str) -> None: ...


class TokenServiceProtocol(Protocol):
    def issue(self, user_id: int, role: Optional[str]) -> str: ...
