from __future__ import annotations

from typing import List, Optional

from django.db.models import ProtectedError
from rest_framework import status

from apps.api.exceptions import Conflict, DomainError, Forbidden
from apps.api.policy import Identity
from apps.common import get_logger
from .dtos import UserDTO, user_to_dto
from .protocols import UserRepositoryProtocol

logger = get_logger(__name__).bind(component="users", layer="service")


class UserNotFoundError(DomainError):
    code = "USER_NOT_FOUND"
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "User not found"


class UserHasOrdersError(Conflict):
    default_message = "User still owns orders and cannot be removed"


class UserService:
    def __init__(self, users: UserRepositoryProtocol):
        self.users = users
        self.logger = logger.bind(service="UserService")

    def list_users(self) -> List[UserDTO]:
        self.logger.debug("Listing users")
        return [user_to_dto(u) for u in self.users.list()]

    def _require(self, user_id: int):
        user = self.users.get(id=user_id)
        if user is None:
            self.logger.info("User not found", user_id=user_id)
            raise UserNotFoundError(details={"user_id": str(user_id)})
        return user

    def remove_user(self, user_id: int) -> None:
        self.logger.info("Removing user", user_id=user_id)
        user = self._require(user_id)
        if self.users.has_orders(user):
            self.logger.warning("User removal blocked by orders", user_id=user_id)
            raise UserHasOrdersError(details={"user_id": str(user_id)})
        try:
            self.users.delete(user)
        except ProtectedError as exc:
            # An order placed between the check and the delete.
            self.logger.warning("User removal blocked by orders", user_id=user_id)
            raise UserHasOrdersError(details={"user_id": str(user_id)}) from exc
        self.logger.info("User removed", user_id=user_id)

    def get_role(self, identity: Optional[Identity]) -> str:
        role = getattr(identity, "role", None)
        if not role:
            self.logger.warning(
                "Role missing from session", user_id=getattr(identity, "id", None)
            )
            raise Forbidden("Access denied, no role found")
        return role

    def get_username(self, user_id: int) -> str:
        self.logger.debug("Fetching username", user_id=user_id)
        return self._require(user_id).name

    def get_profile_pic(self, user_id: int) -> str:
        self.logger.debug("Fetching profile picture", user_id=user_id)
        return self._require(user_id).profile_pic or ""
