from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from apps.api.exceptions import Forbidden
from apps.common import get_logger

logger = get_logger(__name__).bind(component="api", layer="policy")

ROLE_CUSTOMER = "customer"
ROLE_ADMIN = "admin"


@dataclass(frozen=True)
class Identity:
    """Caller resolved from a verified session token."""

    id: int
    role: Optional[str] = ROLE_CUSTOMER

    is_authenticated = True

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN


class Action(str, Enum):
    SEARCH_CATALOG = "search_catalog"
    CREATE_PRODUCT = "create_product"
    READ_PROFILE = "read_profile"
    UPDATE_PASSWORD = "update_password"
    MANAGE_CART = "manage_cart"
    PLACE_ORDER = "place_order"
    DELETE_ORDER = "delete_order"
    VIEW_ORDER_ITEMS = "view_order_items"
    LIST_OWN_ORDERS = "list_own_orders"
    LIST_ALL_ORDERS = "list_all_orders"
    LIST_ALL_ORDER_ITEMS = "list_all_order_items"
    LIST_USERS = "list_users"
    REMOVE_USER = "remove_user"


ADMIN_ONLY = frozenset(
    {
        Action.CREATE_PRODUCT,
        Action.LIST_ALL_ORDERS,
        Action.LIST_ALL_ORDER_ITEMS,
        Action.LIST_USERS,
        Action.REMOVE_USER,
    }
)

OWNER_OR_ADMIN = frozenset({Action.DELETE_ORDER, Action.VIEW_ORDER_ITEMS})


def _owner_id(resource: Any) -> Optional[int]:
    if resource is None:
        return None
    if isinstance(resource, int):
        return resource
    owner = getattr(resource, "user_id", None)
    if owner is None:
        owner = getattr(resource, "owner_id", None)
    return owner


def authorize(identity: Optional[Identity], action: Action, resource: Any = None) -> None:
    """
    Single role policy for every gated action.

    ``resource`` is only consulted for owner-or-admin actions; it may be an
    owner id or any object exposing ``user_id``. Raises ``Forbidden`` when the
    identity may not perform ``action``.
    """
    if identity is None:
        raise Forbidden()
    if action in ADMIN_ONLY:
        if not identity.is_admin:
            logger.warning(
                "Admin action denied", action=action.value, user_id=identity.id
            )
            raise Forbidden()
        return
    if action in OWNER_OR_ADMIN and resource is not None:
        if identity.is_admin:
            return
        if _owner_id(resource) != identity.id:
            logger.warning(
                "Owner action denied", action=action.value, user_id=identity.id
            )
            raise Forbidden()


__all__ = [
    "Action",
    "Identity",
    "ROLE_ADMIN",
    "ROLE_CUSTOMER",
    "authorize",
]
