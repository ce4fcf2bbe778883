from __future__ import annotations

from typing import Iterable, Optional, Protocol, Tuple, TYPE_CHECKING

from .models import Cart, CartItem

if TYPE_CHECKING:
    from apps.carts.dtos import CartItemDTO
    from apps.catalog.models import Product


class CartRepositoryProtocol(Protocol):
    using: str

    def get(self, **filters) -> Optional[Cart]:
        ...

    def lock(self, **filters) -> Optional[Cart]:
        ...

    def get_or_create_for_user(self, user_id: int) -> Tuple[Cart, bool]:
        ...


class CartItemRepositoryProtocol(Protocol):
    def get_line(self, cart_id: int, product_id: int) -> Optional[CartItem]:
        ...

    def create(self, **data) -> CartItem:
        ...

    def increment(self, item: CartItem) -> CartItem:
        ...

    def decrement(self, item: CartItem) -> CartItem:
        ...

    def delete(self, item: CartItem) -> None:
        ...

    def list_for_cart(self, cart_id: int) -> Iterable[CartItem]:
        ...


class ProductRepositoryProtocol(Protocol):
    def get(self, **filters) -> Optional["Product"]:
        ...


class CartItemMapperProtocol(Protocol):
    def to_dto(self, item: CartItem) -> "CartItemDTO":
        ...

    def many_to_dto(self, items: Iterable[CartItem]) -> list["CartItemDTO"]:
        ...
