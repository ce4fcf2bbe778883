from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Protocol

from .models import Order, OrderItem


class OrderRepositoryProtocol(Protocol):
    using: str

    def create(self, **data) -> Order:
        ...

    def get(self, **filters) -> Optional[Order]:
        ...

    def lock(self, **filters) -> Optional[Order]:
        ...

    def update(self, order: Order, **data) -> Order:
        ...

    def delete(self, order: Order) -> None:
        ...

    def list_with_user(self, **filters) -> Iterable[Order]:
        ...


class OrderItemRepositoryProtocol(Protocol):
    def create_many(self, order: Order, rows: List[Dict[str, Any]]) -> List[OrderItem]:
        ...

    def delete_for_order(self, order_id: int) -> int:
        ...

    def list_with_product(self, **filters) -> Iterable[OrderItem]:
        ...


class CartRepositoryProtocol(Protocol):
    def lock(self, **filters) -> Optional[Any]:
        ...


class CartItemRepositoryProtocol(Protocol):
    def list_for_cart(self, cart_id: int) -> Iterable[Any]:
        ...

    def delete_for_cart(self, cart_id: int) -> int:
        ...
