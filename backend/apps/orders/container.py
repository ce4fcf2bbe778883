from __future__ import annotations

from django.db import DEFAULT_DB_ALIAS

from apps.carts.repositories import CartItemRepository, CartRepository

from .repositories import OrderItemRepository, OrderRepository
from .services import OrderService


def build_order_service(using: str = DEFAULT_DB_ALIAS) -> OrderService:
    return OrderService(
        orders=OrderRepository(using=using),
        order_items=OrderItemRepository(using=using),
        carts=CartRepository(using=using),
        cart_items=CartItemRepository(using=using),
    )
