from __future__ import annotations

from django.db import DEFAULT_DB_ALIAS

from apps.catalog.repositories import ProductRepository

from .mappers import CartItemMapper
from .repositories import CartItemRepository, CartRepository
from .services import CartService


def build_cart_service(using: str = DEFAULT_DB_ALIAS) -> CartService:
    return CartService(
        carts=CartRepository(using=using),
        items=CartItemRepository(using=using),
        products=ProductRepository(using=using),
        item_mapper=CartItemMapper(),
    )
