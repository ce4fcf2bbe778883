from __future__ import annotations

from django.core.cache import cache
from django.db import DEFAULT_DB_ALIAS

from .repositories import ProductRepository
from .services import ProductService
from .uploads import ProductImageStore


def build_product_service(
    *, using: str = DEFAULT_DB_ALIAS, disable_cache: bool = False
) -> ProductService:
    return ProductService(
        products=ProductRepository(using=using),
        cache_backend=cache,
        images=ProductImageStore(),
        disable_cache=disable_cache,
    )
