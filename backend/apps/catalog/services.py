from __future__ import annotations

from typing import List, Optional

from django.db import DatabaseError

from apps.api.exceptions import MissingParameter
from apps.common import get_logger
from .commands import ProductCreateCommand
from .dtos import ProductDTO
from .mappers import ProductMapper
from .protocols import (
    CacheBackendProtocol,
    ImageStoreProtocol,
    ProductRepositoryProtocol,
)

logger = get_logger(__name__).bind(component="catalog", layer="service")


class ProductService:
    def __init__(
        self,
        products: ProductRepositoryProtocol,
        cache_backend: CacheBackendProtocol,
        images: Optional[ImageStoreProtocol] = None,
        disable_cache: bool = False,
    ):
        self.products = products
        self.cache = cache_backend
        self.images = images
        self.disable_cache = disable_cache
        self.logger = logger.bind(service="ProductService")
        # Caching keys
        self._cache_prefix = "products:list"
        self._cache_version_key = f"{self._cache_prefix}:version"
        self._default_version = 1

    def _get_cache_version(self) -> int:
        v = self.cache.get(self._cache_version_key)
        return v or self._default_version

    def _bump_cache_version(self) -> None:
        v = self._get_cache_version()
        # Version key should not expire
        self.cache.set(self._cache_version_key, v + 1, timeout=None)
        self.logger.debug("Bumped product cache version", new_version=v + 1)

    def _cache_key(self, category: Optional[str]) -> str:
        version = self._get_cache_version()
        return f"{self._cache_prefix}:v{version}:{category or 'all'}"

    def _query(self, category: Optional[str]):
        return (
            self.products.list_by_category(category)
            if category
            else self.products.list()
        )

    def list_products(self, category: Optional[str] = None) -> List[ProductDTO]:
        self.logger.debug(
            "Listing products",
            category=category,
            cache_enabled=not self.disable_cache,
        )
        if self.disable_cache:
            return ProductMapper.many_to_dto(self._query(category))
        # Read-through cache per category filter
        key = self._cache_key(category)
        cached = self.cache.get(key)
        if cached is not None:
            self.logger.debug("Product list cache hit", cache_key=key)
            return cached
        self.logger.debug("Product list cache miss", cache_key=key)
        data = ProductMapper.many_to_dto(self._query(category))
        self.cache.set(key, data)
        return data

    def search(self, query: Optional[str]) -> List[ProductDTO]:
        term = (query or "").strip()
        if not term:
            self.logger.info("Search rejected: blank query")
            raise MissingParameter("Search query is required", details={"query": term})
        self.logger.debug("Searching products", query=term)
        return ProductMapper.many_to_dto(self.products.search(term))

    def create_product(self, cmd: ProductCreateCommand) -> ProductDTO:
        self.logger.info("Creating product", name=cmd.name, category=cmd.category)
        image_name = self.images.save(cmd.image) if self.images else str(cmd.image)
        try:
            product = self.products.create(
                name=cmd.name,
                category=cmd.category,
                price=cmd.price,
                stock=cmd.stock,
                image=image_name,
            )
        except DatabaseError:
            # No row points at the stored file.
            if self.images:
                self.images.delete(image_name)
            raise
        self._bump_cache_version()
        self.logger.info("Product created", product_id=product.id)
        return ProductMapper.to_dto(product)
