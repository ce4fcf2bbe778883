from django.db import DEFAULT_DB_ALIAS

from apps.common.repository import GenericRepository
from .models import Product


class ProductRepository(GenericRepository[Product]):
    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        super().__init__(Product, using=using)

    def list(self, **filters):  # type: ignore[override]
        return self.objects.filter(**filters).order_by("id")

    def list_by_category(self, category: str):
        return self.list(category=category)

    def search(self, query: str):
        """Case-insensitive substring match on the product name."""
        return self.objects.filter(name__icontains=query).order_by("id")
