from django.db import DEFAULT_DB_ALIAS

from apps.common.repository import GenericRepository
from .models import Order, OrderItem


class OrderRepository(GenericRepository[Order]):
    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        super().__init__(Order, using=using)

    def list_with_user(self, **filters):
        """Newest first, owner joined in for the display name."""
        return (
            self.objects.filter(**filters)
            .select_related("user")
            .order_by("-created_at", "-id")
        )


class OrderItemRepository(GenericRepository[OrderItem]):
    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        super().__init__(OrderItem, using=using)

    def create_many(self, order: Order, rows):
        items = [OrderItem(order=order, **row) for row in rows]
        return self.objects.bulk_create(items)

    def delete_for_order(self, order_id: int) -> int:
        deleted, _ = self.objects.filter(order_id=order_id).delete()
        return deleted

    def list_with_product(self, **filters):
        return (
            self.objects.filter(**filters)
            .select_related("product")
            .order_by("order_id", "id")
        )
