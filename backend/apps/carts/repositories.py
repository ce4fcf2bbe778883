from django.db import DEFAULT_DB_ALIAS, IntegrityError, transaction
from django.db.models import F

from apps.common.repository import GenericRepository
from .models import Cart, CartItem


class CartRepository(GenericRepository[Cart]):
    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        super().__init__(Cart, using=using)

    def get_or_create_for_user(self, user_id: int):
        existing = self.get(user_id=user_id)
        if existing:
            return existing, False
        try:
            with transaction.atomic(using=self.using):
                return self.create(user_id=user_id), True
        except IntegrityError:
            # A concurrent request created the cart between the read and the insert.
            cart = self.get(user_id=user_id)
            if cart is None:
                raise
            return cart, False


class CartItemRepository(GenericRepository[CartItem]):
    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        super().__init__(CartItem, using=using)

    def get_line(self, cart_id: int, product_id: int):
        return self.get(cart_id=cart_id, product_id=product_id)

    def _shift(self, item: CartItem, delta: int) -> CartItem:
        self.objects.filter(pk=item.pk).update(quantity=F("quantity") + delta)
        item.refresh_from_db(using=self.using, fields=["quantity"])
        return item

    def increment(self, item: CartItem) -> CartItem:
        return self._shift(item, 1)

    def decrement(self, item: CartItem) -> CartItem:
        return self._shift(item, -1)

    def list_for_cart(self, cart_id: int):
        return (
            self.objects.filter(cart_id=cart_id)
            .select_related("product")
            .order_by("id")
        )

    def delete_for_cart(self, cart_id: int) -> int:
        deleted, _ = self.objects.filter(cart_id=cart_id).delete()
        return deleted
