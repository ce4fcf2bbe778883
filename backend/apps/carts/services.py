from __future__ import annotations

from typing import List

from django.db import transaction
from rest_framework import status

from apps.api.exceptions import DomainError
from apps.common import get_logger
from .dtos import CartChangeDTO, CartItemDTO
from .protocols import (
    CartItemMapperProtocol,
    CartItemRepositoryProtocol,
    CartRepositoryProtocol,
    ProductRepositoryProtocol,
)

logger = get_logger(__name__).bind(component="carts", layer="service")


class ProductNotFoundError(DomainError):
    code = "PRODUCT_NOT_FOUND"
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Product not found"


class CartNotFoundError(DomainError):
    code = "CART_NOT_FOUND"
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "No cart found for user"


class ItemNotInCartError(DomainError):
    code = "ITEM_NOT_IN_CART"
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Product not found in cart"


class CartService:
    """
    Per-user cart lifecycle.

    Every read-modify-write on a cart's lines runs inside one transaction that
    holds the cart row lock, so concurrent adds and removes for the same user
    are applied one after another.
    """

    def __init__(
        self,
        carts: CartRepositoryProtocol,
        items: CartItemRepositoryProtocol,
        products: ProductRepositoryProtocol,
        item_mapper: CartItemMapperProtocol,
    ):
        self.carts = carts
        self.items = items
        self.products = products
        self.item_mapper = item_mapper
        self.logger = logger.bind(service="CartService")

    def add_item(self, user_id: int, product_id: int) -> CartChangeDTO:
        self.logger.debug("Adding item to cart", user_id=user_id, product_id=product_id)
        if not self.products.get(id=product_id):
            self.logger.info("Add rejected: unknown product", product_id=product_id)
            raise ProductNotFoundError(details={"product_id": str(product_id)})
        cart, created = self.carts.get_or_create_for_user(user_id)
        if created:
            self.logger.info("Cart created lazily", user_id=user_id, cart_id=cart.id)
        with transaction.atomic(using=self.carts.using):
            self.carts.lock(id=cart.id)
            line = self.items.get_line(cart.id, product_id)
            if line is not None:
                line = self.items.increment(line)
                message = "Item quantity updated"
            else:
                line = self.items.create(cart_id=cart.id, product_id=product_id, quantity=1)
                message = "Item added to cart"
        self.logger.info(
            message,
            user_id=user_id,
            cart_id=cart.id,
            product_id=product_id,
            quantity=line.quantity,
        )
        return CartChangeDTO(message=message, product_id=product_id, quantity=line.quantity)

    def _locked_line(self, user_id: int, product_id: int):
        cart = self.carts.lock(user_id=user_id)
        if cart is None:
            self.logger.info("No cart for user", user_id=user_id)
            raise CartNotFoundError(details={"user_id": str(user_id)})
        line = self.items.get_line(cart.id, product_id)
        if line is None:
            self.logger.info(
                "Product not in cart", user_id=user_id, product_id=product_id
            )
            raise ItemNotInCartError(details={"product_id": str(product_id)})
        return cart, line

    def remove_item(self, user_id: int, product_id: int) -> CartChangeDTO:
        """Take one unit off the line; the last unit deletes the line."""
        with transaction.atomic(using=self.carts.using):
            cart, line = self._locked_line(user_id, product_id)
            if line.quantity > 1:
                line = self.items.decrement(line)
                result = CartChangeDTO(
                    message="Item quantity decreased",
                    product_id=product_id,
                    quantity=line.quantity,
                )
            else:
                self.items.delete(line)
                result = CartChangeDTO(
                    message="Item removed from cart", product_id=product_id, quantity=0
                )
        self.logger.info(
            result.message,
            user_id=user_id,
            cart_id=cart.id,
            product_id=product_id,
            quantity=result.quantity,
        )
        return result

    def remove_all(self, user_id: int, product_id: int) -> CartChangeDTO:
        """Delete the whole line regardless of its quantity."""
        with transaction.atomic(using=self.carts.using):
            cart, line = self._locked_line(user_id, product_id)
            removed = line.quantity
            self.items.delete(line)
        self.logger.info(
            "Line removed from cart",
            user_id=user_id,
            cart_id=cart.id,
            product_id=product_id,
            removed=removed,
        )
        return CartChangeDTO(
            message="Item removed from cart", product_id=product_id, quantity=0
        )

    def list_items(self, user_id: int) -> List[CartItemDTO]:
        cart = self.carts.get(user_id=user_id)
        if cart is None:
            self.logger.debug("Listing items: user has no cart yet", user_id=user_id)
            return []
        items = self.item_mapper.many_to_dto(self.items.list_for_cart(cart.id))
        self.logger.debug("Listing cart items", user_id=user_id, count=len(items))
        return items
