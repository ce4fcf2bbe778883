from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from django.db import transaction
from rest_framework import status

from apps.api.exceptions import DomainError, ResourceNotFound
from apps.api.policy import Action, Identity, authorize
from apps.carts.services import CartNotFoundError
from apps.common import get_logger
from .commands import DeliveryCommand
from .dtos import OrderDTO, OrderLineDTO, OrderSummaryDTO
from .mappers import OrderMapper
from .protocols import (
    CartItemRepositoryProtocol,
    CartRepositoryProtocol,
    OrderItemRepositoryProtocol,
    OrderRepositoryProtocol,
)

logger = get_logger(__name__).bind(component="orders", layer="service")


class EmptyCartError(DomainError):
    code = "EMPTY_CART"
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "The cart is empty"


class OrderNotFoundError(DomainError):
    code = "ORDER_NOT_FOUND"
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Order not found"


class OrderService:
    def __init__(
        self,
        orders: OrderRepositoryProtocol,
        order_items: OrderItemRepositoryProtocol,
        carts: CartRepositoryProtocol,
        cart_items: CartItemRepositoryProtocol,
    ):
        self.orders = orders
        self.order_items = order_items
        self.carts = carts
        self.cart_items = cart_items
        self.logger = logger.bind(service="OrderService")

    def create_order(
        self,
        user_id: int,
        delivery: DeliveryCommand,
        cart_id: Optional[int] = None,
    ) -> OrderDTO:
        """
        Convert the caller's cart into an order.

        Runs as one transaction with the cart row locked: either the order, its
        items, its total and the emptied cart all land, or nothing does.
        """
        self.logger.info("Creating order", user_id=user_id, cart_id=cart_id)
        with transaction.atomic(using=self.orders.using):
            filters = {"user_id": user_id}
            if cart_id is not None:
                filters["id"] = cart_id
            cart = self.carts.lock(**filters)
            if cart is None:
                self.logger.info("Order rejected: no such cart", user_id=user_id, cart_id=cart_id)
                raise CartNotFoundError(
                    "No such cart", details={"cart_id": str(cart_id) if cart_id else None}
                )
            order = self.orders.create(
                user_id=user_id, total_amount=Decimal("0.00"), **delivery.as_fields()
            )
            lines = list(self.cart_items.list_for_cart(cart.id))
            if not lines:
                self.logger.info("Order rejected: empty cart", user_id=user_id, cart_id=cart.id)
                raise EmptyCartError(details={"cart_id": str(cart.id)})
            rows = [
                {
                    "product": line.product,
                    "quantity": line.quantity,
                    "unit_price": line.product.price,
                }
                for line in lines
            ]
            items = self.order_items.create_many(order, rows)
            total = sum(
                (row["unit_price"] * row["quantity"] for row in rows), Decimal("0.00")
            )
            order = self.orders.update(order, total_amount=total)
            cleared = self.cart_items.delete_for_cart(cart.id)
        self.logger.info(
            "Order created",
            user_id=user_id,
            order_id=order.id,
            items=len(items),
            total=str(total),
            cleared_lines=cleared,
        )
        return OrderMapper.to_dto(order, items)

    def delete_order(self, identity: Identity, order_id: int) -> None:
        self.logger.info("Deleting order", order_id=order_id, actor_id=identity.id)
        with transaction.atomic(using=self.orders.using):
            order = self.orders.lock(id=order_id)
            if order is None:
                self.logger.info("Order delete: not found", order_id=order_id)
                raise OrderNotFoundError(details={"order_id": str(order_id)})
            authorize(identity, Action.DELETE_ORDER, order)
            removed = self.order_items.delete_for_order(order.id)
            self.orders.delete(order)
        self.logger.info("Order deleted", order_id=order_id, removed_items=removed)

    def list_orders(self) -> List[OrderSummaryDTO]:
        data = OrderMapper.summaries_to_dto(self.orders.list_with_user())
        if not data:
            raise ResourceNotFound("No orders yet")
        self.logger.debug("Listing all orders", count=len(data))
        return data

    def list_order_items(self) -> List[OrderLineDTO]:
        data = OrderMapper.lines_to_dto(self.order_items.list_with_product())
        if not data:
            raise ResourceNotFound("No order items yet")
        self.logger.debug("Listing all order items", count=len(data))
        return data

    def list_orders_for_user(self, user_id: int) -> List[OrderSummaryDTO]:
        data = OrderMapper.summaries_to_dto(self.orders.list_with_user(user_id=user_id))
        if not data:
            raise ResourceNotFound("No orders yet")
        self.logger.debug("Listing orders for user", user_id=user_id, count=len(data))
        return data

    def list_items_for_order(self, identity: Identity, order_id: int) -> List[OrderLineDTO]:
        order = self.orders.get(id=order_id)
        if order is None:
            raise OrderNotFoundError(details={"order_id": str(order_id)})
        authorize(identity, Action.VIEW_ORDER_ITEMS, order)
        data = OrderMapper.lines_to_dto(self.order_items.list_with_product(order_id=order.id))
        if not data:
            raise ResourceNotFound("No ordered items yet")
        return data
