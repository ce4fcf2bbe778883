from typing import Iterable, List

from .dtos import OrderDTO, OrderLineDTO, OrderSummaryDTO
from .models import Order, OrderItem


def _iso(value) -> str:
    try:
        return value.isoformat()
    except AttributeError:
        return str(value)


class OrderMapper:
    @staticmethod
    def line_to_dto(item: OrderItem) -> OrderLineDTO:
        return OrderLineDTO(
            order_id=item.order_id,
            product_id=item.product_id,
            product_name=item.product.name,
            quantity=item.quantity,
            unit_price=str(item.unit_price),
        )

    @staticmethod
    def lines_to_dto(items: Iterable[OrderItem]) -> List[OrderLineDTO]:
        return [OrderMapper.line_to_dto(i) for i in items]

    @staticmethod
    def summary_to_dto(order: Order) -> OrderSummaryDTO:
        return OrderSummaryDTO(
            order_id=order.id,
            created_at=_iso(order.created_at),
            total_amount=str(order.total_amount),
            user_name=order.user.name,
            city=order.city,
            address=order.address,
            postcode=order.postcode,
            tel=order.tel,
        )

    @staticmethod
    def summaries_to_dto(orders: Iterable[Order]) -> List[OrderSummaryDTO]:
        return [OrderMapper.summary_to_dto(o) for o in orders]

    @staticmethod
    def to_dto(order: Order, items: Iterable[OrderItem]) -> OrderDTO:
        return OrderDTO(
            id=order.id,
            user_id=order.user_id,
            created_at=_iso(order.created_at),
            total_amount=str(order.total_amount),
            city=order.city,
            address=order.address,
            postcode=order.postcode,
            tel=order.tel,
            items=OrderMapper.lines_to_dto(items),
        )
