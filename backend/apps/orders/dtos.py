from dataclasses import dataclass, field
from typing import List


@dataclass
class OrderLineDTO:
    order_id: int
    product_id: int
    product_name: str
    quantity: int
    unit_price: str


@dataclass
class OrderSummaryDTO:
    order_id: int
    created_at: str
    total_amount: str
    user_name: str
    city: str
    address: str
    postcode: str
    tel: str


@dataclass
class OrderDTO:
    id: int
    user_id: int
    created_at: str
    total_amount: str
    city: str
    address: str
    postcode: str
    tel: str
    items: List[OrderLineDTO] = field(default_factory=list)
