from dataclasses import dataclass


@dataclass
class CartItemDTO:
    cart_item_id: int
    product_id: int
    quantity: int
    name: str
    price: str
    image: str


@dataclass
class CartChangeDTO:
    """Outcome of one cart mutation; ``quantity`` is 0 once the line is gone."""

    message: str
    product_id: int
    quantity: int
