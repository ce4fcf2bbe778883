from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict


@dataclass
class ProductCreateCommand:
    name: str
    category: str
    price: Decimal
    stock: int
    image: Any

    @staticmethod
    def from_validated(data: Dict[str, Any]) -> "ProductCreateCommand":
        return ProductCreateCommand(
            name=data["itemName"].strip(),
            category=data["itemCategory"],
            price=data["itemPrice"],
            stock=data["stock"],
            image=data["image"],
        )
