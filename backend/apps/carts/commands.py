from dataclasses import dataclass
from typing import Any, Mapping

from apps.api.exceptions import MissingParameter


@dataclass
class CartItemCommand:
    product_id: int

    @staticmethod
    def from_raw(raw: Mapping[str, Any]) -> "CartItemCommand":
        pid = raw.get("product_id")
        if pid is None:
            pid = raw.get("productId")
        try:
            pid = int(pid) if pid not in (None, "") else None
        except (ValueError, TypeError):
            pid = None
        if not pid or pid <= 0:
            raise MissingParameter(
                "Product ID is required", details={"product_id": "required"}
            )
        return CartItemCommand(product_id=pid)
