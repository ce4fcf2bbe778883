from typing import Iterable, List
from .models import CartItem
from .dtos import CartItemDTO


class CartItemMapper:
    def to_dto(self, item: CartItem) -> CartItemDTO:
        product = item.product
        return CartItemDTO(
            cart_item_id=item.id,
            product_id=item.product_id,
            quantity=item.quantity,
            name=product.name,
            price=str(product.price),
            image=product.image,
        )

    def many_to_dto(self, items: Iterable[CartItem]) -> List[CartItemDTO]:
        return [self.to_dto(i) for i in items]
