import unittest
from decimal import Decimal
from apps.catalog.mappers import ProductMapper


class StubProduct:
    def __init__(self, product_id, name, category, price, stock=0, image=""):
        self.id = product_id
        self.name = name
        self.category = category
        self.price = price
        self.stock = stock
        self.image = image


class ProductMapperTests(unittest.TestCase):
    def test_price_is_rendered_as_string(self):
        dto = ProductMapper.to_dto(
            StubProduct(1, "Pixel 9", "phone", Decimal("799.00"), 4, "pixel.png")
        )
        self.assertEqual(dto.price, "799.00")
        self.assertEqual(dto.stock, 4)
        self.assertEqual(dto.image, "pixel.png")

    def test_many_to_dto_keeps_order(self):
        dtos = ProductMapper.many_to_dto(
            [
                StubProduct(2, "B", "laptop", Decimal("2.00")),
                StubProduct(1, "A", "tablet", Decimal("1.00")),
            ]
        )
        self.assertEqual([d.id for d in dtos], [2, 1])
