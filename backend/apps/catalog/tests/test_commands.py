import unittest
from decimal import Decimal

from apps.catalog.commands import ProductCreateCommand


class ProductCreateCommandTests(unittest.TestCase):
    def test_from_validated_maps_form_fields(self):
        upload = object()
        cmd = ProductCreateCommand.from_validated(
            {
                "itemName": "  MacBook Air 13 ",
                "itemCategory": "laptop",
                "itemPrice": Decimal("1199.00"),
                "stock": 10,
                "image": upload,
            }
        )
        self.assertEqual(cmd.name, "MacBook Air 13")
        self.assertEqual(cmd.category, "laptop")
        self.assertEqual(cmd.price, Decimal("1199.00"))
        self.assertEqual(cmd.stock, 10)
        self.assertIs(cmd.image, upload)
