import unittest

from apps.api.exceptions import MissingParameter
from apps.carts.commands import CartItemCommand


class CartItemCommandTests(unittest.TestCase):
    def test_accepts_snake_and_camel_case_keys(self):
        self.assertEqual(CartItemCommand.from_raw({"product_id": "5"}).product_id, 5)
        self.assertEqual(CartItemCommand.from_raw({"productId": 6}).product_id, 6)

    def test_missing_or_invalid_id_is_rejected(self):
        for raw in ({}, {"product_id": ""}, {"product_id": "abc"}, {"product_id": 0}):
            with self.assertRaises(MissingParameter) as ctx:
                CartItemCommand.from_raw(raw)
            self.assertEqual(ctx.exception.message, "Product ID is required")
