import unittest
from unittest.mock import Mock, patch

from rest_framework import status
from rest_framework.test import APIRequestFactory

from apps.api.gate import AccessGate, gate_request
from apps.api.policy import Identity
from apps.carts.dtos import CartChangeDTO, CartItemDTO
from apps.carts.services import CartNotFoundError, ProductNotFoundError
from apps.carts.views import (
    CartAddItemView,
    CartItemsView,
    CartRemoveAllView,
    CartRemoveItemView,
)


class StubTokens:
    def verify(self, raw):
        return Identity(id=int(raw))


class CartViewsUnitTests(unittest.TestCase):
    def setUp(self):
        self.factory = APIRequestFactory()
        self.gate = AccessGate(tokens=StubTokens())

    def dispatch(self, request, view_cls, token=None, **kwargs):
        if token:
            request.COOKIES["auth_token"] = token
        pre_response = gate_request(request, view_cls, kwargs, gate=self.gate)
        if pre_response is not None:
            return pre_response
        return view_cls.as_view()(request, **kwargs)

    def test_every_cart_view_requires_session(self):
        for view_cls in (CartAddItemView, CartRemoveItemView, CartRemoveAllView):
            response = self.dispatch(
                self.factory.post("/api/cart", {"product_id": 1}, format="json"), view_cls
            )
            self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        response = self.dispatch(self.factory.get("/api/cart/getItems"), CartItemsView)
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_add_uses_session_user(self):
        service = Mock()
        service.add_item.return_value = CartChangeDTO("Item added to cart", 1, 1)
        request = self.factory.post("/api/cart/add", {"product_id": 1}, format="json")
        with patch.object(CartAddItemView, "service", service):
            response = self.dispatch(request, CartAddItemView, token="10")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["message"], "Item added to cart")
        service.add_item.assert_called_once_with(10, 1)

    def test_add_without_product_id(self):
        service = Mock()
        request = self.factory.post("/api/cart/add", {}, format="json")
        with patch.object(CartAddItemView, "service", service):
            response = self.dispatch(request, CartAddItemView, token="10")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"]["message"], "Product ID is required")
        service.add_item.assert_not_called()

    def test_add_unknown_product(self):
        service = Mock()
        service.add_item.side_effect = ProductNotFoundError()
        request = self.factory.post("/api/cart/add", {"product_id": 99}, format="json")
        with patch.object(CartAddItemView, "service", service):
            response = self.dispatch(request, CartAddItemView, token="10")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_remove_without_cart(self):
        service = Mock()
        service.remove_item.side_effect = CartNotFoundError()
        request = self.factory.post("/api/cart/remove", {"productId": 1}, format="json")
        with patch.object(CartRemoveItemView, "service", service):
            response = self.dispatch(request, CartRemoveItemView, token="10")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error"]["code"], "CART_NOT_FOUND")

    def test_remove_all(self):
        service = Mock()
        service.remove_all.return_value = CartChangeDTO("Item removed from cart", 1, 0)
        request = self.factory.post("/api/cart/removeAll", {"product_id": 1}, format="json")
        with patch.object(CartRemoveAllView, "service", service):
            response = self.dispatch(request, CartRemoveAllView, token="10")
        self.assertEqual(response.data["quantity"], 0)
        service.remove_all.assert_called_once_with(10, 1)

    def test_get_items(self):
        service = Mock()
        service.list_items.return_value = [
            CartItemDTO(5, 1, 2, "Pixel 9", "799.00", "p.png")
        ]
        with patch.object(CartItemsView, "service", service):
            response = self.dispatch(
                self.factory.get("/api/cart/getItems"), CartItemsView, token="10"
            )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data[0]["quantity"], 2)
        self.assertEqual(response.data[0]["price"], "799.00")
