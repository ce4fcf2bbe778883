from django.urls import path
from .views import (
    CartAddItemView,
    CartItemsView,
    CartRemoveAllView,
    CartRemoveItemView,
)

urlpatterns = [
    path("cart/add", CartAddItemView.as_view(), name="api-cart-add"),
    path("cart/remove", CartRemoveItemView.as_view(), name="api-cart-remove"),
    path("cart/removeAll", CartRemoveAllView.as_view(), name="api-cart-remove-all"),
    path("cart/getItems", CartItemsView.as_view(), name="api-cart-items"),
]
