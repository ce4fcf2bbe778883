from django.urls import path
from .views import (
    AllOrderItemsView,
    AllOrdersView,
    CreateOrderView,
    DeleteOrderView,
    OrderedItemsView,
    OwnOrdersView,
)

urlpatterns = [
    path("createOrder", CreateOrderView.as_view(), name="api-create-order"),
    path("deleteOrder/<int:order_id>", DeleteOrderView.as_view(), name="api-delete-order"),
    path("getAllOrders", AllOrdersView.as_view(), name="api-all-orders"),
    path("getAllOrdersItems", AllOrderItemsView.as_view(), name="api-all-order-items"),
    path("orderGet", OwnOrdersView.as_view(), name="api-own-orders"),
    path("orderedItems/<int:order_id>", OrderedItemsView.as_view(), name="api-ordered-items"),
]
