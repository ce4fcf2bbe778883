from django.urls import path
from .views import (
    LaptopListView,
    PhoneListView,
    ProductCreateView,
    ProductListView,
    ProductSearchView,
    TabletListView,
)

urlpatterns = [
    path("getProducts", ProductListView.as_view(), name="api-products"),
    path("getPhones", PhoneListView.as_view(), name="api-phones"),
    path("getTablets", TabletListView.as_view(), name="api-tablets"),
    path("getLaptops", LaptopListView.as_view(), name="api-laptops"),
    path("search/<str:search_query>", ProductSearchView.as_view(), name="api-search"),
    path("addItem", ProductCreateView.as_view(), name="api-add-item"),
]
