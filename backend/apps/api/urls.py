from django.urls import path, include

# Flat paths kept compatible with the existing storefront client.
urlpatterns = [
    path("", include("apps.catalog.urls")),
    path("", include("apps.auth.urls")),
    path("", include("apps.users.urls")),
    path("", include("apps.carts.urls")),
    path("", include("apps.orders.urls")),
]
