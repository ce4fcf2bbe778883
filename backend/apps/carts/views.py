from rest_framework.views import APIView
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiResponse

from apps.api.policy import Action
from apps.api.schemas import ErrorResponseSerializer
from apps.common import get_logger
from .commands import CartItemCommand
from .container import build_cart_service
from .serializers import (
    CartChangeSerializer,
    CartItemRequestSerializer,
    CartItemSerializer,
)

logger = get_logger(__name__).bind(component="carts", layer="view")

_MUTATION_RESPONSES = {
    200: CartChangeSerializer,
    400: OpenApiResponse(response=ErrorResponseSerializer),
    403: OpenApiResponse(response=ErrorResponseSerializer),
    404: OpenApiResponse(response=ErrorResponseSerializer),
}


@extend_schema(tags=["Cart"])
class CartAddItemView(APIView):
    access = {"POST": Action.MANAGE_CART}
    service = build_cart_service()
    log = logger.bind(view="CartAddItemView")

    @extend_schema(
        summary="Add one unit of a product to the cart",
        request=CartItemRequestSerializer,
        responses=_MUTATION_RESPONSES,
    )
    def post(self, request):
        cmd = CartItemCommand.from_raw(request.data)
        self.log.debug(
            "Add to cart requested", user_id=request.identity.id, product_id=cmd.product_id
        )
        result = self.service.add_item(request.identity.id, cmd.product_id)
        return Response(CartChangeSerializer(result).data)


@extend_schema(tags=["Cart"])
class CartRemoveItemView(APIView):
    access = {"POST": Action.MANAGE_CART}
    service = build_cart_service()
    log = logger.bind(view="CartRemoveItemView")

    @extend_schema(
        summary="Remove one unit of a product from the cart",
        request=CartItemRequestSerializer,
        responses=_MUTATION_RESPONSES,
    )
    def post(self, request):
        cmd = CartItemCommand.from_raw(request.data)
        result = self.service.remove_item(request.identity.id, cmd.product_id)
        return Response(CartChangeSerializer(result).data)


@extend_schema(tags=["Cart"])
class CartRemoveAllView(APIView):
    access = {"POST": Action.MANAGE_CART}
    service = build_cart_service()
    log = logger.bind(view="CartRemoveAllView")

    @extend_schema(
        summary="Remove a product line from the cart regardless of quantity",
        request=CartItemRequestSerializer,
        responses=_MUTATION_RESPONSES,
    )
    def post(self, request):
        cmd = CartItemCommand.from_raw(request.data)
        result = self.service.remove_all(request.identity.id, cmd.product_id)
        return Response(CartChangeSerializer(result).data)


@extend_schema(tags=["Cart"])
class CartItemsView(APIView):
    access = {"GET": Action.MANAGE_CART}
    service = build_cart_service()
    log = logger.bind(view="CartItemsView")

    @extend_schema(
        summary="List the current user's cart",
        responses={
            200: CartItemSerializer(many=True),
            403: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request):
        items = self.service.list_items(request.identity.id)
        return Response(CartItemSerializer(items, many=True).data)
