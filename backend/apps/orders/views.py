from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse

from apps.api.policy import Action
from apps.api.schemas import ErrorResponseSerializer, MessageSerializer
from apps.api.utils import message_response
from apps.common import get_logger
from .commands import DeliveryCommand
from .container import build_order_service
from .serializers import (
    CartQuerySerializer,
    DeliveryRequestSerializer,
    OrderLineSerializer,
    OrderSerializer,
    OrderSummarySerializer,
)

logger = get_logger(__name__).bind(component="orders", layer="view")

_NOT_FOUND = OpenApiResponse(response=ErrorResponseSerializer)


@extend_schema(tags=["Orders"])
class CreateOrderView(APIView):
    access = {"POST": Action.PLACE_ORDER}
    service = build_order_service()
    log = logger.bind(view="CreateOrderView")

    @extend_schema(
        summary="Place an order from the cart",
        parameters=[
            OpenApiParameter(
                name="cart_id",
                type=int,
                location=OpenApiParameter.QUERY,
                required=False,
                description="Cart to check out; defaults to the caller's cart",
            )
        ],
        request=DeliveryRequestSerializer,
        responses={
            201: OrderSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            403: OpenApiResponse(response=ErrorResponseSerializer),
            404: _NOT_FOUND,
        },
    )
    def post(self, request):
        query = CartQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        body = DeliveryRequestSerializer(data=request.data)
        body.is_valid(raise_exception=True)
        dto = self.service.create_order(
            request.identity.id,
            DeliveryCommand.from_validated(body.validated_data),
            cart_id=query.validated_data.get("cart_id"),
        )
        self.log.info("Order placed via API", order_id=dto.id, user_id=request.identity.id)
        return Response(OrderSerializer(dto).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=["Orders"])
class DeleteOrderView(APIView):
    access = {"DELETE": Action.DELETE_ORDER}
    service = build_order_service()
    log = logger.bind(view="DeleteOrderView")

    @extend_schema(
        summary="Delete an order (owner or admin)",
        parameters=[OpenApiParameter("order_id", int, OpenApiParameter.PATH)],
        responses={
            200: MessageSerializer,
            403: OpenApiResponse(response=ErrorResponseSerializer),
            404: _NOT_FOUND,
        },
    )
    def delete(self, request, order_id: int):
        self.service.delete_order(request.identity, order_id)
        return message_response("Order deleted")


@extend_schema(tags=["Orders"])
class AllOrdersView(APIView):
    access = {"GET": Action.LIST_ALL_ORDERS}
    service = build_order_service()

    @extend_schema(
        summary="List every order (admin)",
        responses={200: OrderSummarySerializer(many=True), 404: _NOT_FOUND},
    )
    def get(self, request):
        data = self.service.list_orders()
        return Response(OrderSummarySerializer(data, many=True).data)


@extend_schema(tags=["Orders"])
class AllOrderItemsView(APIView):
    access = {"GET": Action.LIST_ALL_ORDER_ITEMS}
    service = build_order_service()

    @extend_schema(
        summary="List every order item (admin)",
        responses={200: OrderLineSerializer(many=True), 404: _NOT_FOUND},
    )
    def get(self, request):
        data = self.service.list_order_items()
        return Response(OrderLineSerializer(data, many=True).data)


@extend_schema(tags=["Orders"])
class OwnOrdersView(APIView):
    access = {"GET": Action.LIST_OWN_ORDERS}
    service = build_order_service()

    @extend_schema(
        summary="List the current user's orders",
        responses={200: OrderSummarySerializer(many=True), 404: _NOT_FOUND},
    )
    def get(self, request):
        data = self.service.list_orders_for_user(request.identity.id)
        return Response(OrderSummarySerializer(data, many=True).data)


@extend_schema(tags=["Orders"])
class OrderedItemsView(APIView):
    access = {"GET": Action.VIEW_ORDER_ITEMS}
    service = build_order_service()

    @extend_schema(
        summary="Items of one order (owner or admin)",
        parameters=[OpenApiParameter("order_id", int, OpenApiParameter.PATH)],
        responses={
            200: OrderLineSerializer(many=True),
            403: OpenApiResponse(response=ErrorResponseSerializer),
            404: _NOT_FOUND,
        },
    )
    def get(self, request, order_id: int):
        data = self.service.list_items_for_order(request.identity, order_id)
        return Response(OrderLineSerializer(data, many=True).data)
