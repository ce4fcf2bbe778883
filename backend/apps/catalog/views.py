from typing import Optional

from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from rest_framework.parsers import FormParser, MultiPartParser
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse

from apps.api.policy import Action
from apps.api.schemas import ErrorResponseSerializer
from apps.common import get_logger
from .commands import ProductCreateCommand
from .container import build_product_service
from .models import Category
from .serializers import ProductCreateSerializer, ProductReadSerializer

logger = get_logger(__name__).bind(component="catalog", layer="view")


@extend_schema(tags=["Catalog"])
class ProductListView(APIView):
    """All products, or those of ``category`` when a subclass pins one."""

    category: Optional[str] = None
    service = build_product_service()
    log = logger.bind(view="ProductListView")

    @extend_schema(
        summary="List products",
        description="Cached results may be served.",
        responses={200: ProductReadSerializer(many=True)},
    )
    def get(self, request):
        self.log.debug("Handling product list request", category=self.category)
        data = self.service.list_products(self.category)
        return Response(ProductReadSerializer(data, many=True).data)


class PhoneListView(ProductListView):
    category = Category.PHONE


class TabletListView(ProductListView):
    category = Category.TABLET


class LaptopListView(ProductListView):
    category = Category.LAPTOP


@extend_schema(tags=["Catalog"])
class ProductSearchView(APIView):
    access = {"GET": Action.SEARCH_CATALOG}
    service = build_product_service()
    log = logger.bind(view="ProductSearchView")

    @extend_schema(
        summary="Search products by name",
        parameters=[OpenApiParameter("search_query", str, OpenApiParameter.PATH)],
        responses={
            200: ProductReadSerializer(many=True),
            400: OpenApiResponse(response=ErrorResponseSerializer),
            403: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, search_query: str):
        data = self.service.search(search_query)
        self.log.debug("Search served", query=search_query, results=len(data))
        return Response(ProductReadSerializer(data, many=True).data)


@extend_schema(tags=["Catalog"])
class ProductCreateView(APIView):
    access = {"POST": Action.CREATE_PRODUCT}
    parser_classes = [MultiPartParser, FormParser]
    service = build_product_service()
    log = logger.bind(view="ProductCreateView")

    @extend_schema(
        summary="Add product (admin)",
        request={"multipart/form-data": ProductCreateSerializer},
        responses={
            201: ProductReadSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            403: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = ProductCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        cmd = ProductCreateCommand.from_validated(serializer.validated_data)
        self.log.info(
            "Creating product via API", name=cmd.name, actor_id=request.identity.id
        )
        dto = self.service.create_product(cmd)
        return Response(ProductReadSerializer(dto).data, status=status.HTTP_201_CREATED)
