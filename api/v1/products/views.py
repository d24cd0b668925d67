"""
Product API views.
"""

from drf_spectacular.utils import extend_schema, extend_schema_view

from api.v1.collection_views import (
    CollectionDeleteManyView,
    CollectionListCreateView,
    CollectionRecordView,
)
from api.v1.products.serializers import CreateProductRequestSerializer, ProductSerializer
from products.application.commands.create_product import CreateProductCommand
from products.application.handlers.create_product_handler import CreateProductHandler


@extend_schema_view(
    get=extend_schema(
        operation_id="list_products",
        summary="List Products",
        description="List catalogue products in insertion order.",
        tags=["Products"],
    ),
    post=extend_schema(
        operation_id="create_product",
        summary="Create Product",
        description="Add a product to the catalogue. Price is in minor currency units.",
        tags=["Products"],
        request=CreateProductRequestSerializer,
        responses={200: ProductSerializer, 400: {"description": "Bad Request"}},
    ),
)
class ProductListCreateView(CollectionListCreateView):
    """View for listing and creating products."""

    collection = "products"
    serializer_class = ProductSerializer
    create_serializer_class = CreateProductRequestSerializer

    async def perform_create(self, validated_data):
        command = CreateProductCommand(
            name=validated_data["name"],
            description=validated_data["description"],
            price=validated_data["price"],
        )
        return await CreateProductHandler(self.get_repository()).handle(command)


@extend_schema_view(
    get=extend_schema(operation_id="get_product", summary="Get Product", tags=["Products"]),
    delete=extend_schema(
        operation_id="delete_product",
        summary="Delete Product",
        description="Delete a product. Licenses issued for it are kept.",
        tags=["Products"],
    ),
)
class ProductRecordView(CollectionRecordView):
    """View for a single product."""

    collection = "products"
    serializer_class = ProductSerializer


@extend_schema_view(
    post=extend_schema(
        operation_id="delete_products", summary="Delete Products", tags=["Products"]
    ),
)
class ProductDeleteManyView(CollectionDeleteManyView):
    """View for bulk product deletion."""

    collection = "products"
