"""
License API views.
"""

from asgiref.sync import async_to_sync
from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework.request import Request
from rest_framework.response import Response

from api.responses import success
from api.v1.collection_views import (
    CollectionAPIView,
    CollectionDeleteManyView,
    CollectionListCreateView,
    CollectionRecordView,
)
from api.v1.licenses.serializers import CreateLicenseRequestSerializer, LicenseSerializer
from core.instrumentation import Status, StatusCode, get_tracer
from licenses.application.commands.create_license import CreateLicenseCommand
from licenses.application.commands.revoke_license import RevokeLicenseCommand
from licenses.application.handlers.create_license_handler import CreateLicenseHandler
from licenses.application.handlers.revoke_license_handler import RevokeLicenseHandler

tracer = get_tracer(__name__)


@extend_schema_view(
    get=extend_schema(
        operation_id="list_licenses",
        summary="List Licenses",
        description="List licenses with their effective status.",
        tags=["Licenses"],
    ),
    post=extend_schema(
        operation_id="create_license",
        summary="Create License",
        description="Issue an active license with a freshly generated key.",
        tags=["Licenses"],
        request=CreateLicenseRequestSerializer,
        responses={200: LicenseSerializer, 400: {"description": "Bad Request"}},
    ),
)
class LicenseListCreateView(CollectionListCreateView):
    """View for listing and creating licenses."""

    collection = "licenses"
    serializer_class = LicenseSerializer
    create_serializer_class = CreateLicenseRequestSerializer

    async def perform_create(self, validated_data):
        command = CreateLicenseCommand(
            product_id=validated_data["product_id"],
            expires_at=validated_data.get("expires_at"),
            metadata=validated_data.get("metadata") or {},
        )
        return await CreateLicenseHandler(self.get_repository()).handle(command)


@extend_schema_view(
    get=extend_schema(operation_id="get_license", summary="Get License", tags=["Licenses"]),
    delete=extend_schema(
        operation_id="delete_license", summary="Delete License", tags=["Licenses"]
    ),
)
class LicenseRecordView(CollectionRecordView):
    """View for a single license."""

    collection = "licenses"
    serializer_class = LicenseSerializer


@extend_schema_view(
    post=extend_schema(
        operation_id="delete_licenses", summary="Delete Licenses", tags=["Licenses"]
    ),
)
class LicenseDeleteManyView(CollectionDeleteManyView):
    """View for bulk license deletion."""

    collection = "licenses"


class RevokeLicenseView(CollectionAPIView):
    """View for revoking a license."""

    collection = "licenses"
    serializer_class = LicenseSerializer

    @extend_schema(
        operation_id="revoke_license",
        summary="Revoke License",
        description="Ban a license. Revoking a banned license is a no-op.",
        tags=["Licenses"],
        request=None,
        responses={200: LicenseSerializer, 404: {"description": "License not found"}},
    )
    def post(self, request: Request, record_id: str) -> Response:
        """Revoke a license."""
        return async_to_sync(self._handle_revoke)(request, record_id)

    async def _handle_revoke(self, request: Request, record_id: str) -> Response:
        """Async handler for revocation."""
        with tracer.start_as_current_span("revoke_license") as span:
            span.set_attribute("license.id", record_id)
            handler = RevokeLicenseHandler(self.get_repository())
            license = await handler.handle(RevokeLicenseCommand(license_id=record_id))
            span.set_attribute("license.status", license.status.value)
            span.set_status(Status(StatusCode.OK))
            return success(self.serialize(license))
