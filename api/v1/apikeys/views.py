"""
API key views.

API keys are listed whole rather than paginated; the collection
is expected to stay small.
"""

from asgiref.sync import async_to_sync
from drf_spectacular.utils import extend_schema
from rest_framework.request import Request
from rest_framework.response import Response

from api.responses import success
from api.v1.apikeys.serializers import ApiKeySerializer
from api.v1.collection_views import CollectionAPIView
from apikeys.application.commands.create_api_key import CreateApiKeyCommand
from apikeys.application.handlers.create_api_key_handler import CreateApiKeyHandler
from core.instrumentation import Status, StatusCode, get_tracer

tracer = get_tracer(__name__)


class ApiKeyListCreateView(CollectionAPIView):
    """View for listing and generating API keys."""

    collection = "api_keys"
    serializer_class = ApiKeySerializer

    @extend_schema(
        operation_id="list_api_keys",
        summary="List API Keys",
        tags=["API Keys"],
        responses={200: ApiKeySerializer(many=True)},
    )
    def get(self, request: Request) -> Response:
        """List every API key."""
        return async_to_sync(self._handle_list)(request)

    async def _handle_list(self, request: Request) -> Response:
        """Async handler for listing."""
        with tracer.start_as_current_span("list_api_keys") as span:
            repository = self.get_repository()
            await repository.ensure_seed()

            keys = []
            cursor = None
            while True:
                page = await repository.list(cursor)
                keys.extend(page.items)
                if page.next is None:
                    break
                cursor = page.next

            span.set_attribute("items.count", len(keys))
            span.set_status(Status(StatusCode.OK))
            return success(self.serialize_many(keys))

    @extend_schema(
        operation_id="create_api_key",
        summary="Generate API Key",
        tags=["API Keys"],
        request=None,
        responses={200: ApiKeySerializer},
    )
    def post(self, request: Request) -> Response:
        """Generate a new API key."""
        return async_to_sync(self._handle_create)(request)

    async def _handle_create(self, request: Request) -> Response:
        """Async handler for key generation."""
        with tracer.start_as_current_span("create_api_key") as span:
            handler = CreateApiKeyHandler(self.get_repository())
            api_key = await handler.handle(CreateApiKeyCommand())
            span.set_attribute("api_key.id", api_key.id)
            span.set_status(Status(StatusCode.OK))
            return success(self.serialize(api_key))
