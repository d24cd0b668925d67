"""
Generic collection views.

Every entity collection exposes the same REST surface:
- GET    /<collection>?cursor=&limit=   cursor-paginated listing (seeds first)
- POST   /<collection>                  create
- GET    /<collection>/<id>             single record
- DELETE /<collection>/<id>             single delete
- POST   /<collection>/deleteMany       bulk delete

Concrete views set `collection` and their serializers.
"""

from typing import Any, Dict

from asgiref.sync import async_to_sync
from rest_framework import serializers
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.responses import success, validation_failure
from core.domain.exceptions import EntityValidationError
from core.instrumentation import Status, StatusCode, get_tracer
from core.ports.entity_repository import EntityRepository
from SeverKeyService.container import get_repositories

tracer = get_tracer(__name__)


class ListQuerySerializer(serializers.Serializer):
    """Serializer for listing query parameters."""

    cursor = serializers.CharField(required=False, allow_blank=True)
    limit = serializers.IntegerField(required=False)


class DeleteManyRequestSerializer(serializers.Serializer):
    """Serializer for bulk delete request."""

    ids = serializers.ListField(
        child=serializers.CharField(allow_blank=True),
        required=True,
        allow_empty=False,
        error_messages={
            "required": "ids array is required",
            "empty": "ids array is required",
            "not_a_list": "ids must be an array of strings",
        },
    )


class DeleteManyResponseSerializer(serializers.Serializer):
    """Serializer for bulk delete response."""

    deletedCount = serializers.IntegerField()
    ids = serializers.ListField(child=serializers.CharField())


class DeleteResponseSerializer(serializers.Serializer):
    """Serializer for single delete response."""

    id = serializers.CharField()
    deleted = serializers.BooleanField()


class CollectionAPIView(APIView):
    """Base view bound to one entity collection."""

    collection: str = ""
    serializer_class = None

    def get_repository(self) -> EntityRepository:
        return getattr(get_repositories(), self.collection)

    def serialize(self, entity) -> Dict[str, Any]:
        return self.serializer_class(entity).data

    def serialize_many(self, entities):
        return self.serializer_class(entities, many=True).data


class CollectionListCreateView(CollectionAPIView):
    """List and create records of a collection."""

    create_serializer_class = None

    def get(self, request: Request) -> Response:
        """List records after an optional cursor."""
        return async_to_sync(self._handle_list)(request)

    async def _handle_list(self, request: Request) -> Response:
        """Async handler for listing."""
        with tracer.start_as_current_span(f"list_{self.collection}") as span:
            span.set_attribute("collection", self.collection)

            query = ListQuerySerializer(data=request.query_params)
            if not query.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_failure(query.errors)

            repository = self.get_repository()
            await repository.ensure_seed()

            page = await repository.list(
                query.validated_data.get("cursor") or None,
                query.validated_data.get("limit"),
            )

            span.set_attribute("items.count", len(page.items))
            span.set_attribute("has_next", page.next is not None)
            span.set_status(Status(StatusCode.OK))
            return success({"items": self.serialize_many(page.items), "next": page.next})

    def post(self, request: Request) -> Response:
        """Create a record."""
        return async_to_sync(self._handle_create)(request)

    async def _handle_create(self, request: Request) -> Response:
        """Async handler for creation."""
        with tracer.start_as_current_span(f"create_{self.collection}") as span:
            span.set_attribute("collection", self.collection)

            serializer = self.create_serializer_class(data=request.data)
            if not serializer.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_attribute("error.details", str(serializer.errors))
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_failure(serializer.errors)

            try:
                entity = await self.perform_create(serializer.validated_data)
            except ValueError as e:
                raise EntityValidationError(str(e)) from e

            span.set_attribute("record.id", entity.id)
            span.set_status(Status(StatusCode.OK))
            return success(self.serialize(entity))

    async def perform_create(self, validated_data: Dict[str, Any]):
        """Build and store the new entity."""
        raise NotImplementedError


class CollectionRecordView(CollectionAPIView):
    """Retrieve or delete a single record."""

    def get(self, request: Request, record_id: str) -> Response:
        """Get one record."""
        return async_to_sync(self._handle_retrieve)(request, record_id)

    async def _handle_retrieve(self, request: Request, record_id: str) -> Response:
        """Async handler for retrieval."""
        with tracer.start_as_current_span(f"get_{self.collection}") as span:
            span.set_attribute("record.id", record_id)
            entity = await self.get_repository().get(record_id)
            span.set_status(Status(StatusCode.OK))
            return success(self.serialize(entity))

    def delete(self, request: Request, record_id: str) -> Response:
        """Delete one record."""
        return async_to_sync(self._handle_delete)(request, record_id)

    async def _handle_delete(self, request: Request, record_id: str) -> Response:
        """Async handler for deletion."""
        with tracer.start_as_current_span(f"delete_{self.collection}") as span:
            span.set_attribute("record.id", record_id)
            deleted = await self.get_repository().delete(record_id)
            span.set_attribute("deleted", deleted)
            span.set_status(Status(StatusCode.OK))
            return success({"id": record_id, "deleted": deleted})


class CollectionDeleteManyView(CollectionAPIView):
    """Delete several records at once."""

    def post(self, request: Request) -> Response:
        """Delete every listed record that exists."""
        return async_to_sync(self._handle_delete_many)(request)

    async def _handle_delete_many(self, request: Request) -> Response:
        """Async handler for bulk deletion."""
        with tracer.start_as_current_span(f"delete_many_{self.collection}") as span:
            serializer = DeleteManyRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_failure(serializer.errors)

            ids = serializer.validated_data["ids"]
            deleted_count = await self.get_repository().delete_many(ids)

            span.set_attribute("ids.count", len(ids))
            span.set_attribute("deleted.count", deleted_count)
            span.set_status(Status(StatusCode.OK))
            return success({"deletedCount": deleted_count, "ids": ids})
