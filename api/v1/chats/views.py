"""
Chat API views.

Chats follow the generic collection surface; messages are an
append-only sub-resource served without pagination.
"""

from asgiref.sync import async_to_sync
from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework.request import Request
from rest_framework.response import Response

from api.responses import success, validation_failure
from api.v1.chats.serializers import (
    ChatMessageSerializer,
    ChatSerializer,
    CreateChatRequestSerializer,
    SendMessageRequestSerializer,
)
from api.v1.collection_views import (
    CollectionAPIView,
    CollectionDeleteManyView,
    CollectionListCreateView,
    CollectionRecordView,
)
from chats.application.commands.create_chat import CreateChatCommand
from chats.application.commands.send_message import SendMessageCommand
from chats.application.handlers.create_chat_handler import CreateChatHandler
from chats.application.handlers.send_message_handler import SendMessageHandler
from core.instrumentation import Status, StatusCode, get_tracer

tracer = get_tracer(__name__)


@extend_schema_view(
    get=extend_schema(operation_id="list_chats", summary="List Chats", tags=["Chats"]),
    post=extend_schema(
        operation_id="create_chat",
        summary="Create Chat",
        tags=["Chats"],
        request=CreateChatRequestSerializer,
    ),
)
class ChatListCreateView(CollectionListCreateView):
    """View for listing and creating chats."""

    collection = "chats"
    serializer_class = ChatSerializer
    create_serializer_class = CreateChatRequestSerializer

    async def perform_create(self, validated_data):
        command = CreateChatCommand(title=validated_data["title"])
        return await CreateChatHandler(self.get_repository()).handle(command)


@extend_schema_view(
    get=extend_schema(operation_id="get_chat", summary="Get Chat", tags=["Chats"]),
    delete=extend_schema(operation_id="delete_chat", summary="Delete Chat", tags=["Chats"]),
)
class ChatRecordView(CollectionRecordView):
    """View for a single chat."""

    collection = "chats"
    serializer_class = ChatSerializer


@extend_schema_view(
    post=extend_schema(operation_id="delete_chats", summary="Delete Chats", tags=["Chats"]),
)
class ChatDeleteManyView(CollectionDeleteManyView):
    """View for bulk chat deletion."""

    collection = "chats"


class ChatMessagesView(CollectionAPIView):
    """View for reading and posting chat messages."""

    collection = "chats"
    serializer_class = ChatMessageSerializer

    @extend_schema(
        operation_id="list_chat_messages",
        summary="List Chat Messages",
        description="Return every message of a chat in posting order.",
        tags=["Chats"],
        responses={200: ChatMessageSerializer(many=True), 404: {"description": "Chat not found"}},
    )
    def get(self, request: Request, chat_id: str) -> Response:
        """List the messages of a chat."""
        return async_to_sync(self._handle_list_messages)(request, chat_id)

    async def _handle_list_messages(self, request: Request, chat_id: str) -> Response:
        """Async handler for listing messages."""
        with tracer.start_as_current_span("list_chat_messages") as span:
            span.set_attribute("chat.id", chat_id)
            messages = await self.get_repository().list_messages(chat_id)
            span.set_attribute("messages.count", len(messages))
            span.set_status(Status(StatusCode.OK))
            return success(self.serialize_many(messages))

    @extend_schema(
        operation_id="send_chat_message",
        summary="Send Chat Message",
        tags=["Chats"],
        request=SendMessageRequestSerializer,
        responses={
            200: ChatMessageSerializer,
            400: {"description": "Bad Request"},
            404: {"description": "Chat not found"},
        },
    )
    def post(self, request: Request, chat_id: str) -> Response:
        """Append a message to a chat."""
        return async_to_sync(self._handle_send_message)(request, chat_id)

    async def _handle_send_message(self, request: Request, chat_id: str) -> Response:
        """Async handler for sending a message."""
        with tracer.start_as_current_span("send_chat_message") as span:
            span.set_attribute("chat.id", chat_id)

            serializer = SendMessageRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_failure(serializer.errors)

            command = SendMessageCommand(
                chat_id=chat_id,
                user_id=serializer.validated_data["user_id"],
                text=serializer.validated_data["text"],
            )
            message = await SendMessageHandler(self.get_repository()).handle(command)

            span.set_attribute("message.id", message.id)
            span.set_status(Status(StatusCode.OK))
            return success(self.serialize(message))
