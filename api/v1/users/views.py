"""
User API views.
"""

from drf_spectacular.utils import extend_schema, extend_schema_view

from api.v1.collection_views import (
    CollectionDeleteManyView,
    CollectionListCreateView,
    CollectionRecordView,
)
from api.v1.users.serializers import CreateUserRequestSerializer, UserSerializer
from users.application.commands.create_user import CreateUserCommand
from users.application.handlers.create_user_handler import CreateUserHandler


@extend_schema_view(
    get=extend_schema(operation_id="list_users", summary="List Users", tags=["Users"]),
    post=extend_schema(
        operation_id="create_user",
        summary="Create User",
        tags=["Users"],
        request=CreateUserRequestSerializer,
    ),
)
class UserListCreateView(CollectionListCreateView):
    """View for listing and creating users."""

    collection = "users"
    serializer_class = UserSerializer
    create_serializer_class = CreateUserRequestSerializer

    async def perform_create(self, validated_data):
        command = CreateUserCommand(name=validated_data["name"])
        return await CreateUserHandler(self.get_repository()).handle(command)


@extend_schema_view(
    get=extend_schema(operation_id="get_user", summary="Get User", tags=["Users"]),
    delete=extend_schema(operation_id="delete_user", summary="Delete User", tags=["Users"]),
)
class UserRecordView(CollectionRecordView):
    """View for a single user."""

    collection = "users"
    serializer_class = UserSerializer


@extend_schema_view(
    post=extend_schema(operation_id="delete_users", summary="Delete Users", tags=["Users"]),
)
class UserDeleteManyView(CollectionDeleteManyView):
    """View for bulk user deletion."""

    collection = "users"
