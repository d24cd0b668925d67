"""
Handler for CreateUserCommand.
"""
import logging

from users.application.commands.create_user import CreateUserCommand
from users.domain.user import User
from users.ports.user_repository import UserRepository

logger = logging.getLogger(__name__)


class CreateUserHandler:
    """Handler for CreateUserCommand."""

    def __init__(self, user_repository: UserRepository):
        """Initialize handler with repository."""
        self.user_repository = user_repository

    async def handle(self, command: CreateUserCommand) -> User:
        """Create and store a user with a generated id."""
        created = await self.user_repository.create(User.create(name=command.name))
        logger.info("User created", extra={"user_id": created.id})
        return created
