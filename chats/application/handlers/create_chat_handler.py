"""
Handler for CreateChatCommand.
"""
import logging

from chats.application.commands.create_chat import CreateChatCommand
from chats.domain.chat import Chat
from chats.ports.chat_repository import ChatRepository

logger = logging.getLogger(__name__)


class CreateChatHandler:
    """Handler for CreateChatCommand."""

    def __init__(self, chat_repository: ChatRepository):
        """Initialize handler with repository."""
        self.chat_repository = chat_repository

    async def handle(self, command: CreateChatCommand) -> Chat:
        """Create and store an empty chat."""
        created = await self.chat_repository.create(Chat.create(title=command.title))
        logger.info("Chat created", extra={"chat_id": created.id})
        return created
