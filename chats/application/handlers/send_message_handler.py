"""
Handler for SendMessageCommand.
"""
import logging

from chats.application.commands.send_message import SendMessageCommand
from chats.domain.chat import ChatMessage
from chats.ports.chat_repository import ChatRepository

logger = logging.getLogger(__name__)


class SendMessageHandler:
    """Handler for SendMessageCommand."""

    def __init__(self, chat_repository: ChatRepository):
        """Initialize handler with repository."""
        self.chat_repository = chat_repository

    async def handle(self, command: SendMessageCommand) -> ChatMessage:
        """
        Handle send message command.

        The sender id is stored as given; it is not checked against
        the users collection.

        Raises:
            RecordNotFoundError: If the chat does not exist
        """
        message = await self.chat_repository.send_message(
            command.chat_id, command.user_id, command.text
        )
        logger.debug(
            "Message posted", extra={"chat_id": command.chat_id, "message_id": message.id}
        )
        return message
