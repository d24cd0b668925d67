"""
Chat repository port (interface).
"""
from abc import abstractmethod
from typing import List

from chats.domain.chat import Chat, ChatMessage
from core.ports.entity_repository import EntityRepository


class ChatRepository(EntityRepository[Chat]):
    """Abstract repository for Chat entities and their messages."""

    @abstractmethod
    async def send_message(self, chat_id: str, user_id: str, text: str) -> ChatMessage:
        """
        Append a message to a chat.

        Args:
            chat_id: Chat id
            user_id: Author id
            text: Message text

        Returns:
            The stored message

        Raises:
            RecordNotFoundError: If the chat does not exist
        """
        pass

    @abstractmethod
    async def list_messages(self, chat_id: str) -> List[ChatMessage]:
        """
        Return every message of a chat in posting order.

        Raises:
            RecordNotFoundError: If the chat does not exist
        """
        pass
