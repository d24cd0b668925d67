"""
In-memory implementation of ChatRepository port.
"""
from typing import List

from asgiref.sync import sync_to_async

from chats.domain.chat import Chat, ChatMessage
from chats.ports.chat_repository import ChatRepository
from core.infrastructure.repositories.memory_entity_repository import InMemoryEntityRepository
from core.infrastructure.storage.codec import RecordCodec

CHAT_MESSAGE_CODEC = RecordCodec(ChatMessage)
CHAT_CODEC = RecordCodec(Chat, nested={"messages": CHAT_MESSAGE_CODEC})


class InMemoryChatRepository(InMemoryEntityRepository, ChatRepository):
    """Collection-store implementation of ChatRepository."""

    @sync_to_async
    def send_message(self, chat_id: str, user_id: str, text: str) -> ChatMessage:
        posted = []

        def append(chat: Chat) -> Chat:
            updated, message = chat.post(user_id, text)
            posted.append(message)
            return updated

        self.store.update(chat_id, append)
        return posted[0]

    @sync_to_async
    def list_messages(self, chat_id: str) -> List[ChatMessage]:
        return list(self.store.get(chat_id).messages)
