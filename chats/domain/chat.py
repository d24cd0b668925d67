"""
Chat board domain entities.

A chat owns an append-only sequence of messages ordered by
insertion. Messages are stored inside their chat record.
"""
import uuid
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from core.domain.entity import Entity
from core.domain.value_objects import now_ms


@dataclass(frozen=True)
class ChatMessage(Entity):
    """A single message posted to a chat."""

    chat_id: str
    user_id: str
    text: str
    ts: int

    def __post_init__(self):
        """Validate message entity."""
        super().__post_init__()
        if not self.chat_id:
            raise ValueError("Chat ID is required")
        if not self.user_id:
            raise ValueError("User ID is required")
        if not isinstance(self.text, str) or not self.text.strip():
            raise ValueError("Message text cannot be empty")


@dataclass(frozen=True)
class Chat(Entity):
    """
    Chat board domain entity.

    This is an immutable value object; posting a message
    returns a new Chat instance.
    """

    title: str
    messages: Tuple[ChatMessage, ...] = ()

    def __post_init__(self):
        """Validate chat entity."""
        super().__post_init__()
        if not isinstance(self.title, str) or not self.title.strip():
            raise ValueError("Chat title cannot be empty")
        if any(message.chat_id != self.id for message in self.messages):
            raise ValueError("Message belongs to another chat")

    @classmethod
    def create(cls, title: str, chat_id: Optional[str] = None) -> "Chat":
        """Create a new, empty chat."""
        return cls(id=chat_id or str(uuid.uuid4()), title=title.strip())

    def post(self, user_id: str, text: str, ts: Optional[int] = None) -> Tuple["Chat", ChatMessage]:
        """
        Append a message to the chat.

        Args:
            user_id: Author id
            text: Message text (surrounding whitespace is stripped)
            ts: Message timestamp in epoch ms (defaults to now)

        Returns:
            Tuple of (updated chat, new message)
        """
        message = ChatMessage(
            id=str(uuid.uuid4()),
            chat_id=self.id,
            user_id=user_id,
            text=text.strip(),
            ts=ts if ts is not None else now_ms(),
        )
        return replace(self, messages=self.messages + (message,)), message
