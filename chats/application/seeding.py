"""
Starter chat board for an empty chats collection.
"""
from typing import List

from chats.domain.chat import Chat, ChatMessage
from core.application.seeding import SeedPolicy
from core.domain.value_objects import now_ms


class ChatSeedPolicy(SeedPolicy[Chat]):
    """Seeds a 'General' board with a greeting from the admin user."""

    collection = "chats"

    def build(self) -> List[Chat]:
        greeting = ChatMessage(id="m1", chat_id="c1", user_id="u1", text="Hello", ts=now_ms())
        return [Chat(id="c1", title="General", messages=(greeting,))]
