"""
SendMessageCommand.

Command to post a message to a chat board.
"""
from dataclasses import dataclass


@dataclass
class SendMessageCommand:
    """Command to append a message to a chat."""

    chat_id: str
    user_id: str
    text: str
