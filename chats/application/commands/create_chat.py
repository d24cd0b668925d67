"""
CreateChatCommand.

Command to open a new chat board.
"""
from dataclasses import dataclass


@dataclass
class CreateChatCommand:
    """Command to create a chat."""

    title: str
