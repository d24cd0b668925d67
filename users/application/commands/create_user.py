"""
CreateUserCommand.

Command to add a dashboard user.
"""
from dataclasses import dataclass


@dataclass
class CreateUserCommand:
    """Command to create a user."""

    name: str
