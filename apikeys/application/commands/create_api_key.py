"""
CreateApiKeyCommand.

Command to generate a new API key. Keys carry no caller-supplied data.
"""
from dataclasses import dataclass


@dataclass
class CreateApiKeyCommand:
    """Command to create an API key."""
