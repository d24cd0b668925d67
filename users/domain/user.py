"""
User domain entity.
"""
import uuid
from dataclasses import dataclass
from typing import Optional

from core.domain.entity import Entity


@dataclass(frozen=True)
class User(Entity):
    """User domain entity."""

    name: str

    def __post_init__(self):
        """Validate user entity."""
        super().__post_init__()
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("User name cannot be empty")

    @classmethod
    def create(cls, name: str, user_id: Optional[str] = None) -> "User":
        """
        Create a new User entity.

        Args:
            name: Display name (surrounding whitespace is stripped)
            user_id: Optional id (generated if not provided)

        Returns:
            User entity instance
        """
        return cls(id=user_id or str(uuid.uuid4()), name=name.strip())
