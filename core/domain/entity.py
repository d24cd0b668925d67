"""
Base domain entity.

Every record held by a collection store is a frozen dataclass
deriving from Entity, identified by a string id.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Entity:
    """Base class for records identified by an immutable string id."""

    id: str

    def __post_init__(self):
        """Validate entity identity."""
        if not isinstance(self.id, str) or not self.id.strip():
            raise ValueError("Entity id is required")
