"""
Entity repository port (interface).

This defines the contract shared by every entity collection.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

from core.domain.value_objects import Page

R = TypeVar("R")


class EntityRepository(ABC, Generic[R]):
    """
    Abstract repository for one collection of entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def create(self, entity: R) -> R:
        """
        Add a new entity at the end of the collection.

        Args:
            entity: Entity to store

        Returns:
            The stored entity, unchanged

        Raises:
            DuplicateIdError: If the entity id was already used
        """
        pass

    @abstractmethod
    async def get(self, entity_id: str) -> R:
        """
        Get an entity by ID.

        Raises:
            RecordNotFoundError: If no entity has this id
        """
        pass

    @abstractmethod
    async def exists(self, entity_id: str) -> bool:
        """Check if an entity exists."""
        pass

    @abstractmethod
    async def delete(self, entity_id: str) -> bool:
        """
        Delete an entity.

        Returns:
            True if removed, False if it was absent
        """
        pass

    @abstractmethod
    async def delete_many(self, entity_ids: List[str]) -> int:
        """
        Delete several entities, skipping missing ids.

        Returns:
            Number of entities actually removed
        """
        pass

    @abstractmethod
    async def list(self, cursor: Optional[str] = None, limit: Optional[int] = None) -> Page[R]:
        """
        List entities in insertion order.

        Args:
            cursor: Token from a previous page, or None to start at the beginning
            limit: Maximum number of entities to return

        Returns:
            Page of entities and the cursor for the next page
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Return the number of stored entities."""
        pass

    @abstractmethod
    async def ensure_seed(self) -> int:
        """
        Populate the collection with starter data if it was never seeded.

        Returns:
            Number of entities inserted
        """
        pass
