"""
User repository port (interface).
"""
from core.ports.entity_repository import EntityRepository
from users.domain.user import User


class UserRepository(EntityRepository[User]):
    """Abstract repository for User entities."""
