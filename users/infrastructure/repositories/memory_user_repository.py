"""
In-memory implementation of UserRepository port.
"""
from core.infrastructure.repositories.memory_entity_repository import InMemoryEntityRepository
from core.infrastructure.storage.codec import RecordCodec
from users.domain.user import User
from users.ports.user_repository import UserRepository

USER_CODEC = RecordCodec(User)


class InMemoryUserRepository(InMemoryEntityRepository, UserRepository):
    """Collection-store implementation of UserRepository."""
