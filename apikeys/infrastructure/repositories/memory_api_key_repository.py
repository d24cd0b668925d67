"""
In-memory implementation of ApiKeyRepository port.
"""
from apikeys.domain.api_key import ApiKey
from apikeys.ports.api_key_repository import ApiKeyRepository
from core.infrastructure.repositories.memory_entity_repository import InMemoryEntityRepository
from core.infrastructure.storage.codec import RecordCodec

API_KEY_CODEC = RecordCodec(ApiKey)
API_KEY_UNIQUE_FIELDS = ("key",)


class InMemoryApiKeyRepository(InMemoryEntityRepository, ApiKeyRepository):
    """Collection-store implementation of ApiKeyRepository."""
