"""
ApiKey repository port (interface).
"""
from apikeys.domain.api_key import ApiKey
from core.ports.entity_repository import EntityRepository


class ApiKeyRepository(EntityRepository[ApiKey]):
    """Abstract repository for ApiKey entities. Keys are unique for the repository lifetime."""
