"""
ApiKey domain entity.
"""
import uuid
from dataclasses import dataclass
from typing import Optional

from core.domain.entity import Entity
from core.domain.value_objects import now_ms

API_KEY_PREFIX = "sk_live_"


def generate_api_key() -> str:
    """Generate a key in format: sk_live_<32 hex chars>."""
    return f"{API_KEY_PREFIX}{uuid.uuid4().hex}"


@dataclass(frozen=True)
class ApiKey(Entity):
    """ApiKey domain entity."""

    key: str
    created_at: int

    def __post_init__(self):
        """Validate API key entity."""
        super().__post_init__()
        if not isinstance(self.key, str) or not self.key.startswith(API_KEY_PREFIX):
            raise ValueError("Invalid API key format")

    @classmethod
    def create(cls, created_at: Optional[int] = None) -> "ApiKey":
        """Create a new API key with a freshly generated secret."""
        return cls(
            id=str(uuid.uuid4()),
            key=generate_api_key(),
            created_at=created_at if created_at is not None else now_ms(),
        )
