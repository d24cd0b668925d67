"""
Starter API key for an empty api keys collection.
"""
from typing import List

from apikeys.domain.api_key import ApiKey
from core.application.seeding import SeedPolicy
from core.domain.value_objects import DAY_MS, now_ms


class ApiKeySeedPolicy(SeedPolicy[ApiKey]):
    """Seeds one live key created five days ago."""

    collection = "api_keys"

    def build(self) -> List[ApiKey]:
        return [ApiKey.create(created_at=now_ms() - DAY_MS * 5)]
