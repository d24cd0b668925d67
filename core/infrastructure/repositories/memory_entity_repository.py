"""
In-memory implementation of the EntityRepository port.

This adapter exposes a CollectionStore through the async
repository interface used by the application layer.
"""
from typing import List, Optional

from asgiref.sync import sync_to_async

from core.application.seeding import SeedPolicy, ensure_seed
from core.domain.value_objects import Page
from core.infrastructure.storage.collection_store import CollectionStore
from core.ports.entity_repository import EntityRepository


class InMemoryEntityRepository(EntityRepository):
    """
    Collection-store implementation of EntityRepository.

    Store calls are synchronous and guarded by the store's lock;
    they run through sync_to_async so no lock is ever held on
    the event loop.
    """

    def __init__(self, store: CollectionStore, seed_policy: Optional[SeedPolicy] = None):
        self.store = store
        self.seed_policy = seed_policy

    @property
    def collection(self) -> str:
        return self.store.name

    @sync_to_async
    def create(self, entity):
        return self.store.create(entity)

    @sync_to_async
    def get(self, entity_id: str):
        return self.store.get(entity_id)

    @sync_to_async
    def exists(self, entity_id: str) -> bool:
        return self.store.exists(entity_id)

    @sync_to_async
    def delete(self, entity_id: str) -> bool:
        return self.store.delete(entity_id)

    @sync_to_async
    def delete_many(self, entity_ids: List[str]) -> int:
        return self.store.delete_many(entity_ids)

    @sync_to_async
    def list(self, cursor: Optional[str] = None, limit: Optional[int] = None) -> Page:
        return self.store.list(cursor, limit)

    @sync_to_async
    def count(self) -> int:
        return self.store.count()

    @sync_to_async
    def ensure_seed(self) -> int:
        if self.seed_policy is None:
            return 0
        return ensure_seed(self.store, self.seed_policy)
