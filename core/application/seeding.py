"""
Seeding policy.

A collection is populated with starter data the first time a reader
needs it. The policy only describes the batch; the store performs the
check-and-insert atomically, so a collection is never seeded twice.
"""
import logging
from abc import ABC, abstractmethod
from typing import Generic, List, TypeVar

from core.infrastructure.storage.collection_store import CollectionStore
from core.metrics import store_seed_batches_total

logger = logging.getLogger(__name__)

R = TypeVar("R")


class SeedPolicy(ABC, Generic[R]):
    """
    Abstract base class for collection seed data.

    Attributes:
        collection (str): Name of the collection the batch belongs to.
    """

    collection: str = ""

    @abstractmethod
    def build(self) -> List[R]:
        """Build the starter batch of records."""
        pass

    def log(self, message: str):
        """Helper to log seeding progress."""
        logger.info(f"[{self.__class__.__name__}] {message}")


def ensure_seed(store: CollectionStore, policy: SeedPolicy) -> int:
    """
    Seed `store` with the policy's batch if it has never been seeded.

    Args:
        store: Collection store to populate
        policy: Seed policy providing the batch

    Returns:
        Number of records inserted (0 when already seeded or non-empty)
    """
    inserted = store.seed(policy.build)
    if inserted:
        store_seed_batches_total.labels(collection=store.name).inc()
        policy.log(f"Seeded {inserted} {store.name} record(s).")
    return inserted
