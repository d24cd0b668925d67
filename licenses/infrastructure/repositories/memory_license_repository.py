"""
In-memory implementation of LicenseRepository port.
"""
from asgiref.sync import sync_to_async

from core.infrastructure.repositories.memory_entity_repository import InMemoryEntityRepository
from core.infrastructure.storage.codec import RecordCodec
from licenses.domain.license import License
from licenses.ports.license_repository import LicenseRepository

LICENSE_CODEC = RecordCodec(License)
# Unique for the life of the store, deleted licenses included.
LICENSE_UNIQUE_FIELDS = ("key",)


class InMemoryLicenseRepository(InMemoryEntityRepository, LicenseRepository):
    """Collection-store implementation of LicenseRepository."""

    @sync_to_async
    def revoke(self, license_id: str) -> License:
        return self.store.update(license_id, lambda license: license.revoke())
