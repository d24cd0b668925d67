"""
License repository port (interface).

This defines the contract for license persistence operations.
Implementations are in the infrastructure layer.
"""
from abc import abstractmethod

from core.ports.entity_repository import EntityRepository
from licenses.domain.license import License


class LicenseRepository(EntityRepository[License]):
    """
    Abstract repository for License entities.

    License keys are unique across the collection for the
    lifetime of the repository, including deleted licenses.
    """

    @abstractmethod
    async def revoke(self, license_id: str) -> License:
        """
        Ban a license and persist the change.

        Args:
            license_id: License id

        Returns:
            The banned license (unchanged if it was already banned)

        Raises:
            RecordNotFoundError: If the license does not exist
        """
        pass
