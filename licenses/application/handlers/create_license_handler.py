"""
Handler for CreateLicenseCommand.
"""
import logging

from core.domain.exceptions import DuplicateValueError
from core.metrics import licenses_created_total
from licenses.application.commands.create_license import CreateLicenseCommand
from licenses.domain.license import License
from licenses.ports.license_repository import LicenseRepository

logger = logging.getLogger(__name__)

KEY_GENERATION_ATTEMPTS = 3


class CreateLicenseHandler:
    """Handler for CreateLicenseCommand."""

    def __init__(self, license_repository: LicenseRepository):
        """Initialize handler with repository."""
        self.license_repository = license_repository

    async def handle(self, command: CreateLicenseCommand) -> License:
        """
        Handle create license command.

        The product id is stored as given; it is not checked against
        the product collection.

        Args:
            command: CreateLicenseCommand

        Returns:
            Created active License entity

        Raises:
            DuplicateValueError: If every generated key collided
        """
        for attempt in range(1, KEY_GENERATION_ATTEMPTS + 1):
            license = License.create(
                product_id=command.product_id,
                expires_at=command.expires_at,
                metadata=command.metadata,
            )
            try:
                created = await self.license_repository.create(license)
            except DuplicateValueError:
                logger.warning("License key collision, regenerating (attempt %d)", attempt)
                if attempt == KEY_GENERATION_ATTEMPTS:
                    raise
                continue

            licenses_created_total.inc()
            logger.info(
                "License created",
                extra={"license_id": created.id, "product_id": created.product_id},
            )
            return created
