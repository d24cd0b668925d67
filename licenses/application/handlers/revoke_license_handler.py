"""
Handler for RevokeLicenseCommand.
"""
import logging

from core.domain.value_objects import LicenseStatus
from core.metrics import licenses_revoked_total
from licenses.application.commands.revoke_license import RevokeLicenseCommand
from licenses.domain.license import License
from licenses.ports.license_repository import LicenseRepository

logger = logging.getLogger(__name__)


class RevokeLicenseHandler:
    """Handler for RevokeLicenseCommand."""

    def __init__(self, license_repository: LicenseRepository):
        """Initialize handler with repository."""
        self.license_repository = license_repository

    async def handle(self, command: RevokeLicenseCommand) -> License:
        """
        Handle revoke license command.

        Args:
            command: RevokeLicenseCommand

        Returns:
            Banned License entity

        Raises:
            RecordNotFoundError: If license not found
        """
        revoked = await self.license_repository.revoke(command.license_id)
        licenses_revoked_total.inc()
        logger.info(
            "License revoked",
            extra={"license_id": revoked.id, "status": LicenseStatus.BANNED.value},
        )
        return revoked
