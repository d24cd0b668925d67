"""
Handler for CreateApiKeyCommand.
"""
import logging

from apikeys.application.commands.create_api_key import CreateApiKeyCommand
from apikeys.domain.api_key import ApiKey
from apikeys.ports.api_key_repository import ApiKeyRepository
from core.domain.exceptions import DuplicateValueError

logger = logging.getLogger(__name__)

KEY_GENERATION_ATTEMPTS = 3


class CreateApiKeyHandler:
    """Handler for CreateApiKeyCommand."""

    def __init__(self, api_key_repository: ApiKeyRepository):
        """Initialize handler with repository."""
        self.api_key_repository = api_key_repository

    async def handle(self, command: CreateApiKeyCommand) -> ApiKey:
        """
        Generate and store a new API key.

        Raises:
            DuplicateValueError: If every generated key collided
        """
        for attempt in range(1, KEY_GENERATION_ATTEMPTS + 1):
            try:
                created = await self.api_key_repository.create(ApiKey.create())
            except DuplicateValueError:
                logger.warning("API key collision, regenerating (attempt %d)", attempt)
                if attempt == KEY_GENERATION_ATTEMPTS:
                    raise
                continue

            logger.info("API key created", extra={"api_key_id": created.id})
            return created
