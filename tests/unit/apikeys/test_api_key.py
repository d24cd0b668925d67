"""
Unit tests for ApiKey domain entity and CreateApiKeyHandler.
"""

import pytest

from apikeys.application.commands.create_api_key import CreateApiKeyCommand
from apikeys.application.handlers.create_api_key_handler import CreateApiKeyHandler
from apikeys.domain.api_key import ApiKey, generate_api_key
from core.domain.exceptions import DuplicateValueError


@pytest.mark.unit
class TestApiKeyEntity:
    """Tests for ApiKey domain entity."""

    def test_generate_api_key_format(self):
        """Keys are sk_live_ followed by 32 hex characters."""
        key = generate_api_key()

        assert key.startswith("sk_live_")
        assert len(key) == len("sk_live_") + 32

    def test_create_with_timestamp(self):
        """An explicit creation time is kept."""
        assert ApiKey.create(created_at=123).created_at == 123

    def test_foreign_key_format_rejected(self):
        """Only live keys are accepted."""
        with pytest.raises(ValueError):
            ApiKey(id="k1", key="pk_test_123", created_at=1)


@pytest.mark.unit
@pytest.mark.asyncio
class TestCreateApiKeyHandler:
    """Tests for CreateApiKeyHandler."""

    async def test_create_api_key(self, api_key_repository):
        """Each call stores a new distinct key."""
        handler = CreateApiKeyHandler(api_key_repository)

        first = await handler.handle(CreateApiKeyCommand())
        second = await handler.handle(CreateApiKeyCommand())

        assert first.key != second.key
        assert await api_key_repository.count() == 2

    async def test_persistent_collision_raises(self, api_key_repository, monkeypatch):
        """Key collisions are retried a bounded number of times."""
        from apikeys.domain import api_key as api_key_module

        monkeypatch.setattr(api_key_module, "generate_api_key", lambda: "sk_live_" + "0" * 32)
        handler = CreateApiKeyHandler(api_key_repository)
        await handler.handle(CreateApiKeyCommand())

        with pytest.raises(DuplicateValueError):
            await handler.handle(CreateApiKeyCommand())
