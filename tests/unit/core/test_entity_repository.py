"""
Unit tests for InMemoryEntityRepository.
"""

import pytest

from core.domain.exceptions import RecordNotFoundError
from core.infrastructure.repositories.memory_entity_repository import InMemoryEntityRepository
from users.domain.user import User


@pytest.mark.unit
@pytest.mark.asyncio
class TestInMemoryEntityRepository:
    """Tests for the async repository adapter."""

    async def test_create_get_delete(self, user_repository):
        """Basic record lifecycle."""
        user = await user_repository.create(User.create("  Dana  "))

        fetched = await user_repository.get(user.id)
        assert fetched.name == "Dana"
        assert await user_repository.exists(user.id) is True
        assert await user_repository.delete(user.id) is True

        with pytest.raises(RecordNotFoundError):
            await user_repository.get(user.id)

    async def test_ensure_seed_then_list(self, user_repository):
        """Seeding populates the collection on first use only."""
        assert await user_repository.ensure_seed() == 2
        assert await user_repository.ensure_seed() == 0

        page = await user_repository.list()
        assert [user.id for user in page.items] == ["u1", "u2"]
        assert page.next is None

    async def test_delete_many(self, user_repository):
        """Bulk delete reports only removed records."""
        await user_repository.ensure_seed()

        assert await user_repository.delete_many(["u1", "ghost"]) == 1
        assert await user_repository.count() == 1

    async def test_repository_without_policy_never_seeds(self, user_store):
        """A repository built without a policy leaves its store alone."""
        repository = InMemoryEntityRepository(user_store)

        assert await repository.ensure_seed() == 0
        assert repository.collection == "users"
        assert await repository.count() == 0
