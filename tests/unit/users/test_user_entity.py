"""
Unit tests for User domain entity.
"""

import pytest

from users.domain.user import User


@pytest.mark.unit
class TestUserEntity:
    """Tests for User domain entity."""

    def test_create_user(self):
        """Create strips the name and generates an id."""
        user = User.create("  Admin User ")

        assert user.name == "Admin User"
        assert len(user.id) == 36

    def test_create_user_with_id(self):
        """An explicit id is kept."""
        assert User.create("A", user_id="u9").id == "u9"

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_rejected(self, name):
        """Names cannot be blank."""
        with pytest.raises(ValueError):
            User.create(name)

    def test_empty_id_rejected(self):
        """Every entity needs an id."""
        with pytest.raises(ValueError):
            User(id="", name="A")


@pytest.mark.unit
@pytest.mark.asyncio
class TestCreateUserHandler:
    """Tests for CreateUserHandler."""

    async def test_create_user_success(self, user_repository):
        """The handler stores a user with a generated id."""
        from users.application.commands.create_user import CreateUserCommand
        from users.application.handlers.create_user_handler import CreateUserHandler

        user = await CreateUserHandler(user_repository).handle(CreateUserCommand(name="Robin"))

        assert (await user_repository.get(user.id)).name == "Robin"
