"""
Pytest configuration and shared fixtures.
"""

import pytest
from django.apps import apps
from rest_framework.test import APIClient

from core.infrastructure.storage.codec import RecordCodec
from core.infrastructure.storage.collection_store import CollectionStore
from products.domain.product import Product
from SeverKeyService.container import APP_LABEL, build_repositories
from users.domain.user import User


@pytest.fixture(autouse=True)
def repositories():
    """Give every test a fresh, empty set of application repositories."""
    app_config = apps.get_app_config(APP_LABEL)
    previous = app_config.repositories
    app_config.repositories = build_repositories()
    yield app_config.repositories
    app_config.repositories = previous


@pytest.fixture
def user_repository(repositories):
    """Fixture for UserRepository."""
    return repositories.users


@pytest.fixture
def chat_repository(repositories):
    """Fixture for ChatRepository."""
    return repositories.chats


@pytest.fixture
def product_repository(repositories):
    """Fixture for ProductRepository."""
    return repositories.products


@pytest.fixture
def license_repository(repositories):
    """Fixture for LicenseRepository."""
    return repositories.licenses


@pytest.fixture
def api_key_repository(repositories):
    """Fixture for ApiKeyRepository."""
    return repositories.api_keys


@pytest.fixture
def user_codec():
    """Fixture for a User record codec."""
    return RecordCodec(User)


@pytest.fixture
def user_store(user_codec):
    """Fixture for an empty users store."""
    return CollectionStore("users", user_codec)


@pytest.fixture
def product_store():
    """Fixture for an empty products store."""
    return CollectionStore("products", RecordCodec(Product))


@pytest.fixture
def make_users():
    """Factory for numbered User entities."""

    def _make(count, prefix="u"):
        return [User(id=f"{prefix}{i}", name=f"User {i}") for i in range(1, count + 1)]

    return _make


@pytest.fixture
def api_client():
    """Fixture for DRF APIClient."""
    return APIClient()
