"""
Composition root for entity collections.

One collection store per entity type is built when the application
starts and lives for the whole process. Views resolve repositories
through get_repositories() instead of constructing their own.
"""
from dataclasses import dataclass
from typing import Dict, Optional

from django.apps import apps
from django.conf import settings

from apikeys.application.seeding import ApiKeySeedPolicy
from apikeys.infrastructure.repositories.memory_api_key_repository import (
    API_KEY_CODEC,
    API_KEY_UNIQUE_FIELDS,
    InMemoryApiKeyRepository,
)
from apikeys.ports.api_key_repository import ApiKeyRepository
from chats.application.seeding import ChatSeedPolicy
from chats.infrastructure.repositories.memory_chat_repository import CHAT_CODEC, InMemoryChatRepository
from chats.ports.chat_repository import ChatRepository
from core.infrastructure.storage.collection_store import CollectionStore
from core.ports.entity_repository import EntityRepository
from licenses.application.seeding import LicenseSeedPolicy
from licenses.infrastructure.repositories.memory_license_repository import (
    LICENSE_CODEC,
    LICENSE_UNIQUE_FIELDS,
    InMemoryLicenseRepository,
)
from licenses.ports.license_repository import LicenseRepository
from products.application.seeding import ProductSeedPolicy
from products.infrastructure.repositories.memory_product_repository import (
    PRODUCT_CODEC,
    InMemoryProductRepository,
)
from products.ports.product_repository import ProductRepository
from users.application.seeding import UserSeedPolicy
from users.infrastructure.repositories.memory_user_repository import USER_CODEC, InMemoryUserRepository
from users.ports.user_repository import UserRepository

APP_LABEL = "SeverKeyService"


@dataclass
class Repositories:
    """Process-wide entity repositories."""

    users: UserRepository
    chats: ChatRepository
    products: ProductRepository
    licenses: LicenseRepository
    api_keys: ApiKeyRepository

    def by_collection(self) -> Dict[str, EntityRepository]:
        return {
            "users": self.users,
            "chats": self.chats,
            "products": self.products,
            "licenses": self.licenses,
            "api_keys": self.api_keys,
        }


def build_repositories(store_settings: Optional[dict] = None) -> Repositories:
    """
    Build a fresh, empty set of repositories.

    Args:
        store_settings: Overrides for settings.STORE_SETTINGS

    Returns:
        Repositories backed by new collection stores
    """
    options = dict(getattr(settings, "STORE_SETTINGS", {}))
    options.update(store_settings or {})

    def store(name, codec, unique_fields=()):
        return CollectionStore(
            name,
            codec,
            unique_fields=unique_fields,
            default_page_size=options.get("DEFAULT_PAGE_SIZE", 20),
            max_page_size=options.get("MAX_PAGE_SIZE", 100),
            compaction_ratio=options.get("COMPACTION_RATIO", 0.5),
        )

    return Repositories(
        users=InMemoryUserRepository(store("users", USER_CODEC), UserSeedPolicy()),
        chats=InMemoryChatRepository(store("chats", CHAT_CODEC), ChatSeedPolicy()),
        products=InMemoryProductRepository(store("products", PRODUCT_CODEC), ProductSeedPolicy()),
        licenses=InMemoryLicenseRepository(
            store("licenses", LICENSE_CODEC, LICENSE_UNIQUE_FIELDS), LicenseSeedPolicy()
        ),
        api_keys=InMemoryApiKeyRepository(
            store("api_keys", API_KEY_CODEC, API_KEY_UNIQUE_FIELDS), ApiKeySeedPolicy()
        ),
    )


def get_repositories() -> Repositories:
    """Return the repositories owned by the running application."""
    return apps.get_app_config(APP_LABEL).repositories
