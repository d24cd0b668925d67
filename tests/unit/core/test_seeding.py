"""
Unit tests for collection seed policies.
"""

import pytest

from apikeys.application.seeding import ApiKeySeedPolicy
from chats.application.seeding import ChatSeedPolicy
from core.application.seeding import ensure_seed
from core.domain.value_objects import DAY_MS, LicenseStatus, now_ms
from licenses.application.seeding import LicenseSeedPolicy
from products.application.seeding import ProductSeedPolicy
from users.application.seeding import UserSeedPolicy


@pytest.mark.unit
class TestSeedPolicies:
    """Tests for the starter batches."""

    def test_users_seed(self):
        """Two default accounts."""
        users = UserSeedPolicy().build()

        assert [(user.id, user.name) for user in users] == [
            ("u1", "Admin User"),
            ("u2", "Support Team"),
        ]

    def test_chats_seed(self):
        """One board with a greeting from the admin user."""
        (chat,) = ChatSeedPolicy().build()

        assert chat.id == "c1"
        assert chat.title == "General"
        assert [(m.id, m.user_id, m.text) for m in chat.messages] == [("m1", "u1", "Hello")]

    def test_products_seed(self):
        """Five plans with fixed ids and prices."""
        products = ProductSeedPolicy().build()

        assert [product.id for product in products] == [f"prod_{i}" for i in range(1, 6)]
        assert products[0].name == "Pro Plan"
        assert products[0].price == 2999
        assert products[3].price == 49900

    def test_licenses_seed_status_distribution(self):
        """Ten licenses cycling active, expired and banned."""
        licenses = LicenseSeedPolicy().build()
        statuses = [license.status for license in licenses]

        assert len(licenses) == 10
        assert statuses.count(LicenseStatus.ACTIVE) == 4
        assert statuses.count(LicenseStatus.EXPIRED) == 3
        assert statuses.count(LicenseStatus.BANNED) == 3
        assert licenses[0].id == "lic_seed_1"
        assert licenses[5].product_id == "prod_1"
        assert licenses[9].metadata == {"customerId": "cust_10"}

    def test_licenses_seed_expiry_matches_status(self):
        """Active seeds expire in the future, expired in the past, banned never."""
        now = now_ms()
        for license in LicenseSeedPolicy().build():
            if license.status == LicenseStatus.ACTIVE:
                assert license.expires_at > now
                assert license.effective_status() == LicenseStatus.ACTIVE
            elif license.status == LicenseStatus.EXPIRED:
                assert license.expires_at < now
            else:
                assert license.expires_at is None

    def test_licenses_seed_keys_are_unique(self):
        """Every seeded license has its own key."""
        keys = [license.key for license in LicenseSeedPolicy().build()]

        assert len(set(keys)) == len(keys)

    def test_api_key_seed(self):
        """One live key created five days ago."""
        (api_key,) = ApiKeySeedPolicy().build()

        assert api_key.key.startswith("sk_live_")
        assert now_ms() - api_key.created_at >= DAY_MS * 5

    def test_ensure_seed_inserts_once(self, user_store):
        """ensure_seed delegates to the store's one-time seed."""
        policy = UserSeedPolicy()

        assert ensure_seed(user_store, policy) == 2
        assert ensure_seed(user_store, policy) == 0
        assert user_store.count() == 2
