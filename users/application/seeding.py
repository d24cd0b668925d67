"""
Starter users for an empty users collection.
"""
from typing import List

from core.application.seeding import SeedPolicy
from users.domain.user import User


class UserSeedPolicy(SeedPolicy[User]):
    """Seeds the dashboard's default accounts."""

    collection = "users"

    def build(self) -> List[User]:
        return [
            User(id="u1", name="Admin User"),
            User(id="u2", name="Support Team"),
        ]
