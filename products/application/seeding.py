"""
Starter catalogue for an empty products collection.
"""
from typing import List

from core.application.seeding import SeedPolicy
from core.domain.value_objects import DAY_MS, now_ms
from products.domain.product import Product

# (id, name, description, price, age in days)
SEED_PRODUCTS = [
    ("prod_1", "Pro Plan", "Full access to all features for professionals.", 2999, 10),
    ("prod_2", "Enterprise Plan", "Dedicated support and infrastructure for large teams.", 9999, 20),
    ("prod_3", "Basic Plan", "Essential features for getting started.", 999, 5),
    ("prod_4", "Lifetime Deal", "One-time purchase for lifetime access.", 49900, 30),
    ("prod_5", "Team Bundle", "Access for up to 5 users.", 7999, 15),
]


class ProductSeedPolicy(SeedPolicy[Product]):
    """Seeds the five standard plans."""

    collection = "products"

    def build(self) -> List[Product]:
        now = now_ms()
        return [
            Product(
                id=product_id,
                name=name,
                description=description,
                price=price,
                created_at=now - DAY_MS * age_days,
            )
            for product_id, name, description, price, age_days in SEED_PRODUCTS
        ]
