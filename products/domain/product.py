"""
Product domain entity.

This is the core domain entity representing a product.
It contains business logic and is independent of infrastructure.
"""
import uuid
from dataclasses import dataclass
from typing import Optional

from core.domain.entity import Entity
from core.domain.value_objects import now_ms


@dataclass(frozen=True)
class Product(Entity):
    """
    Product domain entity.

    Represents a product that can be licensed. Prices are
    integer amounts in minor currency units (cents).
    """

    name: str
    description: str
    price: int
    created_at: int

    def __post_init__(self):
        """Validate product entity."""
        super().__post_init__()
        if not isinstance(self.name, str) or len(self.name.strip()) == 0:
            raise ValueError("Product name cannot be empty")
        if len(self.name) > 255:
            raise ValueError("Product name too long")
        if not isinstance(self.description, str):
            raise ValueError("Product description must be a string")
        if isinstance(self.price, bool) or not isinstance(self.price, int) or self.price < 0:
            raise ValueError("Product price must be a non-negative integer")

    @classmethod
    def create(
        cls,
        name: str,
        description: str,
        price: int,
        product_id: Optional[str] = None,
        created_at: Optional[int] = None,
    ) -> "Product":
        """
        Create a new Product entity.

        Args:
            name: Product display name
            description: Product description
            price: Price in minor currency units
            product_id: Optional id (generated if not provided)
            created_at: Optional creation time in epoch ms (defaults to now)

        Returns:
            Product entity instance
        """
        return cls(
            id=product_id or f"prod_{uuid.uuid4()}",
            name=name,
            description=description,
            price=price,
            created_at=created_at if created_at is not None else now_ms(),
        )
