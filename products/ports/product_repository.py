"""
Product repository port (interface).

This defines the contract for product persistence operations.
Implementations are in the infrastructure layer.
"""
from core.ports.entity_repository import EntityRepository
from products.domain.product import Product


class ProductRepository(EntityRepository[Product]):
    """
    Abstract repository for Product entities.

    Products add no operations to the generic collection contract.
    """
