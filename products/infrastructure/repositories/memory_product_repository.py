"""
In-memory implementation of ProductRepository port.
"""
from core.infrastructure.repositories.memory_entity_repository import InMemoryEntityRepository
from core.infrastructure.storage.codec import RecordCodec
from products.domain.product import Product
from products.ports.product_repository import ProductRepository

PRODUCT_CODEC = RecordCodec(Product)


class InMemoryProductRepository(InMemoryEntityRepository, ProductRepository):
    """Collection-store implementation of ProductRepository."""
