"""
Handler for CreateProductCommand.
"""
import logging

from products.application.commands.create_product import CreateProductCommand
from products.domain.product import Product
from products.ports.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class CreateProductHandler:
    """Handler for CreateProductCommand."""

    def __init__(self, product_repository: ProductRepository):
        """Initialize handler with repository."""
        self.product_repository = product_repository

    async def handle(self, command: CreateProductCommand) -> Product:
        """
        Handle create product command.

        Args:
            command: CreateProductCommand

        Returns:
            Created Product entity with generated id and creation time
        """
        product = Product.create(
            name=command.name,
            description=command.description,
            price=command.price,
        )
        created = await self.product_repository.create(product)
        logger.info("Product created", extra={"product_id": created.id, "price": created.price})
        return created
