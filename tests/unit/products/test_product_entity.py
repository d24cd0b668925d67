"""
Unit tests for Product domain entity and CreateProductHandler.
"""

import pytest

from products.application.commands.create_product import CreateProductCommand
from products.application.handlers.create_product_handler import CreateProductHandler
from products.domain.product import Product


@pytest.mark.unit
class TestProductEntity:
    """Tests for Product domain entity."""

    def test_create_product(self):
        """Create generates a prefixed id and creation time."""
        product = Product.create(name="Pro Plan", description="All features", price=2999)

        assert product.id.startswith("prod_")
        assert product.price == 2999
        assert product.created_at > 0

    def test_zero_price_allowed(self):
        """Free products are valid."""
        assert Product.create(name="Free", description="", price=0).price == 0

    @pytest.mark.parametrize("price", [-1, 9.99, "100", True])
    def test_invalid_price_rejected(self, price):
        """Price must be a non-negative integer."""
        with pytest.raises(ValueError):
            Product.create(name="Bad", description="", price=price)

    def test_blank_name_rejected(self):
        """Name is required."""
        with pytest.raises(ValueError):
            Product.create(name=" ", description="", price=1)


@pytest.mark.unit
@pytest.mark.asyncio
class TestCreateProductHandler:
    """Tests for CreateProductHandler."""

    async def test_create_product_success(self, product_repository):
        """The handler stores the new product."""
        handler = CreateProductHandler(product_repository)

        product = await handler.handle(
            CreateProductCommand(name="Team Plan", description="For teams", price=4999)
        )

        stored = await product_repository.get(product.id)
        assert stored == product
