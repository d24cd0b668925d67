"""
CreateProductCommand.

Command to add a product to the catalogue.
"""
from dataclasses import dataclass


@dataclass
class CreateProductCommand:
    """Command to create a product."""

    name: str
    description: str
    price: int
