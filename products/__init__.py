"""
Products module - sellable plans that licenses are issued for.

This module handles:
- Product entity and domain logic
- Product creation and seed catalogue
"""
