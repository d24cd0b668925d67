"""
Core module for shared domain infrastructure.

This module contains:
- Domain exceptions and value objects
- The record codec and collection store
- Seeding and repository abstractions
- Middleware components and metrics
"""
