"""
Database package for the ShopEase storefront
Contains database connection and repository classes
"""

from .connection import DatabaseConnection
from .repository import ProductRepository, HandoffRepository
from .seed_data import DEFAULT_PRODUCTS

__all__ = [
    'DatabaseConnection',
    'ProductRepository', 'HandoffRepository',
    'DEFAULT_PRODUCTS'
]
