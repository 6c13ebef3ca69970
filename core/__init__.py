"""
Core package for the ShopEase storefront
Contains configuration and the main orchestration class
"""

from .config import Settings
from .storefront import ShopEaseStorefront

__all__ = [
    'Settings', 'ShopEaseStorefront'
]
