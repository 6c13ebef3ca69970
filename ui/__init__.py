"""
UI package for the ShopEase storefront
Contains user interface implementations
"""

from .simple_ui import SimpleStorefrontUI

__all__ = [
    'SimpleStorefrontUI'
]
