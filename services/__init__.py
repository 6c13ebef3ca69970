"""
Services package for the ShopEase storefront
Contains business logic services
"""

from .notification_service import NotificationService
from .catalog_service import CatalogService
from .cart_service import CartService
from .wishlist_service import WishlistService
from .checkout_service import CheckoutService

__all__ = [
    'NotificationService', 'CatalogService', 'CartService',
    'WishlistService', 'CheckoutService'
]
