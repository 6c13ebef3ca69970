"""
Models package for the ShopEase storefront
Contains data models and the cart/checkout state engines
"""

from .product import Product, format_price
from .catalog import Catalog, FilteredProducts, ALL_CATEGORIES
from .cart import CartLine, CartLedger, CartSummary
from .wishlist import Wishlist
from .checkout import CheckoutState, CheckoutSnapshot, SnapshotLine, PaymentDetails
from .notification import Notification, NotificationType
from .session import ShopSession

__all__ = [
    'Product', 'format_price',
    'Catalog', 'FilteredProducts', 'ALL_CATEGORIES',
    'CartLine', 'CartLedger', 'CartSummary',
    'Wishlist',
    'CheckoutState', 'CheckoutSnapshot', 'SnapshotLine', 'PaymentDetails',
    'Notification', 'NotificationType',
    'ShopSession'
]
