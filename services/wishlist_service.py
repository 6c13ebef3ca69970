"""
Wishlist service - save-for-later toggling
"""
from typing import Any, Dict

from models.exceptions import StorefrontError
from models.session import ShopSession
from .base import error_result
from .catalog_service import CatalogService


class WishlistService:

    def __init__(self, catalog_service: CatalogService):
        self.catalog_service = catalog_service

    def toggle_wishlist(self, session: ShopSession, product_id: int) -> Dict[str, Any]:
        try:
            product = self.catalog_service.get_product(product_id)
        except StorefrontError as e:
            return error_result(e)

        in_wishlist = session.wishlist.toggle(product.id)
        if in_wishlist:
            message = f"{product.name} has been added to your wishlist."
        else:
            message = f"{product.name} has been removed from your wishlist."

        return {
            "success": True,
            "product_id": product.id,
            "in_wishlist": in_wishlist,
            "message": message
        }

    def get_wishlist(self, session: ShopSession) -> Dict[str, Any]:
        items = [self.catalog_service.get_product(pid).to_dict() for pid in session.wishlist.ids()]
        return {
            "success": True,
            "items": items,
            "total": len(items)
        }
