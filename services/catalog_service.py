"""
Catalog service - product lookup, search and the visible product view
"""
import logging
from typing import Any, Dict, List, Optional

from models.catalog import ALL_CATEGORIES, Catalog
from models.exceptions import InvalidFilterValue, StorefrontError
from models.product import Product
from models.session import ShopSession
from database.repository import ProductRepository
from .base import error_result

logger = logging.getLogger(__name__)


def _check_filter(field_name: str, value: Any) -> Optional[str]:
    if value is not None and not isinstance(value, str):
        raise InvalidFilterValue(field_name, value)
    return value


class CatalogService:
    # Loads the catalog once at startup; every query afterwards is pure

    def __init__(self, product_repository: ProductRepository):
        self.product_repo = product_repository
        self.catalog = Catalog(product_repository.list_products())
        logger.info("Catalog loaded with %d products", len(self.catalog))

    def get_product(self, product_id: int) -> Product:
        # Raises UnknownProductReference for ids the catalog does not have
        return self.catalog.get(product_id)

    def search(self, text: Optional[str], category: Optional[str] = None) -> Dict[str, Any]:
        # One-off query that leaves every session's filters alone
        try:
            text = _check_filter("search text", text)
            category = _check_filter("category", category)
        except StorefrontError as e:
            return error_result(e)

        in_category = {product.id for product in self.catalog.filter_by_category(category)}
        matches = [product for product in self.catalog.search(text) if product.id in in_category]
        return {
            "success": True,
            "matches": [product.to_dict() for product in matches],
            "total_found": len(matches),
            "search_text": text or "",
            "category": category or ALL_CATEGORIES
        }

    def get_categories(self) -> List[str]:
        return self.catalog.categories()

    def set_search_text(self, session: ShopSession, text: Optional[str]) -> Dict[str, Any]:
        try:
            session.search_text = _check_filter("search text", text) or ""
        except StorefrontError as e:
            logger.warning("Search text rejected for session %s: %s", session.session_id, e)
            return error_result(e)
        return self.get_visible_products(session)

    def set_category(self, session: ShopSession, category: Optional[str]) -> Dict[str, Any]:
        try:
            session.category = _check_filter("category", category) or ALL_CATEGORIES
        except StorefrontError as e:
            logger.warning("Category rejected for session %s: %s", session.session_id, e)
            return error_result(e)
        return self.get_visible_products(session)

    def get_visible_products(self, session: ShopSession) -> Dict[str, Any]:
        # Recomputed from scratch for the session's current filter inputs
        visible = [product.to_dict() for product in session.visible_products(self.catalog)]
        for item in visible:
            item["in_wishlist"] = session.wishlist.contains(item["id"])

        if visible:
            message = f"{len(visible)} products found."
        else:
            message = "No products match your search."

        return {
            "success": True,
            "products": visible,
            "total_found": len(visible),
            "search_text": session.search_text,
            "category": session.category,
            "message": message
        }
