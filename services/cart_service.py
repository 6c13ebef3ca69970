"""
Cart service - handles cart operations
"""
import logging
from typing import Any, Dict

from models.exceptions import StorefrontError
from models.product import format_price
from models.session import ShopSession
from .base import error_result
from .catalog_service import CatalogService
from .notification_service import NotificationService

logger = logging.getLogger(__name__)


class CartService:
    # Cart ledger operations for one session at a time

    def __init__(self, catalog_service: CatalogService, notification_service: NotificationService):
        self.catalog_service = catalog_service
        self.notifications = notification_service

    def add_to_cart(self, session: ShopSession, product_id: int) -> Dict[str, Any]:
        # Adds one unit; a product already in the cart gets its quantity bumped
        try:
            product = self.catalog_service.get_product(product_id)
            line = session.ledger.add_or_increment(product)
        except StorefrontError as e:
            logger.warning("add_to_cart rejected for session %s: %s", session.session_id, e)
            return error_result(e)

        self.notifications.item_added(session.session_id, product.name)
        logger.info("Session %s added product %s (qty now %d)",
                    session.session_id, product.id, line.quantity)

        return {
            "success": True,
            "item": line.to_dict(),
            "summary": session.ledger.summary().to_dict(),
            "message": f"{product.name} has been added to your cart."
        }

    def _change_line(self, session: ShopSession, product_id: int, change, action: str) -> Dict[str, Any]:
        # Applies one ledger change to an existing line and reports the outcome
        try:
            product = self.catalog_service.get_product(product_id)
            changed = change(session.ledger, product.id)
        except StorefrontError as e:
            logger.warning("%s rejected for session %s: %s", action, session.session_id, e)
            return error_result(e)

        line = session.ledger.get(product.id)
        if not changed:
            message = f"{product.name} is not in your cart."
        elif line is None:
            message = f"{product.name} has been removed from your cart."
        else:
            message = f"Quantity of {product.name} changed to {line.quantity}."

        return {
            "success": True,
            "changed": changed,
            "item": line.to_dict() if line else None,
            "summary": session.ledger.summary().to_dict(),
            "message": message
        }

    def update_quantity(self, session: ShopSession, product_id: int, quantity: int) -> Dict[str, Any]:
        # Sets the exact quantity of an existing line, 0 removes it
        return self._change_line(session, product_id,
                                 lambda ledger, pid: ledger.set_quantity(pid, quantity),
                                 "update_quantity")

    def increment_quantity(self, session: ShopSession, product_id: int) -> Dict[str, Any]:
        return self._change_line(session, product_id,
                                 lambda ledger, pid: ledger.increment(pid), "increment_quantity")

    def decrement_quantity(self, session: ShopSession, product_id: int) -> Dict[str, Any]:
        # Going below one removes the line
        return self._change_line(session, product_id,
                                 lambda ledger, pid: ledger.decrement(pid), "decrement_quantity")

    def remove_from_cart(self, session: ShopSession, product_id: int) -> Dict[str, Any]:
        return self._change_line(session, product_id,
                                 lambda ledger, pid: ledger.remove(pid), "remove_from_cart")

    def get_cart_details(self, session: ShopSession) -> Dict[str, Any]:
        # Current lines plus totals, recomputed on every call
        ledger = session.ledger
        summary = ledger.summary()

        if ledger.is_empty():
            message = "Your cart is empty"
        else:
            message = f"{summary.total_items} items in your cart."

        return {
            "success": True,
            "cart_items": [line.to_dict() for line in ledger],
            "summary": summary.to_dict(),
            "total_display": format_price(summary.total_price),
            "message": message
        }

    def clear_cart(self, session: ShopSession) -> Dict[str, Any]:
        removed = len(session.ledger)
        session.ledger.clear()
        return {
            "success": True,
            "removed_items": removed,
            "message": "Your cart has been cleared."
        }
