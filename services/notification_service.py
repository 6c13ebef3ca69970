"""
Notification service - queues toasts for the presentation layer
"""
import logging
from typing import Dict, List

from models.notification import Notification, NotificationType

logger = logging.getLogger(__name__)


class NotificationService:
    # Per-session notification queues, drained by whoever renders them

    def __init__(self):
        self._queues: Dict[str, List[Notification]] = {}

    def notify(self, session_id: str, notification: Notification):
        self._queues.setdefault(session_id, []).append(notification)
        logger.debug("Notification %s for session %s", notification.type.value, session_id)

    def item_added(self, session_id: str, product_name: str):
        self.notify(session_id, Notification(
            type=NotificationType.ITEM_ADDED,
            title="Added to cart",
            description=f"{product_name} has been added to your cart.",
            data={"product_name": product_name}
        ))

    def cart_empty(self, session_id: str):
        self.notify(session_id, Notification(
            type=NotificationType.CART_EMPTY_REJECTION,
            title="Cart is empty",
            description="Please add some items to your cart before checkout.",
            variant="destructive"
        ))

    def checkout_initiated(self, session_id: str, total_display: str):
        self.notify(session_id, Notification(
            type=NotificationType.CHECKOUT_INITIATED,
            title="Checkout initiated",
            description=f"Total: {total_display}",
            data={"total": total_display}
        ))

    def payment_settled(self, session_id: str):
        self.notify(session_id, Notification(
            type=NotificationType.PAYMENT_SETTLED,
            title="Payment Successful!",
            description="Your order has been placed successfully. Thank you for shopping with us!"
        ))

    def validation_errors(self, session_id: str, missing_fields: List[str]):
        self.notify(session_id, Notification(
            type=NotificationType.VALIDATION_ERRORS,
            title="Missing payment details",
            description="Please fill in: " + ", ".join(missing_fields),
            variant="destructive",
            data={"fields": list(missing_fields)}
        ))

    def drain(self, session_id: str) -> List[Notification]:
        # Hand over and forget everything queued for the session
        return self._queues.pop(session_id, [])

    def discard(self, session_id: str):
        self._queues.pop(session_id, None)
