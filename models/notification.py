"""
Notification data models (toasts rendered by the presentation layer)
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict


class NotificationType(Enum):
    ITEM_ADDED = "item-added"
    CART_EMPTY_REJECTION = "cart-empty-rejection"
    CHECKOUT_INITIATED = "checkout-initiated"
    PAYMENT_SETTLED = "payment-settled"
    VALIDATION_ERRORS = "validation-errors"


@dataclass
class Notification:
    """Notification data model"""
    type: NotificationType
    title: str
    description: str = ""
    variant: str = "default"
    data: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "type": self.type.value,
            "title": self.title,
            "description": self.description,
            "variant": self.variant,
            "data": dict(self.data)
        }
