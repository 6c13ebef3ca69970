"""
Checkout related data models
"""
import json
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .cart import CartLedger, CartSummary
from .product import price_text, to_decimal


class CheckoutState(Enum):
    IDLE = "idle"
    SNAPSHOTTING = "snapshotting"
    PROCESSING = "processing"
    SETTLED = "settled"


@dataclass(frozen=True)
class SnapshotLine:
    """One cart line as it was when checkout started"""
    product_id: int
    name: str
    price: Decimal
    image: str
    quantity: int

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary (handoff wire format)"""
        return {
            "id": self.product_id,
            "name": self.name,
            "price": price_text(self.price),
            "image": self.image,
            "quantity": self.quantity
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SnapshotLine":
        try:
            return cls(
                product_id=int(data["id"]),
                name=str(data["name"]),
                price=to_decimal(data["price"]),
                image=str(data.get("image", "")),
                quantity=int(data["quantity"])
            )
        except (KeyError, TypeError, ValueError, InvalidOperation) as e:
            raise ValueError(f"Malformed checkout snapshot line: {data!r}") from e


@dataclass(frozen=True)
class CheckoutSnapshot:
    """Immutable copy of the cart handed to the checkout screen"""
    lines: Tuple[SnapshotLine, ...] = ()

    @classmethod
    def from_ledger(cls, ledger: CartLedger) -> "CheckoutSnapshot":
        return cls(lines=tuple(
            SnapshotLine(
                product_id=line.product_id,
                name=line.name,
                price=line.unit_price,
                image=line.image,
                quantity=line.quantity
            )
            for line in ledger
        ))

    def __len__(self) -> int:
        return len(self.lines)

    def is_empty(self) -> bool:
        return not self.lines

    def summary(self) -> CartSummary:
        return CartSummary.of(self.lines)

    def total_price(self) -> Decimal:
        return self.summary().total_price

    def to_json(self) -> str:
        return json.dumps([line.to_dict() for line in self.lines])

    @classmethod
    def from_json(cls, payload: Optional[str]) -> "CheckoutSnapshot":
        # A missing slot reads as an empty snapshot, like an empty stored list
        if not payload:
            return cls()
        try:
            raw = json.loads(payload)
        except json.JSONDecodeError as e:
            raise ValueError("Checkout snapshot is not valid JSON") from e
        if not isinstance(raw, list):
            raise ValueError("Checkout snapshot must be a list of lines")
        return cls(lines=tuple(SnapshotLine.from_dict(item) for item in raw))


PAYMENT_FIELDS = ("email", "card_number", "expiry", "cvc", "cardholder_name")


@dataclass
class PaymentDetails:
    """Payment form fields. Only presence is checked, never card validity."""
    email: str = ""
    card_number: str = ""
    expiry: str = ""
    cvc: str = ""
    cardholder_name: str = ""

    @classmethod
    def from_form(cls, form: Optional[Dict[str, Any]]) -> "PaymentDetails":
        form = form or {}
        return cls(**{name: str(form.get(name) or "").strip() for name in PAYMENT_FIELDS})

    def missing_fields(self) -> List[str]:
        return [name for name in PAYMENT_FIELDS if not getattr(self, name)]

    def masked_card(self) -> str:
        digits = "".join(ch for ch in self.card_number if ch.isdigit())
        return "**** " + digits[-4:] if digits else ""
