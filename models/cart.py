"""
Cart related data models
"""
from collections import OrderedDict
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterable, Iterator, List, Optional, Any

from .exceptions import InvalidQuantity
from .product import Product, price_text


def check_quantity(quantity) -> int:
    """Reject negative and non-integer quantities"""
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 0:
        raise InvalidQuantity(quantity)
    return quantity


@dataclass
class CartLine:
    """Cart line data model"""
    product_id: int
    name: str
    unit_price: Decimal
    image: str
    quantity: int = 1

    @classmethod
    def from_product(cls, product: Product) -> "CartLine":
        # Price is captured at add time, later catalog changes do not reach the line
        return cls(
            product_id=product.id,
            name=product.name,
            unit_price=product.price,
            image=product.image,
            quantity=1
        )

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "id": self.product_id,
            "name": self.name,
            "price": price_text(self.unit_price),
            "image": self.image,
            "quantity": self.quantity,
            "line_total": price_text(self.line_total)
        }


@dataclass
class CartSummary:
    """Cart summary data model"""
    total_lines: int
    total_items: int
    total_price: Decimal

    @classmethod
    def of(cls, lines: Iterable) -> "CartSummary":
        # Works for cart lines and snapshot lines alike
        lines = list(lines)
        return cls(
            total_lines=len(lines),
            total_items=sum(line.quantity for line in lines),
            total_price=sum((line.line_total for line in lines), Decimal("0"))
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "total_lines": self.total_lines,
            "total_items": self.total_items,
            "total_price": price_text(self.total_price)
        }


class CartLedger:
    """Insertion-ordered cart lines keyed by product id"""

    def __init__(self):
        self._lines: "OrderedDict[int, CartLine]" = OrderedDict()

    def __iter__(self) -> Iterator[CartLine]:
        return iter(list(self._lines.values()))

    def __len__(self) -> int:
        return len(self._lines)

    def __contains__(self, product_id) -> bool:
        return product_id in self._lines

    def lines(self) -> List[CartLine]:
        return list(self._lines.values())

    def get(self, product_id: int) -> Optional[CartLine]:
        return self._lines.get(product_id)

    def is_empty(self) -> bool:
        return not self._lines

    def add_or_increment(self, product: Product) -> CartLine:
        line = self._lines.get(product.id)
        if line is None:
            line = CartLine.from_product(product)
            self._lines[product.id] = line
        else:
            line.quantity += 1
        return line

    def set_quantity(self, product_id: int, quantity: int) -> bool:
        """Set a line's quantity; 0 removes it. Returns True if a line changed.

        A missing line is never created here, only add_or_increment does that.
        """
        check_quantity(quantity)
        line = self._lines.get(product_id)
        if line is None:
            return False
        if quantity == 0:
            del self._lines[product_id]
        else:
            line.quantity = quantity
        return True

    def increment(self, product_id: int) -> bool:
        line = self._lines.get(product_id)
        if line is None:
            return False
        return self.set_quantity(product_id, line.quantity + 1)

    def decrement(self, product_id: int) -> bool:
        line = self._lines.get(product_id)
        if line is None:
            return False
        return self.set_quantity(product_id, line.quantity - 1)

    def remove(self, product_id: int) -> bool:
        return self.set_quantity(product_id, 0)

    def total_price(self) -> Decimal:
        return sum((line.line_total for line in self._lines.values()), Decimal("0"))

    def total_items(self) -> int:
        return sum(line.quantity for line in self._lines.values())

    def summary(self) -> CartSummary:
        return CartSummary.of(self._lines.values())

    def clear(self):
        self._lines.clear()
