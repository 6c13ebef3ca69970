"""
Product related data models
"""
import math
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Dict, Any, Union

CENTS = Decimal("0.01")


def to_decimal(value: Union[Decimal, int, float, str]) -> Decimal:
    """Convert a price-like value to Decimal without float artifacts"""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def format_price(amount: Union[Decimal, int, float, str]) -> str:
    """Format an amount the way the storefront displays it, e.g. $1,234.50"""
    return "${:,.2f}".format(to_decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP))


def price_text(amount: Decimal) -> str:
    """Two-decimal string used in JSON payloads"""
    return str(to_decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class Product:
    """Product data model"""
    id: int
    name: str
    price: Decimal
    image: str = "/placeholder.svg"
    rating: float = 0.0
    reviews: int = 0
    description: str = ""
    category: str = ""
    original_price: Optional[Decimal] = None

    def __post_init__(self):
        # Frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "price", to_decimal(self.price))
        if self.original_price is not None:
            object.__setattr__(self, "original_price", to_decimal(self.original_price))

        if self.price < 0:
            raise ValueError(f"Price must be non-negative: {self.price}")
        if not 0.0 <= self.rating <= 5.0:
            raise ValueError(f"Rating must be between 0 and 5: {self.rating}")
        if self.reviews < 0:
            raise ValueError(f"Review count must be non-negative: {self.reviews}")

    @property
    def is_on_sale(self) -> bool:
        return self.original_price is not None and self.original_price > self.price

    @property
    def full_stars(self) -> int:
        return int(math.floor(self.rating))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "id": self.id,
            "name": self.name,
            "price": price_text(self.price),
            "original_price": price_text(self.original_price) if self.original_price is not None else None,
            "image": self.image,
            "rating": self.rating,
            "full_stars": self.full_stars,
            "reviews": self.reviews,
            "description": self.description,
            "category": self.category,
            "is_on_sale": self.is_on_sale
        }
