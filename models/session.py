"""
Shopping session context
"""
import threading
from dataclasses import dataclass, field
from typing import Optional

from .cart import CartLedger
from .catalog import ALL_CATEGORIES, Catalog, FilteredProducts
from .checkout import CheckoutState
from .wishlist import Wishlist


@dataclass
class ShopSession:
    """Everything one shopper owns: cart, wishlist, filters and checkout state"""
    session_id: str
    ledger: CartLedger = field(default_factory=CartLedger)
    wishlist: Wishlist = field(default_factory=Wishlist)
    search_text: str = ""
    category: str = ALL_CATEGORIES
    checkout_state: CheckoutState = CheckoutState.IDLE
    payment_deadline: Optional[float] = None
    last_seen: float = 0.0
    # Held for the whole of every operation on this session
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False, compare=False)

    def visible_products(self, catalog: Catalog) -> FilteredProducts:
        return FilteredProducts(catalog, self.search_text, self.category)

    @property
    def is_processing(self) -> bool:
        return self.checkout_state is CheckoutState.PROCESSING
