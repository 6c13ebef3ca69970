"""
Wishlist data model
"""
from typing import List, Set


class Wishlist:
    """Save-for-later membership set of product ids"""

    def __init__(self):
        self._ids: Set[int] = set()

    def __contains__(self, product_id) -> bool:
        return product_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def contains(self, product_id: int) -> bool:
        return product_id in self._ids

    def toggle(self, product_id: int) -> bool:
        """Flip membership and return whether the id is now on the list"""
        if product_id in self._ids:
            self._ids.remove(product_id)
            return False
        self._ids.add(product_id)
        return True

    def ids(self) -> List[int]:
        return sorted(self._ids)

    def clear(self):
        self._ids.clear()
