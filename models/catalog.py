"""
Catalog and the filter/search view derived from it
"""
from typing import Iterable, Iterator, List, Optional, Tuple

from .exceptions import UnknownProductReference
from .product import Product

ALL_CATEGORIES = "All"


def _is_wildcard(category: Optional[str]) -> bool:
    return not category or category == ALL_CATEGORIES


def matches_search(product: Product, text: Optional[str]) -> bool:
    """Case-insensitive substring match on name or category"""
    needle = (text or "").lower()
    return needle in product.name.lower() or needle in product.category.lower()


def matches_category(product: Product, category: Optional[str]) -> bool:
    """Exact category match, "All" matches everything"""
    return _is_wildcard(category) or product.category == category


class Catalog:
    """Immutable, ordered list of the products offered in a session"""

    def __init__(self, products: Iterable[Product]):
        self._products: Tuple[Product, ...] = tuple(products)
        self._by_id = {}
        for product in self._products:
            if product.id in self._by_id:
                raise ValueError(f"Duplicate product id in catalog: {product.id}")
            self._by_id[product.id] = product

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, product_id) -> bool:
        return product_id in self._by_id

    @property
    def products(self) -> Tuple[Product, ...]:
        return self._products

    def get(self, product_id: int) -> Product:
        try:
            return self._by_id[product_id]
        except (KeyError, TypeError):
            raise UnknownProductReference(product_id) from None

    def search(self, text: Optional[str]) -> List[Product]:
        return [p for p in self._products if matches_search(p, text)]

    def filter_by_category(self, category: Optional[str]) -> List[Product]:
        return [p for p in self._products if matches_category(p, category)]

    def categories(self) -> List[str]:
        # Selector options: the wildcard first, then categories in catalog order
        seen = []
        for product in self._products:
            if product.category not in seen:
                seen.append(product.category)
        return [ALL_CATEGORIES] + seen


class FilteredProducts:
    """Visible products for a search text and category selection.

    Nothing is cached: every iteration walks the catalog again, so the view
    can be iterated any number of times and always agrees with its inputs.
    """

    def __init__(self, catalog: Catalog, search_text: str = "", category: str = ALL_CATEGORIES):
        self.catalog = catalog
        self.search_text = search_text
        self.category = category

    def __iter__(self) -> Iterator[Product]:
        for product in self.catalog:
            if matches_search(product, self.search_text) and matches_category(product, self.category):
                yield product

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return any(True for _ in self)

    def ids(self) -> List[int]:
        return [product.id for product in self]
