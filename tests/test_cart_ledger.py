"""
Tests for the cart ledger and wishlist models
"""
import unittest
from decimal import Decimal

from models.cart import CartLedger
from models.exceptions import InvalidQuantity
from models.product import Product
from models.wishlist import Wishlist

PRODUCT_A = Product(id=1, name="Product A", price=Decimal("10.00"), category="Test")
PRODUCT_B = Product(id=2, name="Product B", price=Decimal("5.00"), category="Test")
PRODUCT_C = Product(id=3, name="Product C", price=Decimal("2.50"), category="Other")


class TestCartLedger(unittest.TestCase):
    """Test cases for CartLedger"""

    def setUp(self):
        self.ledger = CartLedger()

    def test_empty_ledger_totals(self):
        """Test that an empty ledger totals to zero"""
        self.assertEqual(self.ledger.total_price(), Decimal("0"))
        self.assertEqual(self.ledger.total_items(), 0)
        self.assertTrue(self.ledger.is_empty())

    def test_repeated_add_keeps_one_line(self):
        for count in range(1, 6):
            self.ledger.add_or_increment(PRODUCT_A)
            self.assertEqual(len(self.ledger), 1)
            self.assertEqual(self.ledger.get(PRODUCT_A.id).quantity, count)

    def test_scenario_totals(self):
        """Test A x2 + B x1, then A removed"""
        self.ledger.add_or_increment(PRODUCT_A)
        self.ledger.add_or_increment(PRODUCT_A)
        self.ledger.add_or_increment(PRODUCT_B)
        self.assertEqual(self.ledger.total_items(), 3)
        self.assertEqual(self.ledger.total_price(), Decimal("25.00"))

        self.ledger.set_quantity(PRODUCT_A.id, 0)
        self.assertEqual(self.ledger.total_items(), 1)
        self.assertEqual(self.ledger.total_price(), Decimal("5.00"))
        self.assertNotIn(PRODUCT_A.id, self.ledger)

    def test_set_quantity_zero_always_removes(self):
        for start in (1, 2, 7):
            ledger = CartLedger()
            for _ in range(start):
                ledger.add_or_increment(PRODUCT_A)
            self.assertTrue(ledger.set_quantity(PRODUCT_A.id, 0))
            self.assertIsNone(ledger.get(PRODUCT_A.id))

    def test_set_quantity_on_missing_line_is_noop(self):
        self.assertFalse(self.ledger.set_quantity(PRODUCT_A.id, 0))
        self.assertFalse(self.ledger.set_quantity(PRODUCT_A.id, 4))
        self.assertTrue(self.ledger.is_empty())

    def test_negative_quantity_rejected(self):
        """Test that a negative quantity leaves the line untouched"""
        self.ledger.add_or_increment(PRODUCT_A)
        with self.assertRaises(InvalidQuantity):
            self.ledger.set_quantity(PRODUCT_A.id, -1)
        self.assertEqual(self.ledger.get(PRODUCT_A.id).quantity, 1)

    def test_non_integer_quantity_rejected(self):
        self.ledger.add_or_increment(PRODUCT_A)
        for bad in (1.5, "2", None, True):
            with self.assertRaises(InvalidQuantity):
                self.ledger.set_quantity(PRODUCT_A.id, bad)

    def test_insertion_order_is_stable(self):
        self.ledger.add_or_increment(PRODUCT_B)
        self.ledger.add_or_increment(PRODUCT_A)
        self.ledger.add_or_increment(PRODUCT_C)
        self.ledger.add_or_increment(PRODUCT_B)
        self.ledger.set_quantity(PRODUCT_A.id, 9)
        self.assertEqual([line.product_id for line in self.ledger], [2, 1, 3])

    def test_total_items_tracks_changes(self):
        previous = self.ledger.total_items()
        for product in (PRODUCT_A, PRODUCT_B, PRODUCT_A):
            self.ledger.add_or_increment(product)
            self.assertGreater(self.ledger.total_items(), previous)
            previous = self.ledger.total_items()

        self.ledger.set_quantity(PRODUCT_A.id, 1)
        self.assertLessEqual(self.ledger.total_items(), previous)

    def test_increment_and_decrement(self):
        self.ledger.add_or_increment(PRODUCT_C)
        self.assertTrue(self.ledger.increment(PRODUCT_C.id))
        self.assertEqual(self.ledger.get(PRODUCT_C.id).quantity, 2)
        self.ledger.decrement(PRODUCT_C.id)
        self.ledger.decrement(PRODUCT_C.id)
        self.assertNotIn(PRODUCT_C.id, self.ledger)
        self.assertFalse(self.ledger.decrement(PRODUCT_C.id))

    def test_price_captured_at_add(self):
        line = self.ledger.add_or_increment(PRODUCT_C)
        self.assertEqual(line.unit_price, Decimal("2.50"))
        self.assertEqual(line.to_dict()["line_total"], "2.50")

    def test_clear(self):
        self.ledger.add_or_increment(PRODUCT_A)
        self.ledger.add_or_increment(PRODUCT_B)
        self.ledger.clear()
        self.assertTrue(self.ledger.is_empty())
        self.assertEqual(self.ledger.total_price(), 0)

    def test_summary(self):
        self.ledger.add_or_increment(PRODUCT_A)
        self.ledger.add_or_increment(PRODUCT_C)
        self.ledger.increment(PRODUCT_C.id)
        self.assertEqual(self.ledger.summary().to_dict(), {
            "total_lines": 2,
            "total_items": 3,
            "total_price": "15.00"
        })


class TestWishlist(unittest.TestCase):
    """Test cases for Wishlist"""

    def test_toggle_is_its_own_inverse(self):
        wishlist = Wishlist()
        self.assertTrue(wishlist.toggle(3))
        self.assertIn(3, wishlist)
        self.assertFalse(wishlist.toggle(3))
        self.assertFalse(wishlist.contains(3))

    def test_wishlist_independent_of_cart(self):
        wishlist = Wishlist()
        ledger = CartLedger()
        wishlist.toggle(PRODUCT_A.id)
        ledger.add_or_increment(PRODUCT_A)
        ledger.clear()
        self.assertTrue(wishlist.contains(PRODUCT_A.id))
        self.assertEqual(wishlist.ids(), [PRODUCT_A.id])


if __name__ == '__main__':
    unittest.main()
