"""
Tests for the Flask JSON API
"""
import os
import tempfile
import unittest

from app import create_app
from core.config import Settings
from core.storefront import ShopEaseStorefront

PAYMENT_FORM = {
    "email": "shopper@example.com",
    "card_number": "4242 4242 4242 4242",
    "expiry": "12/30",
    "cvc": "123",
    "cardholder_name": "Sam Shopper",
}


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


class TestStorefrontAPI(unittest.TestCase):
    """Test cases for the HTTP routes"""

    def setUp(self):
        """Set up test database and client"""
        self.test_db = tempfile.NamedTemporaryFile(delete=False, suffix='.db')
        self.test_db.close()
        self.clock = FakeClock()
        settings = Settings(db_path=self.test_db.name, secret_key="test-secret")
        self.storefront = ShopEaseStorefront(settings, clock=self.clock)
        self.app = create_app(settings, self.storefront)
        self.client = self.app.test_client()

    def tearDown(self):
        """Clean up test database"""
        os.unlink(self.test_db.name)

    def test_health(self):
        response = self.client.get('/health')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()["status"], "ok")

    def test_products_and_filters(self):
        response = self.client.get('/api/products')
        self.assertEqual(response.get_json()["total_found"], 6)

        response = self.client.put('/api/filters', json={"search": "cam", "category": "All"})
        body = response.get_json()
        self.assertEqual([p["id"] for p in body["products"]], [4])

        # Filters stick to the session
        body = self.client.get('/api/products').get_json()
        self.assertEqual(body["search_text"], "cam")
        self.assertEqual(body["total_found"], 1)

    def test_categories(self):
        body = self.client.get('/api/categories').get_json()
        self.assertEqual(body["categories"][0], "All")
        self.assertIn("Photography", body["categories"])

    def test_add_to_cart(self):
        response = self.client.post('/api/cart/items', json={"product_id": 2})
        self.assertEqual(response.status_code, 200)
        body = response.get_json()
        self.assertEqual(body["notifications"][0]["type"], "item-added")
        self.assertEqual(body["summary"]["total_items"], 1)

        cart = self.client.get('/api/cart').get_json()
        self.assertEqual(cart["cart_items"][0]["name"], "Smart Fitness Watch")
        self.assertEqual(cart["total_display"], "$299.99")

    def test_add_to_cart_bad_requests(self):
        self.assertEqual(self.client.post('/api/cart/items', json={}).status_code, 400)
        self.assertEqual(self.client.post('/api/cart/items', json={"product_id": "2"}).status_code, 400)

        response = self.client.post('/api/cart/items', json={"product_id": 99})
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.get_json()["error_type"], "UnknownProductReference")

    def test_quantity_routes(self):
        self.client.post('/api/cart/items', json={"product_id": 3})

        response = self.client.patch('/api/cart/items/3', json={"quantity": 3})
        self.assertEqual(response.get_json()["summary"]["total_items"], 3)

        response = self.client.patch('/api/cart/items/3', json={"quantity": -1})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["error_type"], "InvalidQuantity")

        response = self.client.delete('/api/cart/items/3')
        self.assertEqual(response.get_json()["summary"]["total_items"], 0)

    def test_wishlist_routes(self):
        body = self.client.post('/api/wishlist/5').get_json()
        self.assertTrue(body["in_wishlist"])
        body = self.client.get('/api/wishlist').get_json()
        self.assertEqual([item["id"] for item in body["items"]], [5])

    def test_empty_checkout(self):
        response = self.client.post('/api/checkout')
        self.assertEqual(response.status_code, 400)
        body = response.get_json()
        self.assertEqual(body["error_type"], "UserInputEmpty")
        self.assertEqual(body["notifications"][0]["type"], "cart-empty-rejection")

    def test_checkout_flow(self):
        """Test checkout, processing, single-flight and settlement"""
        self.client.post('/api/cart/items', json={"product_id": 4})
        response = self.client.post('/api/checkout')
        self.assertEqual(response.status_code, 200)
        notification = response.get_json()["notifications"][0]
        self.assertEqual(notification["type"], "checkout-initiated")
        self.assertEqual(notification["description"], "Total: $549.99")

        screen = self.client.get('/api/checkout').get_json()
        self.assertEqual(screen["pay_label"], "Pay $549.99")

        response = self.client.post('/api/checkout/payment', json=PAYMENT_FORM)
        self.assertEqual(response.status_code, 202)
        self.assertEqual(response.get_json()["state"], "processing")

        response = self.client.post('/api/checkout/payment', json=PAYMENT_FORM)
        self.assertEqual(response.status_code, 409)

        status = self.client.get('/api/checkout/status').get_json()
        self.assertFalse(status["settled"])

        self.clock.now += 2.0
        status = self.client.get('/api/checkout/status').get_json()
        self.assertTrue(status["settled"])
        self.assertEqual(status["notifications"][0]["type"], "payment-settled")

        cart = self.client.get('/api/cart').get_json()
        self.assertEqual(cart["cart_items"], [])

    def test_payment_missing_fields(self):
        self.client.post('/api/cart/items', json={"product_id": 1})
        self.client.post('/api/checkout')
        response = self.client.post('/api/checkout/payment', json={"email": "a@b.c"})
        self.assertEqual(response.status_code, 400)
        self.assertIn("cvc", response.get_json()["missing_fields"])

    def test_cancel_and_back(self):
        self.client.post('/api/cart/items', json={"product_id": 1})
        self.client.post('/api/checkout')
        self.client.post('/api/checkout/payment', json=PAYMENT_FORM)

        self.assertEqual(self.client.delete('/api/checkout/payment').status_code, 200)
        self.assertEqual(self.client.delete('/api/checkout/payment').status_code, 409)
        self.assertEqual(self.client.delete('/api/checkout').get_json()["state"], "idle")

    def test_clear_session(self):
        self.client.post('/api/cart/items', json={"product_id": 1})
        self.client.delete('/api/session')
        cart = self.client.get('/api/cart').get_json()
        self.assertEqual(cart["cart_items"], [])

    def test_filters_reject_non_strings(self):
        """Test that a bad filter value is refused and the session keeps working"""
        response = self.client.put('/api/filters', json={"search": 5})
        self.assertEqual(response.status_code, 400)
        response = self.client.put('/api/filters', json={"category": {"name": "Audio"}})
        self.assertEqual(response.status_code, 400)

        response = self.client.get('/api/products')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()["total_found"], 6)

        response = self.client.put('/api/filters', json={"search": None, "category": None})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()["category"], "All")

    def test_search_route(self):
        body = self.client.get('/api/search?q=smart&category=Smart%20Home').get_json()
        self.assertEqual([p["id"] for p in body["matches"]], [5])
        self.assertEqual(len(self.client.get('/api/search').get_json()["matches"]), 6)

        body = self.client.get('/api/products').get_json()
        self.assertEqual(body["search_text"], "")

    def test_increment_decrement_routes(self):
        self.client.post('/api/cart/items', json={"product_id": 6})

        body = self.client.post('/api/cart/items/6/increment').get_json()
        self.assertEqual(body["item"]["quantity"], 2)
        body = self.client.post('/api/cart/items/6/decrement').get_json()
        self.assertEqual(body["item"]["quantity"], 1)
        body = self.client.post('/api/cart/items/6/decrement').get_json()
        self.assertEqual(body["summary"]["total_items"], 0)

        response = self.client.post('/api/cart/items/42/increment')
        self.assertEqual(response.status_code, 404)

    def test_cookieless_requests_do_not_pile_up(self):
        """Test that new visitors past the limit push out the oldest sessions"""
        settings = Settings(db_path=self.test_db.name, secret_key="test-secret", max_sessions=10)
        storefront = ShopEaseStorefront(settings, clock=self.clock)
        app = create_app(settings, storefront)

        for _ in range(50):
            self.clock.now += 1
            self.assertEqual(app.test_client().get('/api/products').status_code, 200)

        self.assertEqual(storefront.session_count(), 10)
        self.assertEqual(app.test_client().get('/health').get_json()["sessions"], 10)

    def test_idle_sessions_expire(self):
        for _ in range(5):
            self.app.test_client().get('/api/products')
        self.assertEqual(self.storefront.session_count(), 5)

        self.clock.now += 3600
        self.client.get('/api/products')
        self.assertEqual(self.storefront.session_count(), 1)


if __name__ == '__main__':
    unittest.main()
