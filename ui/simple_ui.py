"""
Simple text-based UI for the storefront
"""
import time
from typing import Any, Dict, List

from core.storefront import ShopEaseStorefront
from models.checkout import PAYMENT_FIELDS

FIELD_PROMPTS = {
    "email": "Email (your@email.com): ",
    "card_number": "Card number (1234 5678 9012 3456): ",
    "expiry": "Expiry (MM/YY): ",
    "cvc": "CVC (123): ",
    "cardholder_name": "Full name (John Doe): ",
}


class SimpleStorefrontUI:
    """Simple text-based storefront"""

    def __init__(self, storefront: ShopEaseStorefront, poll_interval: float = 0.25):
        self.storefront = storefront
        self.session_id = "console_session"
        self.poll_interval = poll_interval

    def run(self):
        """Run the console storefront"""
        print("ShopEase")
        print("Discover amazing products with seamless shopping experience")
        print("Commands: list, search <text>, category <name>, categories, add <id>, "
              "qty <id> <n>, inc <id>, dec <id>, remove <id>, wish <id>, wishlist, cart, checkout, quit")
        self._show_products()

        while True:
            user_input = input("\n> ").strip()
            if not user_input:
                continue

            command, _, arg = user_input.partition(" ")
            command = command.lower()
            arg = arg.strip()

            if command in ("quit", "exit"):
                print("Thank you for shopping with us!")
                break
            elif command == "list":
                self._show_products()
            elif command == "search":
                self.storefront.set_search_text(self.session_id, arg)
                self._show_products()
            elif command == "category":
                self.storefront.set_category(self.session_id, arg or None)
                self._show_products()
            elif command == "categories":
                print(", ".join(self.storefront.get_categories()))
            elif command == "add":
                self._with_product_id(arg, lambda pid: self.storefront.add_to_cart(self.session_id, pid))
            elif command == "qty":
                self._handle_quantity(arg)
            elif command == "inc":
                self._with_product_id(arg, lambda pid: self.storefront.increment_quantity(self.session_id, pid))
            elif command == "dec":
                self._with_product_id(arg, lambda pid: self.storefront.decrement_quantity(self.session_id, pid))
            elif command == "remove":
                self._with_product_id(arg, lambda pid: self.storefront.remove_from_cart(self.session_id, pid))
            elif command == "wish":
                self._with_product_id(arg, lambda pid: self.storefront.toggle_wishlist(self.session_id, pid))
            elif command == "wishlist":
                self._show_wishlist()
            elif command == "cart":
                self._show_cart()
            elif command == "checkout":
                self._checkout()
            else:
                print("Unknown command.")

            self._show_notifications()

    def _show_products(self):
        result = self.storefront.get_visible_products(self.session_id)
        print(f"\n{result['message']}")
        for product in result["products"]:
            sale = " [Sale]" if product["is_on_sale"] else ""
            heart = " <3" if product["in_wishlist"] else ""
            stars = "*" * product["full_stars"] + "." * (5 - product["full_stars"])
            print(f"{product['id']}. {product['name']} ${product['price']}{sale}{heart} "
                  f"{stars} ({product['rating']} / {product['reviews']} reviews)")

    def _show_wishlist(self):
        result = self.storefront.get_wishlist(self.session_id)
        if not result["items"]:
            print("Your wishlist is empty")
        for item in result["items"]:
            print(f"- {item['name']} ${item['price']}")

    def _show_cart(self):
        """Show cart contents"""
        cart = self.storefront.get_cart_details(self.session_id)
        print(f"\n{cart['message']}")
        for item in cart["cart_items"]:
            print(f"- [{item['id']}] {item['name']} x{item['quantity']}: ${item['line_total']}")
        if cart["cart_items"]:
            print(f"Total: {cart['total_display']}")

    def _show_notifications(self):
        for notification in self.storefront.drain_notifications(self.session_id):
            print(f"* {notification['title']}: {notification['description']}")

    def _with_product_id(self, arg: str, action):
        try:
            product_id = int(arg)
        except ValueError:
            print("Please give a product number.")
            return
        self._show_result(action(product_id))

    def _handle_quantity(self, arg: str):
        parts = arg.split()
        try:
            product_id, quantity = int(parts[0]), int(parts[1])
        except (IndexError, ValueError):
            print("Usage: qty <id> <quantity>")
            return
        self._show_result(self.storefront.update_quantity(self.session_id, product_id, quantity))

    def _show_result(self, result: Dict[str, Any]):
        if result["success"]:
            if result.get("message"):
                print(result["message"])
        else:
            print(f"Error: {result['error']}")

    def _read_payment_form(self) -> Dict[str, str]:
        return {name: input(FIELD_PROMPTS[name]).strip() for name in PAYMENT_FIELDS}

    def _checkout(self):
        """Hand the cart to checkout and run the simulated payment"""
        result = self.storefront.initiate_checkout(self.session_id)
        if not result["success"]:
            return

        summary = self.storefront.open_checkout(self.session_id)
        if not summary["success"]:
            print(summary["error"])
            return
        self._print_order_summary(summary["items"], summary["total_display"])

        form = self._read_payment_form()
        payment = self.storefront.confirm_payment(self.session_id, form)
        if not payment["success"]:
            print(f"Payment not started: {payment['error']}")
            self.storefront.back_to_shop(self.session_id)
            return

        print("Processing...")
        while not payment["settled"]:
            time.sleep(self.poll_interval)
            payment = self.storefront.poll_checkout(self.session_id)

    def _print_order_summary(self, items: List[Dict[str, Any]], total_display: str):
        print("\nOrder Summary")
        for item in items:
            print(f"- {item['name']} (Quantity: {item['quantity']}) {item['line_total']}")
        print(f"Total: {total_display}")
