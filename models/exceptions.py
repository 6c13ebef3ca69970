"""
Storefront exception types
"""
from typing import List, Optional


class StorefrontError(Exception):
    """Base class for every recoverable storefront error"""


class UserInputEmpty(StorefrontError):
    """Checkout was requested while the cart holds no lines"""

    def __init__(self, message: str = "Please add some items to your cart before checkout."):
        super().__init__(message)


class UnknownProductReference(StorefrontError):
    """An operation referenced a product id the catalog does not have"""

    def __init__(self, product_id):
        self.product_id = product_id
        super().__init__(f"Product not found: {product_id}")


class InvalidQuantity(StorefrontError):
    """A quantity that is negative or not an integer"""

    def __init__(self, quantity):
        self.quantity = quantity
        super().__init__(f"Invalid quantity: {quantity!r}")


class InvalidCheckoutState(StorefrontError):
    """The checkout flow cannot take this step from its current state"""


class CheckoutInProgress(InvalidCheckoutState):
    """A payment is already being processed for this session"""

    def __init__(self, message: str = "Payment is already being processed."):
        super().__init__(message)


class PaymentValidationError(StorefrontError):
    """Required payment form fields are missing"""

    def __init__(self, missing_fields: Optional[List[str]] = None):
        self.missing_fields = list(missing_fields or [])
        super().__init__("Missing required fields: " + ", ".join(self.missing_fields))


class InvalidFilterValue(StorefrontError):
    """Search text or category given as something other than a string"""

    def __init__(self, field_name: str, value):
        self.field_name = field_name
        self.value = value
        super().__init__(f"Invalid {field_name}: {value!r}")
