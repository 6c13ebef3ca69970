"""
Fixed product list the catalog is seeded from
"""
from decimal import Decimal

from models.product import Product

DEFAULT_PRODUCTS = [
    Product(
        id=1,
        name="Premium Wireless Headphones",
        price=Decimal("199.99"),
        original_price=Decimal("249.99"),
        rating=4.8,
        reviews=324,
        description="High-quality wireless headphones with noise cancellation and premium sound quality.",
        category="Electronics"
    ),
    Product(
        id=2,
        name="Smart Fitness Watch",
        price=Decimal("299.99"),
        rating=4.6,
        reviews=156,
        description="Advanced fitness tracking with heart rate monitoring and GPS capabilities.",
        category="Wearables"
    ),
    Product(
        id=3,
        name="Organic Cotton T-Shirt",
        price=Decimal("29.99"),
        original_price=Decimal("39.99"),
        rating=4.7,
        reviews=89,
        description="Comfortable organic cotton t-shirt, sustainably made and super soft.",
        category="Clothing"
    ),
    Product(
        id=4,
        name="Professional Camera Lens",
        price=Decimal("549.99"),
        rating=4.9,
        reviews=67,
        description="High-performance camera lens for professional photography.",
        category="Photography"
    ),
    Product(
        id=5,
        name="Ergonomic Office Chair",
        price=Decimal("399.99"),
        original_price=Decimal("499.99"),
        rating=4.5,
        reviews=234,
        description="Comfortable ergonomic office chair with lumbar support and adjustable height.",
        category="Furniture"
    ),
    Product(
        id=6,
        name="Smart Home Speaker",
        price=Decimal("149.99"),
        rating=4.4,
        reviews=445,
        description="Voice-controlled smart speaker with premium audio and home automation.",
        category="Smart Home"
    ),
]
