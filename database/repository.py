"""
Database repository classes
"""
import logging
from typing import List, Optional

from models.product import Product
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


class ProductRepository:
    # Read access to the seeded catalog

    def __init__(self, db_connection: DatabaseConnection):
        self.db = db_connection

    def list_products(self) -> List[Product]:
        # All products in their original catalog order
        with self.db.get_connection() as conn:
            cursor = conn.cursor()

            cursor.execute("""
            SELECT product_id, product_name, price, original_price, image,
                   rating, reviews, description, category
            FROM Products
            ORDER BY sort_order, product_id
            """)

            products = []
            for row in cursor.fetchall():
                products.append(Product(
                    id=row[0],
                    name=row[1],
                    price=row[2],
                    original_price=row[3],
                    image=row[4],
                    rating=row[5],
                    reviews=row[6],
                    description=row[7] or "",
                    category=row[8]
                ))

            return products


class HandoffRepository:
    # Key-value slot that carries the checkout snapshot between screens

    def __init__(self, db_connection: DatabaseConnection):
        self.db = db_connection

    def write(self, slot_key: str, payload: str):
        # Overwrites whatever the slot held before
        with self.db.get_connection() as conn:
            conn.execute("""
            INSERT INTO Handoff (slot_key, payload, updated_at)
            VALUES (?, ?, CURRENT_TIMESTAMP)
            ON CONFLICT(slot_key) DO UPDATE SET
                payload = excluded.payload,
                updated_at = excluded.updated_at
            """, (slot_key, payload))
            conn.commit()
        logger.debug("Handoff slot %r written (%d bytes)", slot_key, len(payload))

    def read(self, slot_key: str) -> Optional[str]:
        with self.db.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT payload FROM Handoff WHERE slot_key = ?", (slot_key,))
            row = cursor.fetchone()
            return row[0] if row else None

    def delete(self, slot_key: str) -> bool:
        # Returns whether a slot was actually removed
        with self.db.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM Handoff WHERE slot_key = ?", (slot_key,))
            conn.commit()
            removed = cursor.rowcount > 0
        if removed:
            logger.debug("Handoff slot %r deleted", slot_key)
        return removed
