"""
Database connection management
"""
import logging
import sqlite3
from contextlib import contextmanager
from typing import Generator, Iterable, Optional

from models.product import Product, price_text

logger = logging.getLogger(__name__)


class DatabaseConnection:
    # Owns the sqlite file path and creates the schema on first use

    def __init__(self, db_path: str = "shopease.db", seed_products: Optional[Iterable[Product]] = None):
        self.db_path = db_path
        self.init_database(seed_products)

    def init_database(self, seed_products: Optional[Iterable[Product]] = None):
        # Create tables if missing and seed the catalog when it is empty
        with self.get_connection() as conn:
            cursor = conn.cursor()

            # Catalog products (prices kept as TEXT so Decimal round-trips exactly)
            cursor.execute('''
            CREATE TABLE IF NOT EXISTS Products (
                product_id INTEGER PRIMARY KEY,
                product_name TEXT NOT NULL,
                price TEXT NOT NULL,
                original_price TEXT,
                image TEXT NOT NULL,
                rating REAL NOT NULL DEFAULT 0,
                reviews INTEGER NOT NULL DEFAULT 0,
                description TEXT,
                category TEXT NOT NULL,
                sort_order INTEGER NOT NULL DEFAULT 0
            )
            ''')

            # Single key-value slot per key for the checkout snapshot handoff
            cursor.execute('''
            CREATE TABLE IF NOT EXISTS Handoff (
                slot_key TEXT PRIMARY KEY,
                payload TEXT NOT NULL,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
            ''')

            conn.commit()

            if seed_products is not None:
                cursor.execute("SELECT COUNT(*) FROM Products")
                if cursor.fetchone()[0] == 0:
                    self._seed(conn, seed_products)

    def _seed(self, conn: sqlite3.Connection, products: Iterable[Product]):
        rows = [
            (
                p.id, p.name, price_text(p.price),
                price_text(p.original_price) if p.original_price is not None else None,
                p.image, p.rating, p.reviews, p.description, p.category, index
            )
            for index, p in enumerate(products)
        ]
        conn.executemany("""
        INSERT INTO Products (
            product_id, product_name, price, original_price, image,
            rating, reviews, description, category, sort_order
        ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
        """, rows)
        conn.commit()
        logger.info("Seeded %d products into %s", len(rows), self.db_path)

    @contextmanager
    def get_connection(self) -> Generator[sqlite3.Connection, None, None]:
        # Connection is opened per operation and always closed
        conn = sqlite3.connect(self.db_path)
        try:
            yield conn
        finally:
            conn.close()
