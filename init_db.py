#!/usr/bin/env python3
"""
Database bootstrap script
Creates the tables and seeds the catalog from the fixed product list.
"""
import sqlite3
from typing import Optional

from core.config import Settings
from database.connection import DatabaseConnection
from database.seed_data import DEFAULT_PRODUCTS


def init_database(db_path: Optional[str] = None) -> bool:
    """Initialize database and report what it holds"""
    db_path = db_path or Settings.from_env().db_path

    try:
        db = DatabaseConnection(db_path, seed_products=DEFAULT_PRODUCTS)

        with db.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT COUNT(*) FROM Products")
            products_count = cursor.fetchone()[0]
            cursor.execute("SELECT COUNT(*) FROM Handoff")
            handoff_count = cursor.fetchone()[0]

        print(f"Database ready: {db_path}")
        print(f"Products table: {products_count} products")
        print(f"Handoff table: {handoff_count} pending checkout snapshots")
        return True

    except sqlite3.Error as e:
        print(f"Database initialization failed: {str(e)}")
        return False


if __name__ == "__main__":
    print("=== ShopEase database initialization ===")
    if init_database():
        print("\nYou can now run app.py or main.py")
    else:
        print("\nInitialization failed. Check SHOPEASE_DB_PATH.")
