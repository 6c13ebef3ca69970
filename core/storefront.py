"""
Main ShopEaseStorefront class - orchestrates all services
"""
import logging
import threading
import time
import uuid
from collections import OrderedDict
from contextlib import contextmanager
from dataclasses import replace
from typing import Any, Callable, Dict, Iterator, List, Optional

from database.connection import DatabaseConnection
from database.repository import ProductRepository, HandoffRepository
from database.seed_data import DEFAULT_PRODUCTS
from models.session import ShopSession
from services.notification_service import NotificationService
from services.catalog_service import CatalogService
from services.cart_service import CartService
from services.wishlist_service import WishlistService
from services.checkout_service import CheckoutService
from .config import Settings

logger = logging.getLogger(__name__)


class ShopEaseStorefront:
    # Central coordinator: wires repositories and services and owns the sessions

    def __init__(self, settings: Optional[Settings] = None, db_path: Optional[str] = None,
                 clock: Optional[Callable[[], float]] = None):
        self.settings = settings or Settings()
        if db_path is not None:
            self.settings = replace(self.settings, db_path=db_path)
        self.clock = clock or time.monotonic

        # Repository layer (data access)
        self.db_connection = DatabaseConnection(self.settings.db_path, seed_products=DEFAULT_PRODUCTS)
        self.product_repo = ProductRepository(self.db_connection)
        self.handoff_repo = HandoffRepository(self.db_connection)

        # Service layer (business logic)
        self.notification_service = NotificationService()
        self.catalog_service = CatalogService(self.product_repo)
        self.cart_service = CartService(self.catalog_service, self.notification_service)
        self.wishlist_service = WishlistService(self.catalog_service)
        self.checkout_service = CheckoutService(
            self.handoff_repo,
            self.notification_service,
            payment_delay=self.settings.payment_delay_seconds,
            handoff_key=self.settings.handoff_key,
            clock=self.clock
        )

        # Least recently seen first
        self._sessions: "OrderedDict[str, ShopSession]" = OrderedDict()
        self._lock = threading.Lock()

    # === Session management ===
    def new_session_id(self) -> str:
        return str(uuid.uuid4())

    def get_session(self, session_id: str) -> ShopSession:
        # Sessions are created lazily on first use; idle ones are dropped here too
        now = self.clock()
        with self._lock:
            self._expire_sessions(now)
            session = self._sessions.get(session_id)
            if session is None:
                session = ShopSession(session_id=session_id)
                self._sessions[session_id] = session
                logger.info("New shopping session %s", session_id)
            else:
                self._sessions.move_to_end(session_id)
            session.last_seen = now
            self._evict_overflow()
            return session

    def _expire_sessions(self, now: float):
        idle_limit = self.settings.session_idle_seconds
        if idle_limit <= 0:
            return
        while self._sessions:
            session = next(iter(self._sessions.values()))
            if now - session.last_seen < idle_limit:
                break
            self._forget(self._sessions.popitem(last=False)[1], "idle")

    def _evict_overflow(self):
        limit = self.settings.max_sessions
        if limit <= 0:
            return
        while len(self._sessions) > limit:
            self._forget(self._sessions.popitem(last=False)[1], "over the session limit")

    def _forget(self, session: ShopSession, reason: str):
        self.notification_service.discard(session.session_id)
        self.handoff_repo.delete(self.checkout_service.slot_key(session))
        logger.info("Dropped session %s (%s)", session.session_id, reason)

    def session_count(self) -> int:
        with self._lock:
            return len(self._sessions)

    def end_session(self, session_id: str) -> bool:
        with self._lock:
            session = self._sessions.pop(session_id, None)
        self.notification_service.discard(session_id)
        if session is not None:
            self.handoff_repo.delete(self.checkout_service.slot_key(session))
        return session is not None

    @contextmanager
    def _session(self, session_id: str) -> Iterator[ShopSession]:
        # One operation at a time per shopper
        session = self.get_session(session_id)
        with session.lock:
            yield session

    def drain_notifications(self, session_id: str) -> List[Dict[str, Any]]:
        return [n.to_dict() for n in self.notification_service.drain(session_id)]

    # === Catalog ===
    def get_visible_products(self, session_id: str) -> Dict[str, Any]:
        with self._session(session_id) as session:
            return self.catalog_service.get_visible_products(session)

    def set_search_text(self, session_id: str, text: Optional[str]) -> Dict[str, Any]:
        with self._session(session_id) as session:
            return self.catalog_service.set_search_text(session, text)

    def set_category(self, session_id: str, category: Optional[str]) -> Dict[str, Any]:
        with self._session(session_id) as session:
            return self.catalog_service.set_category(session, category)

    def get_categories(self) -> List[str]:
        return self.catalog_service.get_categories()

    def search(self, text: Optional[str], category: Optional[str] = None) -> Dict[str, Any]:
        return self.catalog_service.search(text, category)

    # === Cart ===
    def add_to_cart(self, session_id: str, product_id: int) -> Dict[str, Any]:
        with self._session(session_id) as session:
            return self.cart_service.add_to_cart(session, product_id)

    def update_quantity(self, session_id: str, product_id: int, quantity: int) -> Dict[str, Any]:
        with self._session(session_id) as session:
            return self.cart_service.update_quantity(session, product_id, quantity)

    def increment_quantity(self, session_id: str, product_id: int) -> Dict[str, Any]:
        with self._session(session_id) as session:
            return self.cart_service.increment_quantity(session, product_id)

    def decrement_quantity(self, session_id: str, product_id: int) -> Dict[str, Any]:
        with self._session(session_id) as session:
            return self.cart_service.decrement_quantity(session, product_id)

    def remove_from_cart(self, session_id: str, product_id: int) -> Dict[str, Any]:
        with self._session(session_id) as session:
            return self.cart_service.remove_from_cart(session, product_id)

    def get_cart_details(self, session_id: str) -> Dict[str, Any]:
        with self._session(session_id) as session:
            return self.cart_service.get_cart_details(session)

    def clear_cart(self, session_id: str) -> Dict[str, Any]:
        with self._session(session_id) as session:
            return self.cart_service.clear_cart(session)

    # === Wishlist ===
    def toggle_wishlist(self, session_id: str, product_id: int) -> Dict[str, Any]:
        with self._session(session_id) as session:
            return self.wishlist_service.toggle_wishlist(session, product_id)

    def get_wishlist(self, session_id: str) -> Dict[str, Any]:
        with self._session(session_id) as session:
            return self.wishlist_service.get_wishlist(session)

    # === Checkout ===
    def initiate_checkout(self, session_id: str) -> Dict[str, Any]:
        with self._session(session_id) as session:
            return self.checkout_service.initiate_checkout(session)

    def open_checkout(self, session_id: str) -> Dict[str, Any]:
        with self._session(session_id) as session:
            return self.checkout_service.open_checkout(session)

    def confirm_payment(self, session_id: str, form: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        with self._session(session_id) as session:
            return self.checkout_service.confirm_payment(session, form)

    def poll_checkout(self, session_id: str) -> Dict[str, Any]:
        with self._session(session_id) as session:
            return self.checkout_service.poll(session)

    def cancel_payment(self, session_id: str) -> Dict[str, Any]:
        with self._session(session_id) as session:
            return self.checkout_service.cancel_payment(session)

    def back_to_shop(self, session_id: str) -> Dict[str, Any]:
        with self._session(session_id) as session:
            return self.checkout_service.back_to_shop(session)
