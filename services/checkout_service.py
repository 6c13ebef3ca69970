"""
Checkout service - snapshot handoff and simulated payment
"""
import logging
import time
from typing import Any, Callable, Dict, Optional

from models.checkout import CheckoutSnapshot, CheckoutState, PaymentDetails
from models.exceptions import (
    StorefrontError,
    UserInputEmpty,
    InvalidCheckoutState,
    CheckoutInProgress,
    PaymentValidationError,
)
from models.product import format_price
from models.session import ShopSession
from database.repository import HandoffRepository
from .base import error_result
from .notification_service import NotificationService

logger = logging.getLogger(__name__)


class CheckoutService:
    # Drives IDLE -> SNAPSHOTTING -> PROCESSING -> SETTLED for a session.
    # The payment delay is a deadline on the session resolved by poll(),
    # so nothing sleeps and nothing runs in the background.

    def __init__(self, handoff_repository: HandoffRepository,
                 notification_service: NotificationService,
                 payment_delay: float = 2.0, handoff_key: str = "cart",
                 clock: Optional[Callable[[], float]] = None):
        self.handoff_repo = handoff_repository
        self.notifications = notification_service
        self.payment_delay = payment_delay
        self.handoff_key = handoff_key
        self.clock = clock or time.monotonic

    def slot_key(self, session: ShopSession) -> str:
        # One slot per shopper, like a browser's own local storage
        return f"{self.handoff_key}:{session.session_id}"

    def initiate_checkout(self, session: ShopSession) -> Dict[str, Any]:
        # Snapshot the live cart into the handoff slot
        try:
            if session.is_processing:
                raise CheckoutInProgress()

            if session.ledger.is_empty():
                session.checkout_state = CheckoutState.IDLE
                self.notifications.cart_empty(session.session_id)
                raise UserInputEmpty()

            snapshot = CheckoutSnapshot.from_ledger(session.ledger)
            self.handoff_repo.write(self.slot_key(session), snapshot.to_json())
            session.checkout_state = CheckoutState.SNAPSHOTTING

        except StorefrontError as e:
            logger.warning("Checkout rejected for session %s: %s", session.session_id, e)
            return error_result(e, state=session.checkout_state.value)

        summary = snapshot.summary()
        total_display = format_price(summary.total_price)
        self.notifications.checkout_initiated(session.session_id, total_display)
        logger.info("Session %s checkout initiated: %d lines, total %s",
                    session.session_id, summary.total_lines, summary.total_price)

        return {
            "success": True,
            "state": session.checkout_state.value,
            "items": [line.to_dict() for line in snapshot.lines],
            "summary": summary.to_dict(),
            "message": "Checkout initiated. Total: " + total_display
        }

    def _load_snapshot(self, session: ShopSession) -> CheckoutSnapshot:
        # Missing, empty or unreadable slots are all treated as an empty cart
        key = self.slot_key(session)
        try:
            snapshot = CheckoutSnapshot.from_json(self.handoff_repo.read(key))
        except ValueError as e:
            logger.warning("Discarding unreadable handoff slot %s: %s", key, e)
            snapshot = CheckoutSnapshot()

        if snapshot.is_empty():
            self.handoff_repo.delete(key)
            if session.checkout_state is CheckoutState.SNAPSHOTTING:
                session.checkout_state = CheckoutState.IDLE
            raise UserInputEmpty("Your cart is empty")
        return snapshot

    def open_checkout(self, session: ShopSession) -> Dict[str, Any]:
        # Checkout screen entry: everything shown is recomputed from the snapshot
        self.poll(session)
        try:
            snapshot = self._load_snapshot(session)
        except StorefrontError as e:
            return error_result(e, empty=True, state=session.checkout_state.value)

        summary = snapshot.summary()
        items = []
        for line in snapshot.lines:
            item = line.to_dict()
            item["line_total"] = format_price(line.line_total)
            items.append(item)

        if session.is_processing:
            pay_label = "Processing..."
        else:
            pay_label = "Pay " + format_price(summary.total_price)

        return {
            "success": True,
            "state": session.checkout_state.value,
            "items": items,
            "summary": summary.to_dict(),
            "total_display": format_price(summary.total_price),
            "pay_label": pay_label,
            "processing": session.is_processing
        }

    def confirm_payment(self, session: ShopSession, form: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        # Start the simulated payment; settlement happens once the delay elapses
        try:
            if session.is_processing:
                raise CheckoutInProgress()
            if session.checkout_state is not CheckoutState.SNAPSHOTTING:
                raise InvalidCheckoutState("Checkout has not been initiated.")

            snapshot = self._load_snapshot(session)

            details = PaymentDetails.from_form(form)
            missing = details.missing_fields()
            if missing:
                self.notifications.validation_errors(session.session_id, missing)
                raise PaymentValidationError(missing)

        except PaymentValidationError as e:
            return error_result(e, missing_fields=e.missing_fields, state=session.checkout_state.value)
        except StorefrontError as e:
            logger.warning("Payment rejected for session %s: %s", session.session_id, e)
            return error_result(e, state=session.checkout_state.value)

        session.checkout_state = CheckoutState.PROCESSING
        session.payment_deadline = self.clock() + self.payment_delay
        logger.info("Session %s processing payment of %s (card %s)",
                    session.session_id, snapshot.total_price(), details.masked_card())

        # A zero delay settles right away
        settled = self.poll(session)["settled"]

        return {
            "success": True,
            "state": session.checkout_state.value,
            "settled": settled,
            "settles_in": max(0.0, self.payment_delay),
            "total_display": format_price(snapshot.total_price()),
            "message": "Processing..."
        }

    def poll(self, session: ShopSession) -> Dict[str, Any]:
        # Resolve an elapsed payment deadline
        settled = False
        if session.is_processing and session.payment_deadline is not None:
            if self.clock() >= session.payment_deadline:
                self._settle(session)
                settled = True

        return {
            "success": True,
            "state": session.checkout_state.value,
            "settled": settled,
            "processing": session.is_processing
        }

    def _settle(self, session: ShopSession):
        session.ledger.clear()
        self.handoff_repo.delete(self.slot_key(session))
        session.payment_deadline = None
        session.checkout_state = CheckoutState.SETTLED
        self.notifications.payment_settled(session.session_id)
        logger.info("Session %s payment settled, cart cleared", session.session_id)

    def cancel_payment(self, session: ShopSession) -> Dict[str, Any]:
        # Abandon a pending payment; the snapshot stays for another attempt
        if not session.is_processing:
            return error_result(InvalidCheckoutState("No payment is being processed."),
                                state=session.checkout_state.value)

        session.payment_deadline = None
        session.checkout_state = CheckoutState.SNAPSHOTTING
        logger.info("Session %s payment cancelled", session.session_id)
        return {
            "success": True,
            "state": session.checkout_state.value,
            "message": "Payment cancelled."
        }

    def back_to_shop(self, session: ShopSession) -> Dict[str, Any]:
        # Leave the checkout screen; the handoff slot is left as it is
        if session.is_processing:
            return error_result(CheckoutInProgress(), state=session.checkout_state.value)

        session.checkout_state = CheckoutState.IDLE
        return {
            "success": True,
            "state": session.checkout_state.value
        }
