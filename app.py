import logging
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request, session
from werkzeug.exceptions import HTTPException

from core.config import Settings
from core.storefront import ShopEaseStorefront

logger = logging.getLogger(__name__)

# HTTP status for failed service results, by error type
ERROR_STATUS = {
    "UnknownProductReference": 404,
    "InvalidCheckoutState": 409,
    "CheckoutInProgress": 409,
}


def create_app(settings: Optional[Settings] = None,
               storefront: Optional[ShopEaseStorefront] = None) -> Flask:
    settings = settings or Settings.from_env()
    storefront = storefront or ShopEaseStorefront(settings)

    app = Flask(__name__)
    app.secret_key = settings.secret_key
    app.config["STOREFRONT"] = storefront

    def current_session_id() -> str:
        # Get or create the shopper's session id
        if "session_id" not in session:
            session["session_id"] = storefront.new_session_id()
        return session["session_id"]

    def respond(result: Dict[str, Any], status: Optional[int] = None):
        session_id = current_session_id()
        payload = dict(result)
        payload["session_id"] = session_id
        payload["notifications"] = storefront.drain_notifications(session_id)
        if status is None:
            status = 200 if result.get("success") else ERROR_STATUS.get(result.get("error_type"), 400)
        return jsonify(payload), status

    def json_body() -> Dict[str, Any]:
        return request.get_json(silent=True) or {}

    @app.route('/api/products', methods=['GET'])
    def products():
        """Visible products for the current search text and category"""
        return respond(storefront.get_visible_products(current_session_id()))

    @app.route('/api/categories', methods=['GET'])
    def categories():
        return respond({"success": True, "categories": storefront.get_categories()})

    @app.route('/api/filters', methods=['PUT'])
    def filters():
        """Update search text and/or category selection"""
        data = json_body()
        for field_name in ("search", "category"):
            value = data.get(field_name)
            if value is not None and not isinstance(value, str):
                return respond({"success": False, "error": f"{field_name} must be a string."}, 400)

        session_id = current_session_id()
        result = None
        if "search" in data:
            result = storefront.set_search_text(session_id, data.get("search"))
        if "category" in data:
            result = storefront.set_category(session_id, data.get("category"))
        if result is None:
            result = storefront.get_visible_products(session_id)
        return respond(result)

    @app.route('/api/search', methods=['GET'])
    def search():
        """One-off search that leaves the session's filters untouched"""
        return respond(storefront.search(request.args.get('q', ''), request.args.get('category')))

    @app.route('/api/cart', methods=['GET'])
    def cart():
        return respond(storefront.get_cart_details(current_session_id()))

    @app.route('/api/cart/items', methods=['POST'])
    def add_item():
        product_id = json_body().get("product_id")
        if not isinstance(product_id, int) or isinstance(product_id, bool):
            return respond({"success": False, "error": "product_id must be an integer."}, 400)
        return respond(storefront.add_to_cart(current_session_id(), product_id))

    @app.route('/api/cart/items/<int:product_id>', methods=['PATCH'])
    def update_item(product_id):
        quantity = json_body().get("quantity")
        return respond(storefront.update_quantity(current_session_id(), product_id, quantity))

    @app.route('/api/cart/items/<int:product_id>/increment', methods=['POST'])
    def increment_item(product_id):
        return respond(storefront.increment_quantity(current_session_id(), product_id))

    @app.route('/api/cart/items/<int:product_id>/decrement', methods=['POST'])
    def decrement_item(product_id):
        return respond(storefront.decrement_quantity(current_session_id(), product_id))

    @app.route('/api/cart/items/<int:product_id>', methods=['DELETE'])
    def remove_item(product_id):
        return respond(storefront.remove_from_cart(current_session_id(), product_id))

    @app.route('/api/wishlist', methods=['GET'])
    def wishlist():
        return respond(storefront.get_wishlist(current_session_id()))

    @app.route('/api/wishlist/<int:product_id>', methods=['POST'])
    def toggle_wishlist(product_id):
        return respond(storefront.toggle_wishlist(current_session_id(), product_id))

    @app.route('/api/checkout', methods=['POST'])
    def initiate_checkout():
        return respond(storefront.initiate_checkout(current_session_id()))

    @app.route('/api/checkout', methods=['GET'])
    def open_checkout():
        """Checkout screen: order summary read back from the handoff slot"""
        return respond(storefront.open_checkout(current_session_id()))

    @app.route('/api/checkout', methods=['DELETE'])
    def back_to_shop():
        return respond(storefront.back_to_shop(current_session_id()))

    @app.route('/api/checkout/payment', methods=['POST'])
    def confirm_payment():
        result = storefront.confirm_payment(current_session_id(), json_body())
        if result.get("success") and not result.get("settled"):
            return respond(result, 202)
        return respond(result)

    @app.route('/api/checkout/payment', methods=['DELETE'])
    def cancel_payment():
        return respond(storefront.cancel_payment(current_session_id()))

    @app.route('/api/checkout/status', methods=['GET'])
    def checkout_status():
        return respond(storefront.poll_checkout(current_session_id()))

    @app.route('/api/session', methods=['DELETE'])
    def clear_session():
        """Forget the shopper's session"""
        if "session_id" in session:
            storefront.end_session(session["session_id"])
        session.clear()
        return jsonify({'message': 'Session has been reset.'})

    @app.route('/health')
    def health():
        """Health check endpoint"""
        return jsonify({
            'status': 'ok',
            'message': 'ShopEase storefront is running!',
            'sessions': storefront.session_count()
        })

    @app.errorhandler(Exception)
    def unexpected_error(e):
        if isinstance(e, HTTPException):
            return e
        logger.exception("Unhandled error while serving %s", request.path)
        return jsonify({'success': False, 'error': f'An unexpected error occurred: {str(e)}'}), 500

    return app


if __name__ == '__main__':
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    print("=== ShopEase Storefront Server ===")
    print(f"Starting server on http://localhost:{settings.port}")
    print("Press Ctrl+C to stop")

    create_app(settings).run(
        host='0.0.0.0',
        port=settings.port,
        debug=settings.debug
    )
