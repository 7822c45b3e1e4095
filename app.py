"""
Mock HTTP API exposing the catalog and the order service
"""
from datetime import datetime, timezone
from typing import Optional

import structlog
from flask import Flask, jsonify, request

import config
from core.exceptions import InvalidOrder, ValidationError, NotFoundError, StorageError
from core.log_setup import configure_logging
from core.storefront import CafezinhoStore
from models.order import OrderRequest

logger = structlog.get_logger(__name__)


def create_app(store: Optional[CafezinhoStore] = None) -> Flask:
    app = Flask(__name__)
    app.secret_key = config.SECRET_KEY

    if store is None:
        store = CafezinhoStore(config.DB_PATH)
    app.config["STORE"] = store

    @app.route('/')
    def index():
        """Service banner with the available endpoints"""
        return jsonify({
            'message': 'Cafezinho API running (mock mode)',
            'endpoints': {
                'products': '/products',
                'orders': '/orders'
            }
        })

    @app.route('/ping')
    def ping():
        """Connectivity check"""
        logger.debug("Ping received")
        return jsonify({'message': 'pong', 'timestamp': datetime.now(timezone.utc).isoformat()})

    @app.route('/products')
    def list_products():
        category = request.args.get('category') or None
        products = store.product_service.list_products(category)
        return jsonify([product.to_dict() for product in products])

    @app.route('/products/meta/categories')
    def list_categories():
        return jsonify(store.product_service.get_categories())

    @app.route('/products/<product_id>')
    def get_product(product_id):
        return jsonify(store.product_service.get_product(product_id).to_dict())

    @app.route('/orders', methods=['POST'])
    def create_order():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({'error': 'JSON object body required'}), 400

        order = store.order_service.create_order(OrderRequest.from_dict(data))
        return jsonify(order.to_dict()), 201

    @app.route('/orders/user/<user_id>')
    def get_user_orders(user_id):
        orders = store.order_service.get_user_orders(user_id)
        return jsonify([order.to_dict() for order in orders])

    @app.route('/orders/<order_id>')
    def get_order(order_id):
        return jsonify(store.order_service.get_order_by_id(order_id).to_dict())

    @app.errorhandler(InvalidOrder)
    def handle_invalid_order(e):
        return jsonify({'error': str(e), 'violations': e.violations}), 400

    @app.errorhandler(ValidationError)
    def handle_validation_error(e):
        return jsonify({'error': str(e)}), 400

    @app.errorhandler(NotFoundError)
    def handle_not_found(e):
        return jsonify({'error': str(e)}), 404

    @app.errorhandler(StorageError)
    def handle_storage_error(e):
        logger.error("Storage failure while serving request", error=str(e))
        return jsonify({'error': 'Storage unavailable'}), 500

    @app.errorhandler(404)
    def handle_unknown_route(e):
        return jsonify({'error': 'Route not found'}), 404

    @app.errorhandler(500)
    def handle_internal_error(e):
        logger.error("Unhandled error", error=str(e))
        return jsonify({'error': 'Internal server error'}), 500

    return app


if __name__ == '__main__':
    configure_logging(config.LOG_LEVEL)

    print("=== Cafezinho API (mock) ===")
    print(f"Starting server on http://localhost:{config.PORT}")
    print("Press Ctrl+C to stop")

    create_app().run(
        host='0.0.0.0',
        port=config.PORT,
        debug=config.DEBUG
    )
