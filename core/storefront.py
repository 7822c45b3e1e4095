"""
Main CafezinhoStore class - wires repositories and services and runs checkout
"""
from typing import Optional

import structlog

import config
from core.exceptions import EmptyCart, InvalidOrder
from core.formatting import order_message, whatsapp_link
from database.connection import DatabaseConnection
from database.storage import KeyValueStorage
from database.repository import ProductRepository, CartRepository, UserRepository, OrderRepository
from models.order import Order, OrderRequest
from services.product_service import ProductService
from services.cart_service import CartService
from services.order_converter import to_order_items
from services.order_validator import validate_order
from services.order_service import OrderService
from services.user_service import UserSessionService

logger = structlog.get_logger(__name__)


class CafezinhoStore:
    # Central object built once per process; every service hangs off it

    def __init__(self, db_path: str = config.DB_PATH,
                 order_repository: Optional[OrderRepository] = None):
        # Durable storage for the cart and the current user
        self.db_connection = DatabaseConnection(db_path)
        self.storage = KeyValueStorage(self.db_connection)

        # Repository layer
        self.product_repo = ProductRepository()
        self.cart_repo = CartRepository(self.storage)
        self.user_repo = UserRepository(self.storage)
        self.order_repo = order_repository or OrderRepository()

        # Service layer
        self.product_service = ProductService(self.product_repo)
        self.cart_service = CartService(self.cart_repo, self.product_service)
        self.order_service = OrderService(self.order_repo)
        self.user_service = UserSessionService(self.user_repo)

    def checkout(self, customer_name: str, customer_phone: Optional[str] = None,
                 address: Optional[str] = None, notes: Optional[str] = None) -> Order:
        """Turn the cart into an order and empty the cart.

        Everything is validated before the user record is created or the
        order is stored, so a rejected checkout leaves no trace.
        """
        if self.cart_service.is_empty():
            raise EmptyCart()

        entries = self.cart_service.entries
        request = OrderRequest(
            user_id=self.user_service.get_current_user_id(),
            items=to_order_items(entries),
            customer_name=(customer_name or "").strip(),
            customer_phone=(customer_phone or "").strip() or None,
            notes=self._compose_notes(address, notes)
        )

        violations = validate_order(request)
        if violations:
            logger.info("Checkout rejected", violations=violations)
            raise InvalidOrder(violations)

        request.user_id = self.user_service.ensure_user(request.customer_name)
        order = self.order_service.create_order(request)

        self.cart_service.clear()
        logger.info("Checkout complete", order_number=order.order_number,
                    user_id=order.user_id)
        return order

    @staticmethod
    def _compose_notes(address: Optional[str], notes: Optional[str]) -> Optional[str]:
        parts = []
        if address and address.strip():
            parts.append(f"Deliver to: {address.strip()}")
        if notes and notes.strip():
            parts.append(notes.strip())
        return "\n".join(parts) or None

    def order_message(self, order: Order) -> str:
        titles = {product.product_id: product.title
                  for product in self.product_service.list_products()}
        return order_message(order, titles)

    def whatsapp_link(self, order: Order) -> str:
        return whatsapp_link(config.STORE_PHONE_NUMBER, self.order_message(order))
