"""
Order service - creates and looks up orders
"""
import threading
import uuid
from datetime import datetime, timezone
from typing import List

import structlog

import config
from core.exceptions import InvalidOrder, OrderNotFound
from models.order import Order, OrderItem, OrderRequest, OrderStatus
from database.repository import OrderRepository
from .order_validator import validate_order

logger = structlog.get_logger(__name__)


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class OrderService:
    # Owns the order collection and the sequential order-number counter

    def __init__(self, order_repository: OrderRepository,
                 number_width: int = config.ORDER_NUMBER_WIDTH):
        self.order_repo = order_repository
        self.number_width = number_width
        self._counter = 1
        self._counter_lock = threading.Lock()

    def _next_order_number(self) -> str:
        # "#0001", "#0002", ... monotonic for the process lifetime
        with self._counter_lock:
            number = self._counter
            self._counter += 1
        return f"#{str(number).zfill(self.number_width)}"

    def create_order(self, request: OrderRequest) -> Order:
        violations = validate_order(request)
        if violations:
            logger.info("Order rejected", violations=violations)
            raise InvalidOrder(violations)

        items = [OrderItem(item.product_id, item.quantity, item.price) for item in request.items]
        total_amount = round(sum(item.price * item.quantity for item in items), 2)
        now = _utc_now_iso()

        order = Order(
            order_id=f"order_{uuid.uuid4().hex}",
            user_id=request.user_id,
            items=items,
            total_amount=total_amount,
            status=OrderStatus.PENDING,
            customer_name=request.customer_name.strip(),
            customer_phone=request.customer_phone or None,
            notes=request.notes or None,
            order_number=self._next_order_number(),
            created_at=now,
            updated_at=now
        )

        self.order_repo.add(order)
        logger.info("Order created", order_number=order.order_number,
                    order_id=order.order_id, total_amount=total_amount)
        return order

    def get_user_orders(self, user_id: str) -> List[Order]:
        return self.order_repo.find_by_user(user_id)

    def get_order_by_id(self, order_id: str) -> Order:
        order = self.order_repo.find_by_id(order_id)
        if order is None:
            raise OrderNotFound(order_id)
        return order

    def get_all_orders(self) -> List[Order]:
        return self.order_repo.all()

    def clear_all_orders(self) -> None:
        # Drops every order and restarts numbering at #0001
        with self._counter_lock:
            self.order_repo.clear()
            self._counter = 1
        logger.info("Orders cleared")
