"""
Order request validation
"""
import math
from numbers import Real
from typing import List

from models.order import OrderItem, OrderRequest


def _is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _is_valid_price(value) -> bool:
    # Finite and non-negative; NaN and Infinity parse from JSON but are not prices
    if not isinstance(value, Real) or isinstance(value, bool):
        return False
    return math.isfinite(value) and value >= 0


def _item_is_valid(item: OrderItem) -> bool:
    if not item.product_id or not str(item.product_id).strip():
        return False
    if not _is_positive_int(item.quantity):
        return False
    return _is_valid_price(item.price)


def validate_order(request: OrderRequest) -> List[str]:
    """Return the violations found in a candidate order, in check order.

    An empty list means the order is valid. Never raises; the caller
    decides whether to reject the checkout or show the messages.
    """
    violations: List[str] = []

    name = request.customer_name
    if not isinstance(name, str) or not name.strip():
        violations.append("customer name required")

    items = request.items or []
    if not items:
        violations.append("at least one item required")

    for index, item in enumerate(items, start=1):
        if not _item_is_valid(item):
            violations.append(f"item {index} invalid data")

    return violations
