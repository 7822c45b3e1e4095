"""
Cart entries to order line items
"""
from typing import Iterable, List

from models.cart import CartEntry
from models.order import OrderItem, DEFAULT_ITEM_PRICE


def to_order_items(cart_entries: Iterable[CartEntry]) -> List[OrderItem]:
    # One line item per entry, same order as the cart
    return [
        OrderItem(
            product_id=entry.product_id,
            quantity=entry.quantity,
            price=DEFAULT_ITEM_PRICE if entry.price is None else entry.price
        )
        for entry in cart_entries
    ]
