"""
Models package for Cafezinho Orders
Contains data models and type definitions
"""

from .product import Product
from .cart import CartEntry, CartSummary
from .order import Order, OrderItem, OrderRequest, OrderStatus
from .user import User

__all__ = [
    'Product',
    'CartEntry', 'CartSummary',
    'Order', 'OrderItem', 'OrderRequest', 'OrderStatus',
    'User'
]
