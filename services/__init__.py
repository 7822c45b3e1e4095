"""
Services package for Cafezinho Orders
Contains business logic services
"""

from .product_service import ProductService
from .cart_service import CartService
from .order_converter import to_order_items
from .order_validator import validate_order
from .order_service import OrderService
from .user_service import UserSessionService

__all__ = [
    'ProductService', 'CartService', 'OrderService', 'UserSessionService',
    'to_order_items', 'validate_order'
]
