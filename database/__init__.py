"""
Database package for Cafezinho Orders
Contains the connection, key-value storage and repository classes
"""

from .connection import DatabaseConnection
from .storage import KeyValueStorage
from .repository import ProductRepository, CartRepository, UserRepository, OrderRepository

__all__ = [
    'DatabaseConnection', 'KeyValueStorage',
    'ProductRepository', 'CartRepository', 'UserRepository', 'OrderRepository'
]
