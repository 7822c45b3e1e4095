"""
Database repository classes
"""
from typing import List, Optional, Dict, Any

from core.exceptions import StorageError

from models.product import Product
from models.cart import CartEntry
from models.order import Order
from models.user import User
from .seed import SEED_PRODUCTS
from .storage import KeyValueStorage

CART_STORAGE_KEY = "cafezinho:cart"
USER_STORAGE_KEY = "@cafezinho:user"


class ProductRepository:
    # Read-only catalog access

    def __init__(self, records: Optional[List[Dict[str, Any]]] = None):
        # Catalog records default to the static seed
        source = SEED_PRODUCTS if records is None else records
        self._products = [Product.from_dict(record) for record in source]

    def find_products(self, category: Optional[str] = None) -> List[Product]:
        # All products, optionally restricted to one category
        if category:
            return [p for p in self._products if p.category == category]
        return list(self._products)

    def get_product_by_id(self, product_id: str) -> Optional[Product]:
        for product in self._products:
            if product.product_id == product_id:
                return product
        return None


class CartRepository:
    # Persists the whole cart collection as one blob

    def __init__(self, storage: KeyValueStorage, key: str = CART_STORAGE_KEY):
        self.storage = storage
        self.key = key

    def load(self) -> List[CartEntry]:
        data = self.storage.get_item(self.key)
        if not data:
            return []
        try:
            return [CartEntry.from_dict(record) for record in data.get("products", [])]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise StorageError(f"unreadable cart under '{self.key}': {e!r}") from e

    def save(self, entries: List[CartEntry]) -> None:
        self.storage.set_item(self.key, {"products": [entry.to_dict() for entry in entries]})

    def clear(self) -> None:
        self.storage.remove_item(self.key)


class UserRepository:
    # Single current-user record on the device

    def __init__(self, storage: KeyValueStorage, key: str = USER_STORAGE_KEY):
        self.storage = storage
        self.key = key

    def load(self) -> Optional[User]:
        data = self.storage.get_item(self.key)
        if not data:
            return None
        try:
            return User.from_dict(data)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise StorageError(f"unreadable user under '{self.key}': {e!r}") from e

    def save(self, user: User) -> None:
        self.storage.set_item(self.key, user.to_dict())

    def remove(self) -> None:
        self.storage.remove_item(self.key)


class OrderRepository:
    # Process-lifetime order collection (not durable across restarts)

    def __init__(self):
        self._orders: List[Order] = []

    def add(self, order: Order) -> None:
        self._orders.append(order)

    def find_by_id(self, order_id: str) -> Optional[Order]:
        for order in self._orders:
            if order.order_id == order_id:
                return order
        return None

    def find_by_user(self, user_id: str) -> List[Order]:
        # Creation order is preserved
        return [order for order in self._orders if order.user_id == user_id]

    def all(self) -> List[Order]:
        return list(self._orders)

    def clear(self) -> None:
        self._orders = []
