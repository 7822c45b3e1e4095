"""
Cart service - the persistent cart store for the active session
"""
from typing import List

import structlog

from core.exceptions import StorageError
from models.cart import CartEntry, CartSummary
from models.order import DEFAULT_ITEM_PRICE
from models.product import Product
from database.repository import CartRepository
from .product_service import ProductService

logger = structlog.get_logger(__name__)


class CartService:
    """Holds selected products with quantities.

    At most one entry exists per product id and an entry whose quantity
    drops to zero is removed. Every mutation writes the whole collection
    back to durable storage; a failed write is logged and the in-memory
    cart stays authoritative.
    """

    def __init__(self, cart_repository: CartRepository, product_service: ProductService):
        self.cart_repo = cart_repository
        self.product_service = product_service
        self._entries: List[CartEntry] = self._hydrate()

    def _hydrate(self) -> List[CartEntry]:
        # Restore the cart saved by a previous run
        try:
            return self.cart_repo.load()
        except StorageError as e:
            logger.warning("Could not restore cart, starting empty", error=str(e))
            return []

    def _persist(self) -> None:
        try:
            self.cart_repo.save(self._entries)
        except StorageError as e:
            logger.error("Could not persist cart", error=str(e))

    @property
    def entries(self) -> List[CartEntry]:
        # Copies in insertion order
        return [CartEntry(**entry.to_dict()) for entry in self._entries]

    def is_empty(self) -> bool:
        return not self._entries

    def add(self, product: Product) -> None:
        # Increment an existing entry or insert a new one with quantity 1
        for entry in self._entries:
            if entry.product_id == product.product_id:
                entry.quantity += 1
                break
        else:
            price = DEFAULT_ITEM_PRICE if product.price is None else float(product.price)
            self._entries.append(CartEntry(
                product_id=product.product_id,
                title=product.title,
                category=product.category,
                price=price,
                quantity=1
            ))

        logger.debug("Added to cart", product_id=product.product_id)
        self._persist()

    def add_by_id(self, product_id: str) -> None:
        # Raises ProductNotFound for ids missing from the catalog
        self.add(self.product_service.get_product(product_id))

    def remove(self, product_id: str) -> None:
        # Decrement by one; entries reaching zero are dropped
        for entry in self._entries:
            if entry.product_id == product_id:
                entry.quantity -= 1
                break
        else:
            return

        self._entries = [entry for entry in self._entries if entry.quantity > 0]
        logger.debug("Removed from cart", product_id=product_id)
        self._persist()

    def clear(self) -> None:
        self._entries = []
        self._persist()

    def get_total_price(self) -> float:
        return round(sum(entry.price * entry.quantity for entry in self._entries), 2)

    def get_total_items(self) -> int:
        return sum(entry.quantity for entry in self._entries)

    def get_summary(self) -> CartSummary:
        return CartSummary(
            total_items=len(self._entries),
            total_quantity=self.get_total_items(),
            total_price=self.get_total_price()
        )
