"""
Cart related data models
"""
from dataclasses import dataclass
from typing import Dict, Any


@dataclass
class CartEntry:
    """One product in the cart with its quantity and the price captured at add time"""
    product_id: str
    title: str
    category: str
    price: float
    quantity: int = 1

    @property
    def line_total(self) -> float:
        return self.price * self.quantity

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "product_id": self.product_id,
            "title": self.title,
            "category": self.category,
            "price": self.price,
            "quantity": self.quantity
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CartEntry":
        """Restore from a persisted record"""
        return cls(
            product_id=str(data["product_id"]),
            title=data.get("title", ""),
            category=data.get("category", ""),
            price=float(data.get("price") or 0.0),
            quantity=int(data.get("quantity", 1))
        )


@dataclass
class CartSummary:
    """Cart totals"""
    total_items: int
    total_quantity: int
    total_price: float

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "total_items": self.total_items,
            "total_quantity": self.total_quantity,
            "total_price": self.total_price
        }
