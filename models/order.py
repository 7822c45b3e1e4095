"""
Order related data models
"""
from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any
from enum import Enum


class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PREPARING = "preparing"
    READY = "ready"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


# Default unit price when a line item carries none
DEFAULT_ITEM_PRICE = 0.0


def _first(data: Dict[str, Any], *keys: str) -> Any:
    # Payloads use snake_case or the mobile client's camelCase keys
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


@dataclass
class OrderItem:
    """Order line item data model"""
    product_id: Optional[str]
    quantity: int
    price: float = DEFAULT_ITEM_PRICE

    @property
    def line_total(self) -> float:
        return self.price * self.quantity

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "product_id": self.product_id,
            "quantity": self.quantity,
            "price": self.price
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OrderItem":
        """Build from a request payload, leaving bad values for the validator"""
        price = data.get("price")
        return cls(
            product_id=_first(data, "product_id", "product"),
            quantity=data.get("quantity", 0),
            price=DEFAULT_ITEM_PRICE if price is None else price
        )


@dataclass
class OrderRequest:
    """Candidate order assembled at checkout"""
    user_id: Optional[str]
    items: List[OrderItem] = field(default_factory=list)
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None
    notes: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OrderRequest":
        """Build from a request payload"""
        raw_items = data.get("items") or []
        if not isinstance(raw_items, list):
            raw_items = []
        items = [OrderItem.from_dict(item) if isinstance(item, dict) else OrderItem(None, 0)
                 for item in raw_items]
        return cls(
            user_id=_first(data, "user_id", "userId"),
            items=items,
            customer_name=_first(data, "customer_name", "customerName"),
            customer_phone=_first(data, "customer_phone", "customerPhone"),
            notes=data.get("notes")
        )


@dataclass
class Order:
    """Order data model"""
    order_id: str
    user_id: Optional[str]
    items: List[OrderItem]
    total_amount: float
    status: OrderStatus
    customer_name: str
    order_number: str
    created_at: str
    updated_at: str
    customer_phone: Optional[str] = None
    notes: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "order_id": self.order_id,
            "user_id": self.user_id,
            "items": [item.to_dict() for item in self.items],
            "total_amount": self.total_amount,
            "status": self.status.value,
            "customer_name": self.customer_name,
            "customer_phone": self.customer_phone,
            "notes": self.notes,
            "order_number": self.order_number,
            "created_at": self.created_at,
            "updated_at": self.updated_at
        }
