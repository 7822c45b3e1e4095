"""
Product related data models
"""
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any


@dataclass
class Product:
    """Read-only catalog entry"""
    product_id: str
    title: str
    price: Optional[float] = None
    category: str = "Drinks"
    description: List[str] = field(default_factory=list)
    ingredients: List[str] = field(default_factory=list)
    available: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "product_id": self.product_id,
            "title": self.title,
            "price": self.price,
            "category": self.category,
            "description": list(self.description),
            "ingredients": list(self.ingredients),
            "available": self.available
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Product":
        """Build from a catalog record"""
        description = data.get("description") or []
        if isinstance(description, str):
            description = [description]
        return cls(
            product_id=str(data["product_id"]),
            title=data.get("title", ""),
            price=data.get("price"),
            category=data.get("category", "Drinks"),
            description=list(description),
            ingredients=list(data.get("ingredients") or []),
            available=data.get("available", True)
        )
