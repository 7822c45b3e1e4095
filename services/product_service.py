"""
Product service - catalog lookup and grouping
"""
from typing import Dict, List, Any, Optional
from difflib import SequenceMatcher

from core.exceptions import ProductNotFound
from models.product import Product
from database.repository import ProductRepository


class ProductService:
    # Read-only catalog operations used by the cart, the API and the terminal UI

    def __init__(self, product_repository: ProductRepository):
        self.product_repo = product_repository

    def similarity(self, a: str, b: str) -> float:
        # Similarity score between two strings (0.0~1.0)
        return SequenceMatcher(None, a.lower(), b.lower()).ratio()

    def list_products(self, category: Optional[str] = None) -> List[Product]:
        return self.product_repo.find_products(category)

    def get_product(self, product_id: str) -> Product:
        product = self.product_repo.get_product_by_id(product_id)
        if product is None:
            raise ProductNotFound(product_id)
        return product

    def get_categories(self) -> List[str]:
        # Distinct categories in first-seen catalog order
        categories: List[str] = []
        for product in self.product_repo.find_products():
            if product.category not in categories:
                categories.append(product.category)
        return categories

    def organize_by_category(self) -> List[Dict[str, Any]]:
        # Menu sections: one {title, data} block per category
        return [
            {"title": category, "data": self.product_repo.find_products(category)}
            for category in self.get_categories()
        ]

    def find_product(self, query: str, limit: int = 5) -> List[Product]:
        # Products whose title resembles the query, best match first
        query = query.strip()
        if not query:
            return []

        scored = []
        for product in self.product_repo.find_products():
            score = self.similarity(query, product.title)
            # Partial names ("latte") count as strong matches
            if query.lower() in product.title.lower():
                score = max(score, 0.9)
            if score > 0.3:
                scored.append((score, product))

        scored.sort(key=lambda pair: pair[0], reverse=True)
        return [product for _, product in scored[:limit]]
