"""
Static catalog served by the storefront and the mock API
"""
from typing import Any, Dict, List

SEED_PRODUCTS: List[Dict[str, Any]] = [
    {
        "product_id": "1",
        "title": "Expresso Cappuccino",
        "description": ["Café cremoso com espuma de leite"],
        "price": 8.50,
        "category": "Drinks",
        "ingredients": ["Espresso", "Leite", "Espuma de leite"],
        "available": True,
    },
    {
        "product_id": "2",
        "title": "Expresso Latte",
        "description": ["Café cremoso com leite vaporizado"],
        "price": 7.50,
        "category": "Drinks",
        "ingredients": ["Espresso", "Leite vaporizado"],
        "available": True,
    },
    {
        "product_id": "3",
        "title": "Expresso Americano",
        "description": ["Café americano tradicional"],
        "price": 6.00,
        "category": "Drinks",
        "ingredients": ["Espresso", "Água quente"],
        "available": True,
    },
    {
        "product_id": "4",
        "title": "Expresso Mocha",
        "description": ["Café com chocolate"],
        "price": 9.00,
        "category": "Drinks",
        "ingredients": ["Espresso", "Chocolate", "Leite vaporizado"],
        "available": True,
    },
]
