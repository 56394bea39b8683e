"""Demo products loaded into a new ``ProductStore``."""

from typing import Any, Dict, List

SEED_PRODUCTS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "name": "Laptop",
        "description": "14 inch ultrabook, 16 GB RAM",
        "price": 999.99,
        "category": ["electronics"],
        "tags": ["computers", "portable"],
        "inStock": True,
        "ratings": [
            {"score": 5, "comment": "Fast and light"},
            {"score": 4, "comment": "Battery could be better"},
        ],
    },
    {
        "id": "2",
        "name": "Cookbook",
        "description": "Everyday recipes",
        "price": 24.5,
        "category": ["books", "food"],
        "inStock": False,
        "ratings": [],
    },
]
