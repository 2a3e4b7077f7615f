"""
Product Repository - product records in the ledger store
"""

from typing import List, Optional

from inventory_app.models import Product
from inventory_app.store import KeyValueStore, product_key, PRODUCT_PREFIX


class ProductRepository:
    """Data access for product:{id} records"""

    def __init__(self, store: KeyValueStore):
        self.store = store

    def get_by_id(self, product_id: str) -> Optional[Product]:
        """Get product by ID"""
        data = self.store.get(product_key(product_id))
        return Product.from_dict(data) if data else None

    def get_all(self) -> List[Product]:
        """Get all products ordered by creation time"""
        products = [Product.from_dict(data) for data in self.store.get_by_prefix(PRODUCT_PREFIX)]
        return sorted(products, key=lambda p: (p.created_at, p.id))

    def save(self, product: Product) -> Product:
        """Create or replace a product"""
        self.store.set(product_key(product.id), product.to_dict())
        return product

    def count(self) -> int:
        return len(self.store.get_by_prefix(PRODUCT_PREFIX))
