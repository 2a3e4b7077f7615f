"""
Product Service - Catalog management and inventory dashboard figures
"""

import logging
import time
from typing import Any, Dict, List, Optional

from inventory_app.exceptions import InvalidInputError, NotFoundError
from inventory_app.models import Category, Product
from inventory_app.repositories import CategoryRepository, ProductRepository
from inventory_app.store import KeyValueStore, product_key
from inventory_app.utils.timestamps import now_iso
from .movement_service import ProductLockRegistry
from .sample_data import DEFAULT_CATEGORIES

logger = logging.getLogger(__name__)

# Fields a catalog update may touch; stock only moves through the ledger
UPDATABLE_FIELDS = ('name', 'category', 'price', 'minStock', 'description')


class ProductService:
    """Business logic for products and categories"""

    def __init__(self, store: KeyValueStore, locks: Optional[ProductLockRegistry] = None):
        self.store = store
        self.locks = locks if locks is not None else ProductLockRegistry()
        self.product_repo = ProductRepository(store)
        self.category_repo = CategoryRepository(store)

    def list_products(self) -> List[Product]:
        products = self.product_repo.get_all()
        logger.debug(f"Found {len(products)} products")
        return products

    def get_product(self, product_id: str) -> Product:
        product = self.product_repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError('Product not found')
        return product

    def create_product(self, data: Dict[str, Any]) -> Product:
        """
        Create a product from validated request data

        The id is the creation time in epoch milliseconds, bumped until unused
        """
        if not data.get('name') or not data.get('category') or data.get('price') is None:
            raise InvalidInputError('Missing required fields: name, category, price')

        product_id = int(time.time() * 1000)
        while self.product_repo.get_by_id(str(product_id)) is not None:
            product_id += 1

        timestamp = now_iso()
        product = Product(
            id=str(product_id),
            name=data['name'],
            category=data['category'],
            price=float(data['price']),
            stock=int(data.get('stock', 0)),
            min_stock=int(data.get('minStock', 0)),
            description=data.get('description'),
            created_at=timestamp,
            updated_at=timestamp
        )
        self.product_repo.save(product)
        logger.info(f"Created product {product.id} ({product.name})")
        return product

    def update_product(self, product_id: str, updates: Dict[str, Any]) -> Product:
        """
        Apply catalog field updates to a product

        Runs under the product's ledger lock and re-reads the stored record, so
        a movement committed meanwhile keeps its stock change
        """
        product_id = str(product_id)
        with self.locks.lock_for(product_id):
            with self.store.transaction() as tx:
                data = tx.get_for_update(product_key(product_id))
                if data is None:
                    raise NotFoundError('Product not found')
                existing = Product.from_dict(data)
                if 'stock' in updates and updates['stock'] != existing.stock:
                    raise InvalidInputError('Stock can only be changed by registering a movement')

                product = self._merge_updates(existing, updates)
                tx.set(product_key(product_id), product.to_dict())

        logger.info(f"Updated product {product.id}")
        return product

    def _merge_updates(self, existing: Product, updates: Dict[str, Any]) -> Product:
        merged = existing.to_dict()
        merged.update({key: value for key, value in updates.items() if key in UPDATABLE_FIELDS})
        merged['id'] = existing.id
        merged['updatedAt'] = now_iso()
        return Product.from_dict(merged)

    def delete_product(self, product_id: str) -> None:
        product_id = str(product_id)
        with self.locks.lock_for(product_id):
            with self.store.transaction() as tx:
                if tx.get_for_update(product_key(product_id)) is None:
                    raise NotFoundError('Product not found')
                tx.delete(product_key(product_id))
        logger.info(f"Deleted product {product_id}")

    def list_categories(self) -> List[Category]:
        """Categories, creating the default set when none exist"""
        categories = self.category_repo.get_all()
        if categories:
            return categories

        logger.info('No categories found, creating defaults')
        for category in DEFAULT_CATEGORIES:
            self.category_repo.save(category)
        return list(DEFAULT_CATEGORIES)

    def get_inventory_stats(self, products: Optional[List[Product]] = None) -> Dict[str, Any]:
        """Dashboard counters over the current catalog"""
        if products is None:
            products = self.product_repo.get_all()
        return {
            'totalProducts': len(products),
            'totalValue': round(sum(p.total_value for p in products), 2),
            'lowStock': sum(1 for p in products if 0 < p.stock <= p.min_stock),
            'outOfStock': sum(1 for p in products if p.is_out_of_stock),
            'inStock': sum(1 for p in products if p.stock > p.min_stock),
            'categories': len(self.category_repo.get_all())
        }
