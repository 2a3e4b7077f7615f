"""
Category Repository
"""

from typing import List

from inventory_app.models import Category
from inventory_app.store import KeyValueStore, category_key, CATEGORY_PREFIX


class CategoryRepository:

    def __init__(self, store: KeyValueStore):
        self.store = store

    def get_all(self) -> List[Category]:
        categories = [Category.from_dict(data) for data in self.store.get_by_prefix(CATEGORY_PREFIX)]
        return sorted(categories, key=lambda c: c.id)

    def save(self, category: Category) -> Category:
        self.store.set(category_key(category.id), category.to_dict())
        return category
