"""
Movement Repository - read side of the stock movement ledger
"""

from typing import Iterable, List, Optional

from inventory_app.models import StockMovement
from inventory_app.store import KeyValueStore, movement_prefix
from inventory_app.utils.timestamps import parse_iso


def sort_newest_first(movements: Iterable[StockMovement]) -> List[StockMovement]:
    """Order by createdAt descending; equal timestamps keep their input order"""
    return sorted(movements, key=lambda m: parse_iso(m.created_at), reverse=True)


class MovementRepository:
    """Data access for movement:{productId}:{movementId} records"""

    def __init__(self, store: KeyValueStore):
        self.store = store

    def get_all(self, product_id: Optional[str] = None) -> List[StockMovement]:
        """Movements for every product, or for one product, in store order"""
        return [
            StockMovement.from_dict(data)
            for data in self.store.get_by_prefix(movement_prefix(product_id))
        ]

    def get_newest_first(self, product_id: Optional[str] = None) -> List[StockMovement]:
        return sort_newest_first(self.get_all(product_id))
