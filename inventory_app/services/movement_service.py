"""
Movement Service - Registers stock entradas/salidas against the ledger
"""

import logging
import secrets
import string
import threading
import weakref
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from inventory_app.exceptions import (
    InsufficientStockError, InvalidInputError, NotFoundError
)
from inventory_app.models import MovementType, Product, StockMovement, User
from inventory_app.repositories import MovementRepository
from inventory_app.store import KeyValueStore, movement_key, product_key, user_key
from inventory_app.utils.timestamps import to_iso, utc_now
from .statistics import RECENT_ACTIVITY_LIMIT, RECENT_WINDOW_DAYS, compute_statistics

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.digits
_ID_SUFFIX_LENGTH = 9


class ProductLockRegistry:
    """Hands out one lock per product id while anyone still holds it"""

    def __init__(self):
        self._locks = weakref.WeakValueDictionary()
        self._guard = threading.Lock()

    def lock_for(self, product_id: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(product_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[product_id] = lock
            return lock

    def __len__(self):
        with self._guard:
            return len(self._locks)


@dataclass(frozen=True)
class MovementResult:
    movement: StockMovement
    updated_product: Product

    @property
    def message(self) -> str:
        label = 'Entrada' if self.movement.movement_type == MovementType.ENTRADA else 'Salida'
        return f"{label} registrada exitosamente"

    def to_dict(self):
        return {
            'movement': self.movement.to_dict(),
            'updatedProduct': self.updated_product.to_dict(),
            'message': self.message
        }


def generate_movement_id(now: datetime) -> str:
    """'{epochMillis}-{9 random base36 chars}'"""
    millis = int(now.timestamp() * 1000)
    suffix = ''.join(secrets.choice(_ID_ALPHABET) for _ in range(_ID_SUFFIX_LENGTH))
    return f"{millis}-{suffix}"


def parse_movement_type(value: Any) -> MovementType:
    if isinstance(value, MovementType):
        return value
    try:
        return MovementType(value)
    except ValueError:
        raise InvalidInputError('Invalid movement type. Must be "entrada" or "salida"')


def validate_quantity(value: Any) -> int:
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidInputError('Quantity must be a positive integer')
    return value


class MovementService:
    """Business logic for the stock movement ledger"""

    def __init__(
        self,
        store: KeyValueStore,
        locks: Optional[ProductLockRegistry] = None,
        clock: Callable[[], datetime] = utc_now,
        recent_days: int = RECENT_WINDOW_DAYS,
        activity_limit: int = RECENT_ACTIVITY_LIMIT
    ):
        self.store = store
        self.locks = locks if locks is not None else ProductLockRegistry()
        self.clock = clock
        self.recent_days = recent_days
        self.activity_limit = activity_limit
        self.movement_repo = MovementRepository(store)

    def apply_movement(
        self,
        product_id: str,
        movement_type: Any,
        quantity: Any,
        reason: Optional[str],
        acting_user_id: str
    ) -> MovementResult:
        """
        Apply an entrada or salida to a product's stock and record the movement

        Args:
            product_id: Product to adjust
            movement_type: 'entrada' or 'salida'
            quantity: Positive integer number of units
            reason: Free text, stored as '' when absent
            acting_user_id: Directory id of the user registering the movement

        Returns:
            MovementResult with the stored movement and the updated product

        Raises:
            InvalidInputError: bad movement type or quantity
            NotFoundError: unknown product or user
            InsufficientStockError: salida larger than the current stock
            StorageFailureError: the store could not complete the write
        """
        movement_type = parse_movement_type(movement_type)
        quantity = validate_quantity(quantity)
        if not product_id:
            raise InvalidInputError('productId is required')
        product_id = str(product_id)

        with self.locks.lock_for(product_id):
            with self.store.transaction() as tx:
                product_data = tx.get_for_update(product_key(product_id))
                if product_data is None:
                    raise NotFoundError('Product not found')
                product = Product.from_dict(product_data)

                user_data = tx.get(user_key(acting_user_id))
                if user_data is None:
                    raise NotFoundError('User data not found')
                user = User.from_dict(user_data)

                previous_stock = product.stock
                if movement_type == MovementType.ENTRADA:
                    new_stock = previous_stock + quantity
                else:
                    if previous_stock < quantity:
                        logger.warning(
                            f"Rejected salida of {quantity} for product {product_id}: "
                            f"only {previous_stock} in stock"
                        )
                        raise InsufficientStockError(previous_stock, quantity)
                    new_stock = previous_stock - quantity

                now = self.clock()
                movement_id = generate_movement_id(now)
                while tx.get(movement_key(product_id, movement_id)) is not None:
                    movement_id = generate_movement_id(now)

                timestamp = to_iso(now)
                movement = StockMovement(
                    id=movement_id,
                    product_id=product_id,
                    product_name=product.name,
                    movement_type=movement_type,
                    quantity=quantity,
                    reason=reason or '',
                    user_id=user.id,
                    user_name=user.name,
                    previous_stock=previous_stock,
                    new_stock=new_stock,
                    created_at=timestamp
                )
                updated_product = product.with_stock(new_stock, timestamp)

                tx.set(movement_key(product_id, movement_id), movement.to_dict())
                tx.set(product_key(product_id), updated_product.to_dict())

        logger.info(
            f"Stock movement registered: {movement_type.value} of {quantity} units "
            f"for product {product.name} by {user.name}"
        )
        return MovementResult(movement=movement, updated_product=updated_product)

    def list_movements(self, product_id: Optional[str] = None) -> List[StockMovement]:
        """All movements, or one product's movements, newest first"""
        return self.movement_repo.get_newest_first(product_id)

    def get_statistics(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        return compute_statistics(
            self.movement_repo.get_all(),
            now=now or self.clock(),
            recent_days=self.recent_days,
            activity_limit=self.activity_limit
        )
