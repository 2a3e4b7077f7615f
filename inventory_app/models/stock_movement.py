"""
Stock Movement Model
"""

from dataclasses import dataclass
from typing import Any, Dict
from .enums import MovementType


@dataclass(frozen=True)
class StockMovement:
    """Immutable ledger entry; productName is denormalized so history survives renames"""
    id: str
    product_id: str
    product_name: str
    movement_type: MovementType
    quantity: int
    user_id: str
    user_name: str
    previous_stock: int
    new_stock: int
    created_at: str
    reason: str = ''

    def __repr__(self):
        return f'<StockMovement {self.product_id} {self.movement_type.value} {self.quantity}>'

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'StockMovement':
        return cls(
            id=str(data['id']),
            product_id=str(data['productId']),
            product_name=data.get('productName', ''),
            movement_type=MovementType(data['type']),
            quantity=int(data['quantity']),
            reason=data.get('reason') or '',
            user_id=str(data.get('userId', '')),
            user_name=data.get('userName', ''),
            previous_stock=int(data['previousStock']),
            new_stock=int(data['newStock']),
            created_at=data['createdAt']
        )

    def to_dict(self):
        """Convert to dictionary"""
        return {
            'id': self.id,
            'productId': self.product_id,
            'productName': self.product_name,
            'type': self.movement_type.value,
            'quantity': self.quantity,
            'reason': self.reason,
            'userId': self.user_id,
            'userName': self.user_name,
            'previousStock': self.previous_stock,
            'newStock': self.new_stock,
            'createdAt': self.created_at
        }
