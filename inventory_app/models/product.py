"""
Product Model
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Product:
    """Catalog product with its current stock level"""
    id: str
    name: str
    category: str
    price: float
    stock: int
    min_stock: int
    created_at: str
    updated_at: str
    description: Optional[str] = None

    def __repr__(self):
        return f'<Product {self.id} {self.name}>'

    @property
    def is_low_stock(self):
        """Check if product is at or below its minimum stock"""
        return self.stock <= self.min_stock

    @property
    def is_out_of_stock(self):
        return self.stock == 0

    @property
    def total_value(self):
        return self.price * self.stock

    def with_stock(self, stock: int, updated_at: str) -> 'Product':
        return replace(self, stock=stock, updated_at=updated_at)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Product':
        return cls(
            id=str(data['id']),
            name=data.get('name', ''),
            category=data.get('category', ''),
            price=float(data.get('price') or 0),
            stock=int(data.get('stock') or 0),
            min_stock=int(data.get('minStock') or 0),
            description=data.get('description'),
            created_at=data.get('createdAt', ''),
            updated_at=data.get('updatedAt', '')
        )

    def to_dict(self):
        """Convert to dictionary"""
        result = {
            'id': self.id,
            'name': self.name,
            'category': self.category,
            'price': self.price,
            'stock': self.stock,
            'minStock': self.min_stock,
            'createdAt': self.created_at,
            'updatedAt': self.updated_at
        }
        if self.description is not None:
            result['description'] = self.description
        return result
