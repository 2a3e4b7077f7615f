"""
Models package - ledger records and the key-value table
"""

# Import enums first
from .enums import MovementType, UserRole

# Import models
from .product import Product
from .stock_movement import StockMovement
from .user import User
from .category import Category
from .kv_entry import KeyValueEntry

# Export all models and enums
__all__ = [
    'MovementType',
    'UserRole',
    'Product',
    'StockMovement',
    'User',
    'Category',
    'KeyValueEntry'
]
