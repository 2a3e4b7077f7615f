"""
Repositories package - Data access layer over the ledger store
"""

from .product_repository import ProductRepository
from .movement_repository import MovementRepository, sort_newest_first
from .user_repository import UserRepository
from .category_repository import CategoryRepository

__all__ = [
    'ProductRepository',
    'MovementRepository',
    'UserRepository',
    'CategoryRepository',
    'sort_newest_first'
]
