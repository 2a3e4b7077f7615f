"""
Services package - Business logic layer
"""

from .movement_service import MovementService, MovementResult, ProductLockRegistry
from .statistics import compute_statistics
from .product_service import ProductService
from .user_service import UserService
from .report_service import ReportService

__all__ = [
    'MovementService',
    'MovementResult',
    'ProductLockRegistry',
    'compute_statistics',
    'ProductService',
    'UserService',
    'ReportService'
]
