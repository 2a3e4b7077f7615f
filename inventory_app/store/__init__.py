"""
Ledger store package - key-value persistence for products, movements, users and categories
"""

from .base import (
    KeyValueStore, KeyValueTransaction,
    product_key, movement_key, movement_prefix, user_key, category_key,
    PRODUCT_PREFIX, MOVEMENT_PREFIX, USER_PREFIX, CATEGORY_PREFIX
)
from .memory_store import InMemoryKeyValueStore
from .sql_store import SQLKeyValueStore


def create_store(backend: str) -> KeyValueStore:
    """Build the store named by the LEDGER_BACKEND setting"""
    if backend == 'memory':
        return InMemoryKeyValueStore()
    if backend == 'sql':
        return SQLKeyValueStore()
    raise ValueError(f"Unknown ledger backend: {backend}")


__all__ = [
    'KeyValueStore',
    'KeyValueTransaction',
    'InMemoryKeyValueStore',
    'SQLKeyValueStore',
    'create_store',
    'product_key',
    'movement_key',
    'movement_prefix',
    'user_key',
    'category_key',
    'PRODUCT_PREFIX',
    'MOVEMENT_PREFIX',
    'USER_PREFIX',
    'CATEGORY_PREFIX'
]
