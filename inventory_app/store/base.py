"""
Ledger store interface - abstract base classes and key scheme
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

PRODUCT_PREFIX = 'product:'
MOVEMENT_PREFIX = 'movement:'
USER_PREFIX = 'user:'
CATEGORY_PREFIX = 'category:'


def product_key(product_id: str) -> str:
    return f"{PRODUCT_PREFIX}{product_id}"


def movement_key(product_id: str, movement_id: str) -> str:
    return f"{MOVEMENT_PREFIX}{product_id}:{movement_id}"


def movement_prefix(product_id: Optional[str] = None) -> str:
    """'movement:' for every movement, 'movement:{productId}:' for one product"""
    if product_id is None:
        return MOVEMENT_PREFIX
    return f"{MOVEMENT_PREFIX}{product_id}:"


def user_key(user_id: str) -> str:
    return f"{USER_PREFIX}{user_id}"


def category_key(category_id: str) -> str:
    return f"{CATEGORY_PREFIX}{category_id}"


class KeyValueTransaction(ABC):
    """Batch of reads and writes that commit together"""

    @abstractmethod
    def get(self, key: str) -> Optional[Dict[str, Any]]:
        pass

    @abstractmethod
    def get_for_update(self, key: str) -> Optional[Dict[str, Any]]:
        """Read a value and hold it against concurrent writers until commit"""
        pass

    @abstractmethod
    def set(self, key: str, value: Dict[str, Any]) -> None:
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        pass


class KeyValueStore(ABC):
    """Abstract key-value persistence used by repositories and services"""

    @abstractmethod
    def get(self, key: str) -> Optional[Dict[str, Any]]:
        pass

    @abstractmethod
    def set(self, key: str, value: Dict[str, Any]) -> None:
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        pass

    @abstractmethod
    def get_by_prefix(self, prefix: str) -> List[Dict[str, Any]]:
        """Values whose key starts with prefix, in no particular order"""
        pass

    @abstractmethod
    @contextmanager
    def transaction(self) -> Iterator[KeyValueTransaction]:
        pass

    @abstractmethod
    def ping(self) -> bool:
        pass
