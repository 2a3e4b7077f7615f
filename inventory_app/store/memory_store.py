"""
In-memory ledger store
"""

import copy
import threading
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from .base import KeyValueStore, KeyValueTransaction

_DELETED = object()


class _MemoryTransaction(KeyValueTransaction):

    def __init__(self, store: 'InMemoryKeyValueStore'):
        self._store = store
        self._writes: Dict[str, Any] = {}

    def get(self, key):
        if key in self._writes:
            value = self._writes[key]
            return None if value is _DELETED else copy.deepcopy(value)
        return self._store.get(key)

    def get_for_update(self, key):
        # The store lock is held for the whole transaction
        return self.get(key)

    def set(self, key, value):
        self._writes[key] = copy.deepcopy(value)

    def delete(self, key):
        self._writes[key] = _DELETED

    def apply(self, data: Dict[str, Dict[str, Any]]):
        for key, value in self._writes.items():
            if value is _DELETED:
                data.pop(key, None)
            else:
                data[key] = value


class InMemoryKeyValueStore(KeyValueStore):
    """Dict-backed store; values are copied in and out so callers never share state"""

    def __init__(self):
        self._data: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.RLock()

    def get(self, key: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            return copy.deepcopy(self._data.get(key))

    def set(self, key: str, value: Dict[str, Any]) -> None:
        with self._lock:
            self._data[key] = copy.deepcopy(value)

    def delete(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)

    def get_by_prefix(self, prefix: str) -> List[Dict[str, Any]]:
        with self._lock:
            return [copy.deepcopy(value) for key, value in self._data.items() if key.startswith(prefix)]

    @contextmanager
    def transaction(self) -> Iterator[KeyValueTransaction]:
        with self._lock:
            tx = _MemoryTransaction(self)
            yield tx
            tx.apply(self._data)

    def ping(self) -> bool:
        return True

    def __len__(self):
        with self._lock:
            return len(self._data)
