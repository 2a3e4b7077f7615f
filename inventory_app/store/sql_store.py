"""
SQL ledger store - JSON documents in the kv_store table via Flask-SQLAlchemy
"""

import copy
import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from sqlalchemy import select, text
from sqlalchemy.exc import SQLAlchemyError

from inventory_app.database import db
from inventory_app.exceptions import StorageFailureError
from inventory_app.models import KeyValueEntry
from .base import KeyValueStore, KeyValueTransaction

logger = logging.getLogger(__name__)


@contextmanager
def _storage_errors(operation: str, key: str = ''):
    """Roll back and re-raise database errors as StorageFailureError"""
    try:
        yield
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"Storage failure during {operation} {key}: {e}")
        raise StorageFailureError(f"Storage failure during {operation}") from e


def _write(key: str, value: Dict[str, Any]):
    entry = db.session.get(KeyValueEntry, key)
    if entry is None:
        db.session.add(KeyValueEntry(key=key, value=copy.deepcopy(value)))
    else:
        entry.value = copy.deepcopy(value)


class _SQLTransaction(KeyValueTransaction):

    def get(self, key):
        entry = db.session.get(KeyValueEntry, key)
        return copy.deepcopy(entry.value) if entry else None

    def get_for_update(self, key):
        entry = db.session.execute(
            select(KeyValueEntry)
            .where(KeyValueEntry.key == key)
            .with_for_update()
            .execution_options(populate_existing=True)
        ).scalar_one_or_none()
        return copy.deepcopy(entry.value) if entry else None

    def set(self, key, value):
        _write(key, value)

    def delete(self, key):
        entry = db.session.get(KeyValueEntry, key)
        if entry is not None:
            db.session.delete(entry)


class SQLKeyValueStore(KeyValueStore):
    """Store backed by one SQL table; requires an application context"""

    def get(self, key: str) -> Optional[Dict[str, Any]]:
        with _storage_errors('get', key):
            entry = db.session.get(KeyValueEntry, key)
            return copy.deepcopy(entry.value) if entry else None

    def set(self, key: str, value: Dict[str, Any]) -> None:
        with _storage_errors('set', key):
            _write(key, value)
            db.session.commit()

    def delete(self, key: str) -> None:
        with _storage_errors('delete', key):
            entry = db.session.get(KeyValueEntry, key)
            if entry is not None:
                db.session.delete(entry)
                db.session.commit()

    def get_by_prefix(self, prefix: str) -> List[Dict[str, Any]]:
        with _storage_errors('prefix scan', prefix):
            entries = db.session.execute(
                select(KeyValueEntry).where(KeyValueEntry.key.startswith(prefix, autoescape=True))
            ).scalars().all()
            return [copy.deepcopy(entry.value) for entry in entries]

    @contextmanager
    def transaction(self) -> Iterator[KeyValueTransaction]:
        try:
            yield _SQLTransaction()
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Storage failure during transaction: {e}")
            raise StorageFailureError("Storage failure during transaction") from e
        except Exception:
            db.session.rollback()
            raise

    def ping(self) -> bool:
        try:
            db.session.execute(text('SELECT 1'))
            return True
        except SQLAlchemyError as e:
            logger.warning(f"Store ping failed: {e}")
            db.session.rollback()
            return False
