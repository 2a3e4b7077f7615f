"""
Unit tests for the in-memory ledger store
"""

import pytest

from inventory_app.store import (
    InMemoryKeyValueStore, create_store, movement_key, movement_prefix, product_key
)


class TestKeyScheme:

    def test_keys(self):
        assert product_key('1') == 'product:1'
        assert movement_key('1', 'abc') == 'movement:1:abc'
        assert movement_prefix() == 'movement:'
        assert movement_prefix('1') == 'movement:1:'

    def test_product_prefix_does_not_match_longer_ids(self, store):
        store.set(movement_key('1', 'a'), {'id': 'a'})
        store.set(movement_key('12', 'b'), {'id': 'b'})

        assert store.get_by_prefix(movement_prefix('1')) == [{'id': 'a'}]


class TestInMemoryKeyValueStore:

    def test_get_missing_returns_none(self, store):
        assert store.get('product:missing') is None

    def test_set_get_delete(self, store):
        store.set('product:1', {'id': '1', 'stock': 3})
        assert store.get('product:1') == {'id': '1', 'stock': 3}

        store.delete('product:1')
        assert store.get('product:1') is None
        store.delete('product:1')

    def test_values_are_copied(self, store):
        value = {'id': '1', 'tags': ['a']}
        store.set('product:1', value)
        value['tags'].append('b')

        stored = store.get('product:1')
        stored['tags'].append('c')

        assert store.get('product:1') == {'id': '1', 'tags': ['a']}

    def test_transaction_commits_on_exit(self, store):
        with store.transaction() as tx:
            tx.set('product:1', {'id': '1'})
            tx.set('movement:1:a', {'id': 'a'})
            assert tx.get('product:1') == {'id': '1'}
            assert store.get('product:1') is None

        assert store.get('product:1') == {'id': '1'}
        assert store.get('movement:1:a') == {'id': 'a'}

    def test_transaction_discards_writes_on_error(self, store):
        store.set('product:1', {'id': '1', 'stock': 5})

        with pytest.raises(RuntimeError):
            with store.transaction() as tx:
                tx.set('product:1', {'id': '1', 'stock': 0})
                tx.delete('product:1')
                raise RuntimeError('boom')

        assert store.get('product:1') == {'id': '1', 'stock': 5}

    def test_transaction_delete(self, store):
        store.set('product:1', {'id': '1'})
        with store.transaction() as tx:
            tx.delete('product:1')
            assert tx.get_for_update('product:1') is None

        assert store.get('product:1') is None
        assert len(store) == 0

    def test_ping(self, store):
        assert store.ping() is True


class TestCreateStore:

    def test_memory_backend(self):
        assert isinstance(create_store('memory'), InMemoryKeyValueStore)

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            create_store('redis')
