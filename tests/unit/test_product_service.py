"""
Unit tests for the product catalog service
"""

import threading

import pytest

from inventory_app.exceptions import InvalidInputError, NotFoundError
from inventory_app.repositories import ProductRepository, UserRepository
from inventory_app.services import MovementService, ProductLockRegistry, ProductService
from inventory_app.services.sample_data import SAMPLE_PRODUCTS, seed_demo_users, seed_sample_products
from factories import make_product


@pytest.fixture
def locks():
    return ProductLockRegistry()


@pytest.fixture
def product_service(store, locks):
    return ProductService(store, locks=locks)


class TestProductService:

    def test_create_product(self, product_service, store):
        product = product_service.create_product({
            'name': 'Agua Vital 2L', 'category': 'Bebidas', 'price': 6.0, 'stock': 12, 'minStock': 4
        })

        assert product.id.isdigit()
        assert product.created_at == product.updated_at
        assert ProductRepository(store).get_by_id(product.id) == product

    def test_create_product_ids_do_not_collide(self, product_service):
        data = {'name': 'Agua', 'category': 'Bebidas', 'price': 1.0}
        ids = {product_service.create_product(data).id for _ in range(5)}

        assert len(ids) == 5

    def test_create_requires_fields(self, product_service):
        with pytest.raises(InvalidInputError):
            product_service.create_product({'name': 'Agua'})

    def test_get_missing_product(self, product_service):
        with pytest.raises(NotFoundError):
            product_service.get_product('404')

    def test_update_merges_and_keeps_id(self, product_service, sample_product):
        product = product_service.update_product('1', {'price': 5.5, 'id': 'other'})

        assert product.id == '1'
        assert product.price == 5.5
        assert product.name == sample_product.name
        assert product.stock == 24

    def test_update_cannot_change_stock(self, product_service, sample_product):
        with pytest.raises(InvalidInputError):
            product_service.update_product('1', {'stock': 100})

    def test_update_with_same_stock_is_allowed(self, product_service, sample_product):
        assert product_service.update_product('1', {'stock': 24, 'name': 'Coca Cola 2L'}).name == 'Coca Cola 2L'

    def test_delete(self, product_service, sample_product):
        product_service.delete_product('1')

        with pytest.raises(NotFoundError):
            product_service.delete_product('1')

    def test_edit_waits_for_and_keeps_concurrent_movement(self, product_service, store, locks,
                                                          sample_product, employee, monkeypatch):
        movements = MovementService(store, locks=locks)
        movement_done = threading.Event()
        waited = []

        def register_entrada():
            movements.apply_movement('1', 'entrada', 10, 'Reposición', employee.id)
            movement_done.set()

        merge = product_service._merge_updates

        def merge_during_movement(existing, updates):
            worker.start()
            # The movement needs the product lock the edit is holding
            waited.append(not movement_done.wait(timeout=0.2))
            return merge(existing, updates)

        worker = threading.Thread(target=register_entrada)
        monkeypatch.setattr(product_service, '_merge_updates', merge_during_movement)

        edited = product_service.update_product('1', {'name': 'Coca Cola 2L'})
        worker.join(timeout=5)

        assert waited == [True]
        assert movement_done.is_set()
        assert edited.stock == 24
        stored = ProductRepository(store).get_by_id('1')
        assert stored.name == 'Coca Cola 2L'
        assert stored.stock == 34
        assert movements.list_movements('1')[0].new_stock == 34

    def test_edit_after_movement_keeps_new_stock(self, product_service, store, locks, sample_product, employee):
        MovementService(store, locks=locks).apply_movement('1', 'salida', 4, 'Venta', employee.id)

        product = product_service.update_product('1', {'price': 3.0})

        assert product.stock == 20
        assert ProductRepository(store).get_by_id('1').stock == 20

    def test_update_missing_product(self, product_service):
        with pytest.raises(NotFoundError):
            product_service.update_product('404', {'name': 'x'})

    def test_default_categories_created_once(self, product_service, store):
        categories = product_service.list_categories()

        assert [c.name for c in categories] == ['Bebidas', 'Snacks', 'Dulces', 'Higiene', 'Limpieza']
        assert len(store.get_by_prefix('category:')) == 5
        assert product_service.list_categories() == categories

    def test_inventory_stats(self, product_service, store):
        repo = ProductRepository(store)
        repo.save(make_product('1', stock=24, min_stock=5, price=5.0))
        repo.save(make_product('2', stock=3, min_stock=5, price=2.5))
        repo.save(make_product('3', stock=0, min_stock=2, price=10.0))
        repo.save(make_product('4', stock=5, min_stock=5, price=1.0))

        stats = product_service.get_inventory_stats()

        assert stats == {
            'totalProducts': 4,
            'totalValue': 132.5,
            'lowStock': 2,
            'outOfStock': 1,
            'inStock': 1,
            'categories': 0
        }


class TestSampleData:

    def test_seed_sample_products_only_when_empty(self, store):
        first = seed_sample_products(store)
        second = seed_sample_products(store)

        assert first == {'message': 'Sample products initialized successfully', 'products': 5, 'existing': False}
        assert second['existing'] is True
        assert ProductRepository(store).get_by_id('1').stock == 24
        assert len(ProductRepository(store).get_all()) == len(SAMPLE_PRODUCTS)

    def test_seed_demo_users(self, store):
        assert seed_demo_users(store) == 2
        assert seed_demo_users(store) == 0
        assert UserRepository(store).get_by_email('admin@tienda.com').is_admin
