import os
import pytest

# Set test environment variables before importing the app
os.environ['FLASK_ENV'] = 'testing'
os.environ['DATABASE_URL'] = 'sqlite:///:memory:'

from inventory_app.api import create_app
from inventory_app.models import UserRole
from inventory_app.repositories import ProductRepository, UserRepository
from inventory_app.services import MovementService
from inventory_app.store import InMemoryKeyValueStore
from factories import make_product, make_user, auth_headers


@pytest.fixture
def store():
    """Fresh in-memory ledger store"""
    return InMemoryKeyValueStore()


@pytest.fixture
def app(store):
    """Create application for the tests."""
    app = create_app('testing', store=store)
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    """A test client for the app."""
    return app.test_client()


@pytest.fixture
def runner(app):
    """A test runner for the app's Click commands."""
    return app.test_cli_runner()


@pytest.fixture
def sample_product(store):
    """Product 1 with 24 units and a minimum of 5"""
    return ProductRepository(store).save(make_product())


@pytest.fixture
def employee(store):
    return UserRepository(store).save(make_user())


@pytest.fixture
def admin(store):
    return UserRepository(store).save(make_user('admin-1', 'Administrador Principal', UserRole.ADMIN))


@pytest.fixture
def employee_headers(employee):
    return auth_headers(employee.id, 'employee')


@pytest.fixture
def admin_headers(admin):
    return auth_headers(admin.id, 'admin')


@pytest.fixture
def movement_service(store):
    return MovementService(store)
