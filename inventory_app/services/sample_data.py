"""
Default categories, sample products and demo directory users
"""

import logging
from typing import Any, Dict

from inventory_app.models import Category, Product, User, UserRole
from inventory_app.repositories import CategoryRepository, ProductRepository, UserRepository
from inventory_app.store import KeyValueStore
from inventory_app.utils.timestamps import now_iso

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = (
    Category(id='1', name='Bebidas', color='#3B82F6'),
    Category(id='2', name='Snacks', color='#EF4444'),
    Category(id='3', name='Dulces', color='#F59E0B'),
    Category(id='4', name='Higiene', color='#10B981'),
    Category(id='5', name='Limpieza', color='#8B5CF6'),
)


def _sample(product_id, name, category, price, stock, min_stock, description, day):
    timestamp = f"2024-01-{day}T00:00:00.000Z"
    return Product(
        id=product_id, name=name, category=category, price=price, stock=stock,
        min_stock=min_stock, description=description,
        created_at=timestamp, updated_at=timestamp
    )


SAMPLE_PRODUCTS = (
    _sample('1', 'Coca Cola 600ml', 'Bebidas', 5.00, 24, 5, 'Bebida gaseosa sabor cola', 15),
    _sample('2', 'Papas Fritas Pequeñas', 'Snacks', 3.50, 15, 10, 'Papas fritas sabor natural', 16),
    _sample('3', 'Chocolate Sublime', 'Dulces', 4.50, 8, 5, 'Chocolate con maní boliviano', 17),
    _sample('4', 'Jabón Bolivar', 'Higiene', 2.50, 3, 5, 'Jabón de tocador boliviano', 18),
    _sample('5', 'Detergente Ace', 'Limpieza', 15.00, 12, 3, 'Detergente en polvo 1kg', 19),
)

DEMO_USERS = (
    ('admin@tienda.com', 'Administrador Principal', UserRole.ADMIN),
    ('empleado@tienda.com', 'Empleado de Tienda', UserRole.EMPLOYEE),
)


def seed_categories(store: KeyValueStore) -> int:
    repo = CategoryRepository(store)
    if repo.get_all():
        return 0
    for category in DEFAULT_CATEGORIES:
        repo.save(category)
    return len(DEFAULT_CATEGORIES)


def seed_sample_products(store: KeyValueStore) -> Dict[str, Any]:
    """Save the sample products unless the catalog already has products"""
    repo = ProductRepository(store)
    existing = repo.count()
    if existing:
        logger.info(f"Sample products skipped, {existing} products already exist")
        return {
            'message': 'Sample products initialized successfully',
            'products': existing,
            'existing': True
        }

    for product in SAMPLE_PRODUCTS:
        repo.save(product)
    logger.info(f"Created {len(SAMPLE_PRODUCTS)} sample products")
    return {
        'message': 'Sample products initialized successfully',
        'products': len(SAMPLE_PRODUCTS),
        'existing': False
    }


def seed_demo_users(store: KeyValueStore) -> int:
    """
    Add directory records for the demo accounts that are missing
    Ids follow the 'demo-{role}' pattern; the identity provider must issue matching subjects
    """
    repo = UserRepository(store)
    created = 0
    for email, name, role in DEMO_USERS:
        if repo.get_by_email(email) is not None:
            continue
        repo.save(User(
            id=f"demo-{role.value}",
            email=email,
            name=name,
            role=role,
            created_at=now_iso()
        ))
        created += 1
    return created
