"""
Per-application service wiring stored on app.extensions
"""

from flask import current_app

from inventory_app.services import MovementService, ProductLockRegistry, ProductService, ReportService, UserService
from inventory_app.store import KeyValueStore, create_store


def init_services(app, store: KeyValueStore = None):
    """Create the ledger store and the shared product lock registry for app"""
    if store is None:
        store = create_store(app.config['LEDGER_BACKEND'])
    app.extensions['ledger_store'] = store
    app.extensions['product_locks'] = ProductLockRegistry()


def get_store() -> KeyValueStore:
    return current_app.extensions['ledger_store']


def get_movement_service() -> MovementService:
    return MovementService(
        get_store(),
        locks=current_app.extensions['product_locks'],
        recent_days=current_app.config['RECENT_WINDOW_DAYS'],
        activity_limit=current_app.config['RECENT_ACTIVITY_LIMIT']
    )


def get_product_service() -> ProductService:
    return ProductService(get_store(), locks=current_app.extensions['product_locks'])


def get_user_service() -> UserService:
    return UserService(get_store())


def get_report_service() -> ReportService:
    return ReportService(current_app.config.get('STORE_NAME'))
