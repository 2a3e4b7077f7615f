"""
Controllers package initialization - Sets up Flask-RESTX API with all namespaces
"""

from flask import Blueprint
from flask_restx import Api
from inventory_app.utils.error_handlers import register_api_error_handlers
from inventory_app.api.controllers.movements import register_movement_routes
from inventory_app.api.controllers.products import register_product_routes, register_catalog_routes
from inventory_app.api.controllers.users import register_user_routes
from inventory_app.api.controllers.reports import register_report_routes
import logging

logger = logging.getLogger(__name__)


def create_api_blueprint():
    """Build the /api blueprint; a fresh one per application"""
    api_bp = Blueprint('api', __name__)
    api = Api(api_bp, version='1.0', title='Inventory Ledger API',
              description='Products, stock movements, users and reports',
              doc='/docs/')

    # Define namespaces
    movements_ns = api.namespace('movements', description='Stock movement ledger')
    products_ns = api.namespace('products', description='Product catalog')
    catalog_ns = api.namespace('catalog', path='/', description='Categories, sample data and dashboard')
    users_ns = api.namespace('users', description='User directory')
    reports_ns = api.namespace('reports', description='CSV reports')

    # Register routes for each namespace
    register_movement_routes(api, movements_ns)
    register_product_routes(api, products_ns)
    register_catalog_routes(api, catalog_ns)
    register_user_routes(api, users_ns)
    register_report_routes(api, reports_ns)
    register_api_error_handlers(api)

    return api_bp


def register_routes(app):
    """Register all API routes with the Flask app"""
    app.register_blueprint(create_api_blueprint(), url_prefix='/api')
    logger.debug('API routes registered')
