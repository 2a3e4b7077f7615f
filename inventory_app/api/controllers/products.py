"""
Products Controller - Catalog CRUD, categories and sample data
"""

from flask import request
from flask_restx import Resource, fields
from marshmallow import ValidationError
from inventory_app.api.context import get_movement_service, get_product_service, get_store
from inventory_app.api.middlewares.auth import require_permission
from inventory_app.services.sample_data import seed_sample_products
from inventory_app.utils.schemas import ProductCreateSchema, ProductUpdateSchema
import logging

logger = logging.getLogger(__name__)

# Initialize schemas
product_create_schema = ProductCreateSchema()
product_update_schema = ProductUpdateSchema()


def get_product_models(api):
    """Define API models for product operations"""
    product_model = api.model('Product', {
        'name': fields.String(required=True, description='Product name'),
        'category': fields.String(required=True, description='Category name'),
        'price': fields.Float(required=True, min=0, description='Unit price'),
        'stock': fields.Integer(min=0, description='Initial stock'),
        'minStock': fields.Integer(min=0, description='Low stock threshold'),
        'description': fields.String(description='Optional description')
    })
    return product_model


def register_product_routes(api, namespace):
    """Register product catalog routes"""
    product_model = get_product_models(api)

    @namespace.route('')
    class ProductList(Resource):
        @api.doc('list_products')
        def get(self):
            """List all products"""
            products = get_product_service().list_products()
            return {'products': [product.to_dict() for product in products]}, 200

        @api.doc('create_product')
        @api.expect(product_model)
        @require_permission('create', 'product')
        def post(self):
            """Create a product"""
            try:
                data = product_create_schema.load(request.get_json(silent=True) or {})
            except ValidationError as e:
                return {'error': 'Validation failed', 'details': e.messages}, 400

            product = get_product_service().create_product(data)
            return {'product': product.to_dict()}, 201

    @namespace.route('/<string:product_id>')
    class ProductDetail(Resource):
        @api.doc('get_product')
        @require_permission('read', 'product')
        def get(self, product_id):
            """Get a product by id"""
            product = get_product_service().get_product(product_id)
            return {'product': product.to_dict()}, 200

        @api.doc('update_product')
        @api.expect(product_model)
        @require_permission('update', 'product')
        def put(self, product_id):
            """Update catalog fields; stock only changes through movements"""
            try:
                updates = product_update_schema.load(request.get_json(silent=True) or {})
            except ValidationError as e:
                return {'error': 'Validation failed', 'details': e.messages}, 400

            product = get_product_service().update_product(product_id, updates)
            return {'product': product.to_dict()}, 200

        @api.doc('delete_product')
        @require_permission('delete', 'product')
        def delete(self, product_id):
            """Delete a product"""
            get_product_service().delete_product(product_id)
            return {'message': 'Product deleted successfully'}, 200

    @namespace.route('/<string:product_id>/movements')
    class ProductMovements(Resource):
        @api.doc('list_product_movements')
        @require_permission('read', 'movement')
        def get(self, product_id):
            """Movements of one product, newest first"""
            movements = get_movement_service().list_movements(product_id)
            return {'movements': [movement.to_dict() for movement in movements]}, 200


def register_catalog_routes(api, namespace):
    """Register categories, sample data and dashboard statistics routes"""

    @namespace.route('/categories')
    class CategoryList(Resource):
        @api.doc('list_categories')
        def get(self):
            """List categories, creating the defaults on first use"""
            categories = get_product_service().list_categories()
            return {'categories': [category.to_dict() for category in categories]}, 200

    @namespace.route('/init-sample-data')
    class SampleData(Resource):
        @api.doc('init_sample_data')
        def post(self):
            """Seed the sample products when the catalog is empty"""
            return seed_sample_products(get_store()), 200

    @namespace.route('/stats')
    class InventoryStatistics(Resource):
        @api.doc('inventory_stats')
        @require_permission('read', 'dashboard')
        def get(self):
            """Inventory dashboard counters"""
            stats = get_product_service().get_inventory_stats()
            logger.debug(f"Stats retrieved: {stats}")
            return stats, 200
