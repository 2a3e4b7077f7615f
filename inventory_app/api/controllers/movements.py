"""
Movements Controller - Registers entradas/salidas and reads the movement ledger
"""

from flask import request, g
from flask_restx import Resource, fields
from marshmallow import ValidationError
from inventory_app.api.context import get_movement_service
from inventory_app.api.middlewares.auth import require_permission
from inventory_app.utils.schemas import MovementRequestSchema, MovementQuerySchema
import logging

logger = logging.getLogger(__name__)

# Initialize schemas
movement_request_schema = MovementRequestSchema()
movement_query_schema = MovementQuerySchema()


def get_movement_models(api):
    """Define API models for movement operations"""
    movement_request_model = api.model('MovementRequest', {
        'productId': fields.String(required=True, description='Product identifier'),
        'type': fields.String(required=True, enum=['entrada', 'salida'], description='Movement type'),
        'quantity': fields.Integer(required=True, min=1, description='Units moved'),
        'reason': fields.String(description='Free text reason')
    })
    return movement_request_model


def register_movement_routes(api, namespace):
    """Register movement ledger routes"""
    movement_request_model = get_movement_models(api)

    @namespace.route('')
    class MovementList(Resource):
        @api.doc('list_movements', params={'productId': 'Only movements of this product'})
        @require_permission('read', 'movement')
        def get(self):
            """List movements newest first"""
            try:
                params = movement_query_schema.load(request.args.to_dict())
            except ValidationError as e:
                return {'error': 'Validation failed', 'details': e.messages}, 400

            movements = get_movement_service().list_movements(params.get('productId'))
            return {'movements': [movement.to_dict() for movement in movements]}, 200

        @api.doc('register_movement')
        @api.expect(movement_request_model)
        @require_permission('create', 'movement')
        def post(self):
            """Register an entrada or salida"""
            try:
                data = movement_request_schema.load(request.get_json(silent=True) or {})
            except ValidationError as e:
                return {'error': 'Validation failed', 'details': e.messages}, 400

            result = get_movement_service().apply_movement(
                product_id=data['productId'],
                movement_type=data['type'],
                quantity=data['quantity'],
                reason=data.get('reason'),
                acting_user_id=g.current_user['id']
            )
            return result.to_dict(), 201

    @namespace.route('/stats')
    class MovementStatistics(Resource):
        @api.doc('movement_statistics')
        @require_permission('read', 'movement')
        def get(self):
            """Summary, per-product rollups and recent activity"""
            return get_movement_service().get_statistics(), 200
