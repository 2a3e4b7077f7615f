"""
Users Controller - Directory administration (admin only)
"""

from flask import request
from flask_restx import Resource, fields
from marshmallow import ValidationError
from inventory_app.api.context import get_user_service
from inventory_app.api.middlewares.auth import require_permission
from inventory_app.utils.schemas import UserCreateSchema, UserUpdateSchema

# Initialize schemas
user_create_schema = UserCreateSchema()
user_update_schema = UserUpdateSchema()


def register_user_routes(api, namespace):
    """Register user directory routes"""
    user_model = api.model('User', {
        'id': fields.String(description='Identity provider subject'),
        'email': fields.String(required=True, description='Email address'),
        'name': fields.String(required=True, description='Display name'),
        'role': fields.String(enum=['admin', 'employee'], description='Role')
    })

    @namespace.route('')
    class UserList(Resource):
        @api.doc('list_users')
        @require_permission('read', 'user')
        def get(self):
            """List directory users"""
            users = get_user_service().list_users()
            return {'users': [user.to_dict() for user in users]}, 200

        @api.doc('create_user')
        @api.expect(user_model)
        @require_permission('create', 'user')
        def post(self):
            """Register a user"""
            try:
                data = user_create_schema.load(request.get_json(silent=True) or {})
            except ValidationError as e:
                return {'error': 'Validation failed', 'details': e.messages}, 400

            user = get_user_service().create_user(data)
            return {'user': user.to_dict()}, 201

    @namespace.route('/<string:user_id>')
    class UserDetail(Resource):
        @api.doc('update_user')
        @require_permission('update', 'user')
        def put(self, user_id):
            """Update a user"""
            try:
                updates = user_update_schema.load(request.get_json(silent=True) or {})
            except ValidationError as e:
                return {'error': 'Validation failed', 'details': e.messages}, 400

            user = get_user_service().update_user(user_id, updates)
            return {'user': user.to_dict()}, 200

        @api.doc('delete_user')
        @require_permission('delete', 'user')
        def delete(self, user_id):
            """Delete a user"""
            get_user_service().delete_user(user_id)
            return {'message': 'User deleted successfully'}, 200
