"""
JWT Authentication and Authorization Middleware
Tokens are issued by the external identity provider; this module only verifies them
"""

import jwt
from functools import wraps
from flask import request, g, current_app
import logging

from inventory_app.api.context import get_store
from inventory_app.models import UserRole
from inventory_app.permissions import can
from inventory_app.repositories import UserRepository

logger = logging.getLogger(__name__)


class AuthError(Exception):
    """Custom authentication error"""
    def __init__(self, message, status_code=401):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


def get_token_from_request():
    """Extract JWT token from Authorization header"""
    auth_header = request.headers.get('Authorization', '')

    if not auth_header:
        return None

    if not auth_header.startswith('Bearer '):
        raise AuthError('Authorization header must start with Bearer', 401)

    parts = auth_header.split(' ')
    if len(parts) != 2:
        raise AuthError('Invalid Authorization header format', 401)

    return parts[1]


def decode_jwt(token):
    """Decode and validate JWT token"""
    config = current_app.config
    try:
        return jwt.decode(
            token,
            config['JWT_SECRET'],
            algorithms=[config['JWT_ALGORITHM']],
            issuer=config['JWT_ISSUER'],
            audience=config['JWT_AUDIENCE']
        )
    except jwt.ExpiredSignatureError:
        raise AuthError('Token has expired', 401)
    except jwt.InvalidTokenError as e:
        logger.warning(f'Invalid token: {str(e)}')
        raise AuthError('Invalid authorization token', 401)


def _role_from_claims(payload):
    role = payload.get('role')
    if role is not None:
        return role
    roles = payload.get('roles') or []
    if UserRole.ADMIN.value in roles:
        return UserRole.ADMIN.value
    return roles[0] if roles else None


def authenticate():
    """
    Decode the bearer token and attach the caller to g.current_user

    The directory record at user:{id}, when present, decides the role;
    otherwise the token's role claim is used
    """
    token = get_token_from_request()
    if not token:
        raise AuthError('No authorization token provided', 401)

    payload = decode_jwt(token)
    user_id = payload.get('id') or payload.get('user_id') or payload.get('sub')
    if not user_id:
        raise AuthError('Token missing user identifier', 401)

    directory_user = UserRepository(get_store()).get_by_id(str(user_id))
    g.current_user = {
        'id': str(user_id),
        'email': payload.get('email'),
        'role': directory_user.role.value if directory_user else _role_from_claims(payload)
    }
    g.directory_user = directory_user
    logger.debug(f'Authentication successful for user: {user_id}')
    return g.current_user


def require_permission(action, resource):
    """
    Decorator to require one capability from the role permission table
    Usage: @require_permission('create', 'movement')
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            user = authenticate()
            subject = g.directory_user if g.directory_user is not None else user['role']

            if not can(subject, action, resource):
                logger.warning(
                    f'Authorization failed: User {user["id"]} with role {user["role"]} '
                    f'cannot {action} {resource}'
                )
                raise AuthError('Insufficient permissions', 403)

            return f(*args, **kwargs)

        return decorated_function
    return decorator

