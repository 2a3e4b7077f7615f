from .auth import AuthError, require_permission
from .correlation_id import CorrelationIdMiddleware, init_correlation_id_logging, get_correlation_id

__all__ = [
    'AuthError',
    'require_permission',
    'CorrelationIdMiddleware',
    'init_correlation_id_logging',
    'get_correlation_id'
]
