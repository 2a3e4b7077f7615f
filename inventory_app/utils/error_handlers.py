from flask import jsonify
from werkzeug.exceptions import HTTPException
from marshmallow import ValidationError
import logging

from inventory_app.exceptions import LedgerError, StorageFailureError
from inventory_app.api.middlewares.auth import AuthError
from inventory_app.api.middlewares.correlation_id import get_correlation_id

logger = logging.getLogger(__name__)


def ledger_error_body(error):
    if isinstance(error, StorageFailureError):
        logger.error(f"Storage failure: {error.message}")
    else:
        logger.warning(f"Request rejected ({error.status_code}): {error.message}")
    return error.to_dict(), error.status_code


def validation_error_body(error):
    return {
        'error': 'Validation Error',
        'message': 'Request data validation failed',
        'details': error.messages,
        'status_code': 400
    }, 400


def auth_error_body(error):
    logger.warning(f"Authentication failed: {error.message}")
    return {
        'error': error.message,
        'status_code': error.status_code
    }, error.status_code


def register_error_handlers(app):
    """Register application error handlers"""

    @app.errorhandler(LedgerError)
    def ledger_error(error):
        body, status = ledger_error_body(error)
        return jsonify(body), status

    @app.errorhandler(ValidationError)
    def validation_error(error):
        body, status = validation_error_body(error)
        return jsonify(body), status

    @app.errorhandler(AuthError)
    def auth_error(error):
        body, status = auth_error_body(error)
        return jsonify(body), status

    @app.errorhandler(HTTPException)
    def http_exception(error):
        return jsonify({
            'error': error.name,
            'message': error.description,
            'status_code': error.code
        }), error.code

    @app.errorhandler(Exception)
    def internal_error(error):
        logger.error(f"[{get_correlation_id()}] Internal server error: {error}", exc_info=True)
        return jsonify({
            'error': 'Internal Server Error',
            'message': 'An unexpected error occurred',
            'status_code': 500
        }), 500


def register_api_error_handlers(api):
    """Same translations for exceptions raised inside Flask-RESTX resources"""
    api.errorhandler(LedgerError)(ledger_error_body)
    api.errorhandler(AuthError)(auth_error_body)
