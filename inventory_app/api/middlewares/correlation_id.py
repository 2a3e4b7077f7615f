"""
Correlation ID middleware for Flask application
Tags every request, its response and its log lines with an X-Correlation-ID
"""
import uuid
import logging
from contextvars import ContextVar
from flask import Response, g, request

HEADER = 'X-Correlation-ID'
LOG_FORMAT = '%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s'

# Correlation ID of the request being served on this thread
correlation_id_context: ContextVar[str] = ContextVar('correlation_id', default='')


class CorrelationIdMiddleware:
    """
    Flask middleware for handling correlation IDs
    """

    def __init__(self, app=None):
        self.app = app
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        app.before_request(self.before_request)
        app.after_request(self.after_request)
        app.teardown_request(self.teardown_request)

    def before_request(self):
        """Reuse the caller's id or mint one"""
        correlation_id = request.headers.get(HEADER) or str(uuid.uuid4())
        g.correlation_id = correlation_id
        g.correlation_id_token = correlation_id_context.set(correlation_id)

    def after_request(self, response: Response) -> Response:
        response.headers[HEADER] = getattr(g, 'correlation_id', 'unknown')
        return response

    def teardown_request(self, exc=None):
        token = g.pop('correlation_id_token', None)
        if token is not None:
            correlation_id_context.reset(token)


def get_correlation_id() -> str:
    if hasattr(g, 'correlation_id'):
        return g.correlation_id
    return correlation_id_context.get() or 'unknown'


class CorrelationIdFilter(logging.Filter):
    """Adds record.correlation_id so LOG_FORMAT can print it"""

    def filter(self, record):
        record.correlation_id = correlation_id_context.get() or '-'
        return True


def init_correlation_id_logging(app):
    """
    Configure logging so service and app log lines carry the correlation id

    Outside of testing the root logger gets a handler at LOG_LEVEL; every
    root and app handler gets the filter and LOG_FORMAT
    """
    handlers = list(app.logger.handlers)
    if not app.testing:
        logging.basicConfig(level=getattr(logging, app.config['LOG_LEVEL']))
        handlers += logging.getLogger().handlers

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        if not any(isinstance(f, CorrelationIdFilter) for f in handler.filters):
            handler.addFilter(CorrelationIdFilter())
        handler.setFormatter(formatter)
