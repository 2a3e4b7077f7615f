"""
HTTP layer - Flask application factory, controllers and middlewares
"""

from .main import create_app, init_database

__all__ = ['create_app', 'init_database']
