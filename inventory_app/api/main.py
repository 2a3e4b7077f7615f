#!/usr/bin/env python3
"""
Inventory Ledger API
Flask-based REST API for products, stock movements and reports.
"""

import os
import logging
import click
from flask import Flask
from flask_cors import CORS

logger = logging.getLogger(__name__)


def create_app(config_name='default', store=None):
    """Application factory pattern for API"""
    app = Flask(__name__)

    # Load environment variables
    from dotenv import load_dotenv
    load_dotenv()

    # Load configuration
    from config import config, get_database_uri
    app.config.from_object(config[config_name])
    if not app.config.get('SQLALCHEMY_DATABASE_URI'):
        app.config['SQLALCHEMY_DATABASE_URI'] = get_database_uri()

    # Initialize correlation ID middleware and logging
    from inventory_app.api.middlewares.correlation_id import CorrelationIdMiddleware, init_correlation_id_logging
    CorrelationIdMiddleware(app)
    init_correlation_id_logging(app)

    # Initialize database
    from inventory_app.database import init_db
    init_db(app)

    # CORS setup
    CORS(app, origins=app.config.get('CORS_ORIGINS', ['*']))

    # Ledger store and shared services
    from inventory_app.api.context import init_services
    init_services(app, store)

    # Register blueprints/controllers
    from inventory_app.api.controllers import register_routes
    register_routes(app)

    # Register operational endpoints
    from inventory_app.api.controllers.operational import Health, Readiness, Liveness

    health_resource = Health()
    readiness_resource = Readiness()
    liveness_resource = Liveness()

    app.add_url_rule('/health', 'health', health_resource.get, methods=['GET'])
    app.add_url_rule('/health/ready', 'readiness', readiness_resource.get, methods=['GET'])
    app.add_url_rule('/health/live', 'liveness', liveness_resource.get, methods=['GET'])

    # Register error handlers
    from inventory_app.utils.error_handlers import register_error_handlers
    register_error_handlers(app)

    register_commands(app)

    return app


def seed_all(store):
    """Default categories, sample products and demo users"""
    from inventory_app.services.sample_data import seed_categories, seed_sample_products, seed_demo_users
    return {
        'categories': seed_categories(store),
        'products': seed_sample_products(store),
        'users': seed_demo_users(store)
    }


def register_commands(app):
    """Register Flask CLI commands"""

    @app.cli.command('seed-data')
    def seed_data_command():
        """Create default categories, sample products and demo users"""
        from inventory_app.api.context import get_store
        from inventory_app.database import db
        db.create_all()
        result = seed_all(get_store())
        click.echo(
            f"Categories created: {result['categories']}, "
            f"products: {result['products']['products']} "
            f"({'existing' if result['products']['existing'] else 'new'}), "
            f"demo users created: {result['users']}"
        )


def init_database(app):
    """Initialize database tables and, when configured, the sample data"""
    from inventory_app.database import db
    with app.app_context():
        try:
            from sqlalchemy import text
            db.session.execute(text('SELECT 1'))
            db.create_all()
            app.logger.info("Database tables created successfully")
        except Exception as e:
            app.logger.error(f"Failed to create database tables: {e}")
            if app.config.get('LEDGER_BACKEND') == 'sql' and not app.debug:
                raise
            app.logger.warning("Continuing without database connection")
            return False

        if app.config.get('SEED_SAMPLE_DATA'):
            from inventory_app.api.context import get_store
            seed_all(get_store())
            app.logger.info("Sample data seeded")
        return True


def main():
    """Main application entry point for API"""
    env = os.environ.get('FLASK_ENV', 'production')

    # Create Flask application
    app = create_app(env)

    # Initialize database
    init_database(app)

    # Get host and port from environment
    host = os.environ.get('HOST', '0.0.0.0')
    port = int(os.environ.get('PORT', 5000))
    debug = env == 'development'

    logger.info(f"Starting Inventory Ledger API on {host}:{port} (env: {env})")

    # Run the application
    app.run(
        host=host,
        port=port,
        debug=debug,
        threaded=True
    )


if __name__ == '__main__':
    main()
