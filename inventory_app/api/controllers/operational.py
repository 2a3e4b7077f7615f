"""
Operational/Infrastructure endpoints
These endpoints are used by monitoring systems, load balancers, and DevOps tools
"""

from flask import current_app
from flask_restx import Resource, Namespace
import os
import time
import logging

from inventory_app import __version__
from inventory_app.api.context import get_store
from inventory_app.utils.timestamps import now_iso

logger = logging.getLogger(__name__)

SERVICE_NAME = 'inventory-ledger-service'
_started_at = time.time()

# Create namespace for operational endpoints
operational_ns = Namespace('operational', description='Operational endpoints')


@operational_ns.route('/health')
class Health(Resource):
    def get(self):
        """Main health check endpoint"""
        return {
            'status': 'healthy',
            'service': SERVICE_NAME,
            'timestamp': now_iso(),
            'version': os.environ.get('API_VERSION', __version__),
            'environment': os.environ.get('FLASK_ENV', 'development'),
        }, 200


@operational_ns.route('/health/ready')
class Readiness(Resource):
    def get(self):
        """Readiness probe - checks that the ledger store answers"""
        started = time.perf_counter()
        store_ok = get_store().ping()
        check_time = round((time.perf_counter() - started) * 1000, 2)

        status = 'ready' if store_ok else 'not ready'
        if not store_ok:
            logger.warning('Readiness check failed: ledger store unreachable')

        return {
            'status': status,
            'service': SERVICE_NAME,
            'timestamp': now_iso(),
            'total_check_time': check_time,
            'checks': {
                'ledger_store': {
                    'status': 'healthy' if store_ok else 'unhealthy',
                    'backend': current_app.config['LEDGER_BACKEND']
                }
            }
        }, 200 if store_ok else 503


@operational_ns.route('/health/live')
class Liveness(Resource):
    def get(self):
        """Liveness probe - checks if service is alive and responsive"""
        return {
            'status': 'alive',
            'service': SERVICE_NAME,
            'timestamp': now_iso(),
            'uptime': round(time.time() - _started_at, 2)
        }, 200
