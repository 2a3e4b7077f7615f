"""
Reports Controller - CSV downloads
"""

from flask import Response
from flask_restx import Resource
from inventory_app.api.context import get_movement_service, get_product_service, get_report_service
from inventory_app.api.middlewares.auth import require_permission


def _csv_response(content, filename):
    return Response(
        content,
        mimetype='text/csv',
        headers={'Content-Disposition': f'attachment; filename={filename}'}
    )


def register_report_routes(api, namespace):
    """Register CSV report routes"""

    @namespace.route('/inventory.csv')
    class InventoryReport(Resource):
        @api.doc('inventory_report')
        @require_permission('read', 'report')
        def get(self):
            """Full inventory with summary figures"""
            product_service = get_product_service()
            products = product_service.list_products()
            stats = product_service.get_inventory_stats(products)
            return _csv_response(
                get_report_service().inventory_csv(products, stats),
                'reporte-inventario.csv'
            )

    @namespace.route('/low-stock.csv')
    class LowStockReport(Resource):
        @api.doc('low_stock_report')
        @require_permission('read', 'report')
        def get(self):
            """Products at or below their minimum stock"""
            products = get_product_service().list_products()
            return _csv_response(
                get_report_service().low_stock_csv(products),
                'reporte-stock-bajo.csv'
            )

    @namespace.route('/movements.csv')
    class MovementReport(Resource):
        @api.doc('movement_report')
        @require_permission('read', 'report')
        def get(self):
            """Movement ledger, newest first"""
            movements = get_movement_service().list_movements()
            return _csv_response(
                get_report_service().movements_csv(movements),
                'historial-movimientos.csv'
            )
