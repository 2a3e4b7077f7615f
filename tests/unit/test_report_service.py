"""
Unit tests for CSV reports
"""

import csv
import io

from inventory_app.models import MovementType
from inventory_app.services import ReportService
from inventory_app.services.report_service import format_currency
from factories import make_movement, make_product


def rows(content):
    return list(csv.reader(io.StringIO(content)))


class TestReportService:

    def test_format_currency(self):
        assert format_currency(5) == 'Bs. 5.00'
        assert format_currency(1234.5) == 'Bs. 1,234.50'

    def test_inventory_csv(self):
        products = [make_product('1', 'Coca Cola, 600ml', stock=24, min_stock=5), make_product('2', stock=3)]
        stats = {'totalProducts': 2, 'inStock': 1, 'outOfStock': 0, 'lowStock': 1, 'totalValue': 135.0, 'categories': 5}

        table = rows(ReportService('Tienda Don Pepe').inventory_csv(products, stats))

        assert table[0] == ['Tienda Don Pepe - Reporte de Inventario']
        assert ['Valor Total del Inventario', 'Bs. 135.00'] in table
        header = table.index(['Producto', 'Categoría', 'Stock', 'Min Stock', 'Precio', 'Valor Total', 'Estado'])
        assert table[header + 1] == ['Coca Cola, 600ml', 'Bebidas', '24', '5', 'Bs. 5.00', 'Bs. 120.00', 'OK']
        assert table[header + 2][-1] == 'BAJO'

    def test_low_stock_csv(self):
        products = [
            make_product('1', stock=24, min_stock=5),
            make_product('4', 'Jabón Bolivar', stock=3, min_stock=5, price=2.5, category='Higiene'),
        ]

        table = rows(ReportService().low_stock_csv(products))

        assert table[0] == ['Mi Tienda de Barrio - Reporte de Stock Bajo']
        assert ['Jabón Bolivar', 'Higiene', '3', '5', '2', 'Bs. 5.00'] in table
        assert table[-1] == ['TOTAL ESTIMADO PARA COMPRAR', 'Bs. 5.00']

    def test_low_stock_csv_without_low_products(self):
        content = ReportService().low_stock_csv([make_product(stock=24, min_stock=5)])

        assert 'No hay productos con stock bajo.' in content

    def test_movements_csv(self):
        movement = make_movement('m1', '1', MovementType.SALIDA, 3, product_name='Coca Cola 600ml')

        table = rows(ReportService().movements_csv([movement]))

        assert table[-1] == [
            '2024-01-20T10:00:00.000Z', 'Coca Cola 600ml', 'salida', '3', '0', '3',
            'Empleado de Tienda', ''
        ]
