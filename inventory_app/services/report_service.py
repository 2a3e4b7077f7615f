"""
Report Service - Plain CSV exports of the inventory and the movement ledger
"""

import csv
import io
import logging
from typing import Any, Dict, List

from inventory_app.models import Product, StockMovement
from inventory_app.utils.timestamps import now_iso

logger = logging.getLogger(__name__)

DEFAULT_STORE_NAME = 'Mi Tienda de Barrio'


def format_currency(amount: float) -> str:
    return f"Bs. {amount:,.2f}"


def _new_writer():
    buffer = io.StringIO()
    return buffer, csv.writer(buffer, lineterminator='\n')


class ReportService:
    """Builds CSV documents from already loaded products and movements"""

    def __init__(self, store_name: str = DEFAULT_STORE_NAME):
        self.store_name = store_name or DEFAULT_STORE_NAME

    def inventory_csv(self, products: List[Product], stats: Dict[str, Any]) -> str:
        buffer, writer = _new_writer()
        writer.writerow([f"{self.store_name} - Reporte de Inventario"])
        writer.writerow([f"Generado el: {now_iso()}"])
        writer.writerow([])

        writer.writerow(['RESUMEN DEL INVENTARIO'])
        writer.writerow(['Total de Productos', stats.get('totalProducts', 0)])
        writer.writerow(['Productos en Stock', stats.get('inStock', 0)])
        writer.writerow(['Productos sin Stock', stats.get('outOfStock', 0)])
        writer.writerow(['Stock Bajo', stats.get('lowStock', 0)])
        writer.writerow(['Valor Total del Inventario', format_currency(stats.get('totalValue', 0))])
        writer.writerow(['Categorías', stats.get('categories', 0)])
        writer.writerow([])

        writer.writerow(['DETALLE DE PRODUCTOS'])
        writer.writerow(['Producto', 'Categoría', 'Stock', 'Min Stock', 'Precio', 'Valor Total', 'Estado'])
        for product in products:
            writer.writerow([
                product.name or 'Sin nombre',
                product.category or 'Sin categoría',
                product.stock,
                product.min_stock,
                format_currency(product.price),
                format_currency(product.total_value),
                'BAJO' if product.is_low_stock else 'OK'
            ])

        logger.info(f"Generated inventory report with {len(products)} products")
        return buffer.getvalue()

    def low_stock_csv(self, products: List[Product]) -> str:
        """Products at or below their minimum with the cost of topping them up"""
        low_stock = [p for p in products if p.is_low_stock]
        buffer, writer = _new_writer()
        writer.writerow([f"{self.store_name} - Reporte de Stock Bajo"])
        writer.writerow([f"Generado el: {now_iso()}"])
        writer.writerow([])

        if not low_stock:
            writer.writerow(['No hay productos con stock bajo.'])
            return buffer.getvalue()

        writer.writerow([f"¡ATENCIÓN! {len(low_stock)} producto(s) requieren reabastecimiento urgente"])
        writer.writerow([])
        writer.writerow(['Producto', 'Categoría', 'Stock Actual', 'Stock Mínimo', 'Faltante', 'Valor a Comprar'])

        total_to_purchase = 0.0
        for product in low_stock:
            needed = max(0, product.min_stock - product.stock)
            value_to_order = product.price * needed
            total_to_purchase += value_to_order
            writer.writerow([
                product.name or 'Sin nombre',
                product.category or 'Sin categoría',
                product.stock,
                product.min_stock,
                needed,
                format_currency(value_to_order)
            ])

        writer.writerow([])
        writer.writerow(['TOTAL ESTIMADO PARA COMPRAR', format_currency(total_to_purchase)])
        return buffer.getvalue()

    def movements_csv(self, movements: List[StockMovement]) -> str:
        buffer, writer = _new_writer()
        writer.writerow([f"{self.store_name} - Historial de Movimientos"])
        writer.writerow([f"Generado el: {now_iso()}"])
        writer.writerow([])
        writer.writerow([
            'Fecha', 'Producto', 'Tipo', 'Cantidad', 'Stock Anterior',
            'Stock Nuevo', 'Usuario', 'Motivo'
        ])
        for movement in movements:
            writer.writerow([
                movement.created_at,
                movement.product_name,
                movement.movement_type.value,
                movement.quantity,
                movement.previous_stock,
                movement.new_stock,
                movement.user_name,
                movement.reason
            ])
        return buffer.getvalue()
