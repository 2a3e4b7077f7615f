"""
Movement Statistics - aggregate counts and quantities over the movement ledger
"""

from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional, Sequence

from inventory_app.models import MovementType, StockMovement
from inventory_app.repositories import sort_newest_first
from inventory_app.utils.timestamps import parse_iso, utc_now

RECENT_WINDOW_DAYS = 7
RECENT_ACTIVITY_LIMIT = 10


def compute_statistics(
    movements: Sequence[StockMovement],
    now: Optional[datetime] = None,
    recent_days: int = RECENT_WINDOW_DAYS,
    activity_limit: int = RECENT_ACTIVITY_LIMIT
) -> Dict[str, Any]:
    """
    Summarize a set of movements

    Args:
        movements: Movements in any order; never modified
        now: Reference time for the recent window, defaults to the current UTC time
        recent_days: Width of the recent window in days
        activity_limit: Maximum number of entries in recentActivity

    Returns:
        Dict with summary, productStats (first-appearance order) and
        recentActivity (newest first)
    """
    if now is None:
        now = utc_now()
    window_start = now - timedelta(days=recent_days)

    total_entradas = 0
    total_salidas = 0
    quantity_entradas = 0
    quantity_salidas = 0
    recent_count = 0
    product_stats: Dict[str, Dict[str, Any]] = {}

    for movement in movements:
        stats = product_stats.get(movement.product_id)
        if stats is None:
            stats = {
                'productId': movement.product_id,
                'productName': movement.product_name,
                'totalEntradas': 0,
                'totalSalidas': 0,
                'movementCount': 0
            }
            product_stats[movement.product_id] = stats

        if movement.movement_type == MovementType.ENTRADA:
            total_entradas += 1
            quantity_entradas += movement.quantity
            stats['totalEntradas'] += movement.quantity
        else:
            total_salidas += 1
            quantity_salidas += movement.quantity
            stats['totalSalidas'] += movement.quantity
        stats['movementCount'] += 1

        if parse_iso(movement.created_at) > window_start:
            recent_count += 1

    recent_activity: List[StockMovement] = sort_newest_first(movements)[:activity_limit]

    return {
        'summary': {
            'totalMovements': len(movements),
            'totalEntradas': total_entradas,
            'totalSalidas': total_salidas,
            'totalQuantityEntradas': quantity_entradas,
            'totalQuantitySalidas': quantity_salidas,
            'netMovement': quantity_entradas - quantity_salidas,
            'recentMovements': recent_count
        },
        'productStats': list(product_stats.values()),
        'recentActivity': [movement.to_dict() for movement in recent_activity]
    }
