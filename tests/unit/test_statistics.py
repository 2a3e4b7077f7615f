"""
Unit tests for movement statistics
"""

from datetime import datetime, timezone

from inventory_app.models import MovementType
from inventory_app.services.statistics import compute_statistics
from factories import make_movement

NOW = datetime(2024, 1, 25, 12, 0, tzinfo=timezone.utc)


def sample_movements():
    return [
        make_movement('m1', '1', MovementType.ENTRADA, 10, '2024-01-10T09:00:00.000Z', 'Coca Cola 600ml'),
        make_movement('m2', '2', MovementType.SALIDA, 3, '2024-01-20T09:00:00.000Z', 'Papas Fritas'),
        make_movement('m3', '1', MovementType.SALIDA, 4, '2024-01-24T09:00:00.000Z', 'Coca Cola (renombrada)'),
        make_movement('m4', '3', MovementType.ENTRADA, 7, '2024-01-18T12:00:00.000Z', 'Chocolate'),
    ]


class TestComputeStatistics:

    def test_empty_input(self):
        stats = compute_statistics([], now=NOW)

        assert stats['summary'] == {
            'totalMovements': 0,
            'totalEntradas': 0,
            'totalSalidas': 0,
            'totalQuantityEntradas': 0,
            'totalQuantitySalidas': 0,
            'netMovement': 0,
            'recentMovements': 0
        }
        assert stats['productStats'] == []
        assert stats['recentActivity'] == []

    def test_summary(self):
        summary = compute_statistics(sample_movements(), now=NOW)['summary']

        assert summary['totalMovements'] == 4
        assert summary['totalEntradas'] == 2
        assert summary['totalSalidas'] == 2
        assert summary['totalQuantityEntradas'] == 17
        assert summary['totalQuantitySalidas'] == 7
        assert summary['netMovement'] == 10

    def test_recent_window_is_strictly_after_cutoff(self):
        movements = sample_movements()
        # Exactly seven days before NOW
        movements.append(make_movement('m5', '1', created_at='2024-01-18T12:00:00.000Z'))

        summary = compute_statistics(movements, now=NOW)['summary']

        # m2 and m3 only; m4 and m5 sit exactly on the cutoff
        assert summary['recentMovements'] == 2

    def test_product_stats_first_appearance_order(self):
        product_stats = compute_statistics(sample_movements(), now=NOW)['productStats']

        assert [p['productId'] for p in product_stats] == ['1', '2', '3']
        assert product_stats[0] == {
            'productId': '1',
            'productName': 'Coca Cola 600ml',
            'totalEntradas': 10,
            'totalSalidas': 4,
            'movementCount': 2
        }

    def test_every_product_appears_once(self):
        movements = sample_movements()
        product_stats = compute_statistics(movements, now=NOW)['productStats']

        counts = {p['productId']: p['movementCount'] for p in product_stats}
        assert len(counts) == len(product_stats)
        for product_id, count in counts.items():
            assert count == sum(1 for m in movements if m.product_id == product_id)

    def test_recent_activity_newest_first(self):
        activity = compute_statistics(sample_movements(), now=NOW)['recentActivity']

        assert [m['id'] for m in activity] == ['m3', 'm2', 'm4', 'm1']

    def test_recent_activity_limited_and_stable(self):
        movements = [
            make_movement(f'm{i}', created_at='2024-01-20T10:00:00.000Z') for i in range(12)
        ]

        activity = compute_statistics(movements, now=NOW)['recentActivity']

        assert [m['id'] for m in activity] == [f'm{i}' for i in range(10)]

    def test_deterministic_and_does_not_mutate_input(self):
        movements = sample_movements()
        original = list(movements)

        first = compute_statistics(movements, now=NOW)
        second = compute_statistics(movements, now=NOW)

        assert first == second
        assert movements == original
