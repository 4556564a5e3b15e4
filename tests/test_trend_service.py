"""Тесты трендов."""
from datetime import date, timedelta
from macrobot.services.stats_service import DailyTotal
from macrobot.services.trend_service import compute_trend, Direction, Metric, Trend


def series_of(values, start=date(2024, 5, 1)):
    """Ряд дней; None — день без записей."""
    return [
        DailyTotal(start + timedelta(days=i))
        if value is None
        else DailyTotal(start + timedelta(days=i), calories=value, protein=value / 10, entry_count=1)
        for i, value in enumerate(values)
    ]


def test_trend_up_example():
    trend = compute_trend(series_of([1000, 1000, 1500, 1500]), Metric.CALORIES)

    assert trend == Trend(direction=Direction.UP, percent=50.0)


def test_trend_down_rounded():
    trend = compute_trend(series_of([1500, 1200, 1000]), "calories")

    # 1500 против (1200 + 1000) / 2 = 1100
    assert trend.direction == Direction.DOWN
    assert trend.percent == 26.7


def test_trend_ignores_empty_days():
    trend = compute_trend(series_of([None, 1000, None, None, 1000, None]), Metric.PROTEIN)

    assert trend == Trend(direction=Direction.STABLE, percent=0.0)


def test_trend_insufficient_data():
    assert compute_trend(series_of([None, 2000, None]), Metric.CALORIES) is None
    assert compute_trend([], Metric.CALORIES) is None


def test_trend_zero_first_half():
    series = series_of([0, 800])

    trend = compute_trend(series, Metric.CALORIES)

    assert trend.direction == Direction.UP
    assert trend.percent == 0
