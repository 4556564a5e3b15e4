"""Тесты агрегации по дням."""
from datetime import date, datetime, timedelta
from types import SimpleNamespace
from macrobot.services.stats_service import (
    DailyTotal,
    aggregate,
    summarize,
    weekly_averages,
    get_day_stats,
    get_period_stats,
)


def make_entry(logged_at, calories, protein=0, carbs=0, fats=0):
    return SimpleNamespace(
        logged_at=logged_at, calories=calories, protein=protein, carbs=carbs, fats=fats
    )


def test_every_day_present_without_entries():
    """Каждый день диапазона в результате, даже пустой."""
    series = aggregate([], date(2024, 2, 27), date(2024, 3, 2))

    assert [day.date for day in series] == [
        date(2024, 2, 27),
        date(2024, 2, 28),
        date(2024, 2, 29),
        date(2024, 3, 1),
        date(2024, 3, 2),
    ]
    assert all(day.entry_count == 0 and day.calories == 0 for day in series)


def test_entries_folded_into_their_day():
    entries = [
        make_entry(datetime(2024, 5, 1, 8, 0), 400, protein=30, carbs=40, fats=10),
        make_entry(datetime(2024, 5, 1, 23, 59), 600, protein=20, carbs=60, fats=25),
        make_entry(datetime(2024, 5, 3, 0, 0), 250, protein=5, carbs=30, fats=8),
    ]

    first, second, third = aggregate(entries, date(2024, 5, 1), date(2024, 5, 3))

    assert first == DailyTotal(date(2024, 5, 1), 1000, 50, 100, 35, 2)
    assert second.entry_count == 0
    assert third.calories == 250
    assert third.entry_count == 1


def test_entries_outside_range_dropped():
    """Сумма калорий равна сумме записей, попавших в диапазон."""
    entries = [
        make_entry(datetime(2024, 4, 30, 23, 0), 999),
        make_entry(datetime(2024, 5, 1, 12, 0), 500),
        make_entry(datetime(2024, 5, 7, 9, 0), 700),
        make_entry(datetime(2024, 5, 8, 0, 1), 999),
    ]

    series = aggregate(entries, date(2024, 5, 1), date(2024, 5, 7))

    assert len(series) == 7
    assert sum(day.calories for day in series) == 1200
    assert sum(day.entry_count for day in series) == 2


def test_iso_string_timestamps_use_date_prefix():
    """Дата берется из префикса строки, без перевода часового пояса."""
    entries = [make_entry("2024-05-02T23:30:00Z", 300), make_entry("2024-05-03T00:15:00+03:00", 200)]

    series = aggregate(entries, date(2024, 5, 2), date(2024, 5, 3))

    assert [day.calories for day in series] == [300, 200]


def test_summarize_averages_over_tracked_days():
    series = [
        DailyTotal(date(2024, 5, 1), 2000, 150, 200, 60, 3),
        DailyTotal(date(2024, 5, 2)),
        DailyTotal(date(2024, 5, 3), 1000, 50, 100, 40, 1),
    ]

    summary = summarize(series)

    assert summary["avg_calories"] == 1500
    assert summary["avg_protein"] == 100
    assert summary["total_calories"] == 3000
    assert summary["days_tracked"] == 2
    assert summary["total_days"] == 3


def test_summarize_empty_period():
    summary = summarize(aggregate([], date(2024, 5, 1), date(2024, 5, 7)))

    assert summary["avg_calories"] == 0
    assert summary["days_tracked"] == 0


def test_weekly_averages():
    start = date(2024, 4, 1)
    series = [DailyTotal(start + timedelta(days=i)) for i in range(30)]
    series[0].calories, series[0].entry_count = 1800, 1
    series[1].calories, series[1].entry_count = 2200, 2
    series[8].calories, series[8].entry_count = 1500, 1

    weeks = weekly_averages(series)

    assert [w["week"] for w in weeks] == [1, 2, 3, 4]
    assert weeks[0]["avg_calories"] == 2000
    assert weeks[1]["avg_calories"] == 1500
    assert weeks[2]["avg_calories"] == 0


def test_day_and_period_stats_from_store(food_store, user_id):
    today = date.today()
    now = datetime.combine(today, datetime.min.time()) + timedelta(hours=9)
    food_store.add_entry(user_id, "Овсянка", 350, protein=12, carbs=60, fats=7, logged_at=now)
    food_store.add_entry(user_id, "Курица", 450, protein=50, carbs=0, fats=20, logged_at=now - timedelta(days=2))

    day = get_day_stats(user_id, store=food_store)
    period = get_period_stats(user_id, 7, store=food_store)

    assert day["total"].calories == 350
    assert [e.food_name for e in day["entries"]] == ["Овсянка"]
    assert len(period) == 7
    assert period[-1].date == today
    assert sum(d.calories for d in period) == 800
