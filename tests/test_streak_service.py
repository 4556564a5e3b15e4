"""Тесты серий."""
from datetime import date, datetime, timedelta
from macrobot.services.streak_service import (
    current_streak,
    streak_met,
    presence_series,
    week_overview,
    get_current_streak,
    streak_achievement_met,
)


def test_current_streak_counts_last_run():
    assert current_streak([True, True, False, True, True, True]) == 3


def test_current_streak_zero_when_today_empty():
    """Пустой сегодняшний день обнуляет серию."""
    assert current_streak([True, True, True, True, False]) == 0
    assert current_streak([]) == 0


def test_current_streak_whole_history():
    assert current_streak([True] * 5) == 5


def test_streak_met():
    assert streak_met([False, True, True, True], 3)
    assert not streak_met([True, True, False, True], 3)
    assert not streak_met([True, True], 3)
    assert streak_met([], 0)


def test_presence_series():
    today = date(2024, 5, 10)
    logged = {date(2024, 5, 10), date(2024, 5, 8), date(2024, 4, 1)}

    assert presence_series(logged, today, 4) == [False, True, False, True]


def test_week_overview():
    today = date(2024, 5, 10)  # пятница
    overview = week_overview({date(2024, 5, 9), today}, today)

    assert len(overview) == 7
    assert overview[0]["date"] == 4
    assert overview[-1] == {"day": "Пт", "date": 10, "is_completed": True, "is_today": True}
    assert overview[-2]["is_completed"] is True
    assert not any(day["is_today"] for day in overview[:-1])


def test_store_backed_streak(food_store, user_id):
    today = date(2024, 5, 10)
    for days_back in (0, 1, 2, 4):
        food_store.add_entry(
            user_id, "Еда", 300, logged_at=datetime(2024, 5, 10, 18, 0) - timedelta(days=days_back)
        )

    assert get_current_streak(user_id, food_store, today=today) == 3
    assert streak_achievement_met(food_store, user_id, 3, today=today)
    assert not streak_achievement_met(food_store, user_id, 4, today=today)


def test_streak_longer_than_lookback(food_store, user_id):
    """Серия длиннее окна выборки не обрезается."""
    today = date(2024, 5, 10)
    for days_back in range(5):
        food_store.add_entry(
            user_id, "Еда", 300, logged_at=datetime(2024, 5, 10, 9, 0) - timedelta(days=days_back)
        )

    assert get_current_streak(user_id, food_store, today=today, lookback_days=2) == 5
