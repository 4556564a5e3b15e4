"""Подсчет серий (стриков) дней с записями."""
from datetime import date, timedelta
from typing import Optional

WEEKDAYS = ("Пн", "Вт", "Ср", "Чт", "Пт", "Сб", "Вс")


def current_streak(day_presence: list[bool]) -> int:
    """Длина непрерывной серии дней с записями, заканчивающейся сегодня.

    Args:
        day_presence: флаги по дням, от старых к новым; последний — сегодня

    Если сегодня записей нет, серия равна 0 независимо от истории.
    """
    streak = 0
    for present in reversed(day_presence):
        if not present:
            break
        streak += 1
    return streak


def streak_met(day_presence: list[bool], days: int) -> bool:
    """Есть ли записи в каждом из последних days дней (включая сегодня)."""
    if days <= 0:
        return True
    if len(day_presence) < days:
        return False
    for present in reversed(day_presence[-days:]):
        if not present:
            return False
    return True


def presence_series(logged_days: set[date], today: date, days: int) -> list[bool]:
    """Флаги наличия записей за последние days дней, от старых к новым."""
    start = today - timedelta(days=days - 1)
    return [(start + timedelta(days=i)) in logged_days for i in range(days)]


def week_overview(logged_days: set[date], today: date) -> list[dict]:
    """Последние 7 дней для отображения серии."""
    start = today - timedelta(days=6)
    overview = []
    for i in range(7):
        day = start + timedelta(days=i)
        overview.append(
            {
                "day": WEEKDAYS[day.weekday()],
                "date": day.day,
                "is_completed": day in logged_days,
                "is_today": day == today,
            }
        )
    return overview


def get_current_streak(user_id: int, store, today: Optional[date] = None, lookback_days: int = 365) -> int:
    """Текущая серия пользователя.

    Дни выбираются одним запросом за lookback_days дней. Если серия
    заполняет все окно, окно удваивается и выборка повторяется.
    """
    today = today or date.today()
    days = max(lookback_days, 1)
    while True:
        logged = store.logged_days(user_id, today - timedelta(days=days - 1), today)
        streak = current_streak(presence_series(logged, today, days))
        if streak < days:
            return streak
        days *= 2


def streak_achievement_met(store, user_id: int, days: int, today: Optional[date] = None) -> bool:
    """Условие достижения «серия N дней»: все последние N дней с записями.

    Args:
        store: FoodLogStore (нужен logged_days)
    """
    if days <= 0:
        return True
    today = today or date.today()
    logged = store.logged_days(user_id, today - timedelta(days=days - 1), today)
    return streak_met(presence_series(logged, today, days), days)
