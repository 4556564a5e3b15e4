"""Сервис для подсчета статистики."""
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterable, Optional
from macrobot.services.food_log_service import FoodLogStore

MACROS = ("calories", "protein", "carbs", "fats")


@dataclass
class DailyTotal:
    """Сумма нутриентов за один календарный день. Не хранится в БД."""

    date: date
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fats: float = 0.0
    entry_count: int = 0

    def add(self, entry) -> None:
        for metric in MACROS:
            setattr(self, metric, getattr(self, metric) + (getattr(entry, metric) or 0))
        self.entry_count += 1


def entry_day(logged_at) -> date:
    """День записи: дата из метки времени без перевода часовых поясов.

    Принимает datetime, date или ISO-строку ("2024-05-01T23:30:00Z").
    """
    if isinstance(logged_at, str):
        return date.fromisoformat(logged_at[:10])
    if isinstance(logged_at, datetime):
        return logged_at.date()
    return logged_at


def date_range(start: date, end: date) -> list[date]:
    """Все дни от start до end включительно."""
    return [start + timedelta(days=i) for i in range((end - start).days + 1)]


def aggregate(entries: Iterable, range_start: date, range_end: date) -> list[DailyTotal]:
    """Свернуть записи в суммы по дням за [range_start, range_end].

    Каждый день диапазона присутствует в результате, даже без записей.
    Записи вне диапазона молча отбрасываются. Порядок: от старых к новым.
    """
    buckets = {day: DailyTotal(date=day) for day in date_range(range_start, range_end)}

    for entry in entries:
        bucket = buckets.get(entry_day(entry.logged_at))
        if bucket is not None:
            bucket.add(entry)

    return list(buckets.values())


def summarize(series: list[DailyTotal]) -> dict:
    """Средние значения по дням с записями.

    Returns:
        dict с полями: avg_calories, avg_protein, avg_carbs, avg_fats,
        total_calories, days_tracked, total_days
    """
    tracked = [day for day in series if day.entry_count > 0]
    divisor = len(tracked) or 1

    summary = {
        f"avg_{metric}": round(sum(getattr(day, metric) for day in series) / divisor)
        for metric in MACROS
    }
    summary["total_calories"] = round(sum(day.calories for day in series))
    summary["days_tracked"] = len(tracked)
    summary["total_days"] = len(series)
    return summary


def weekly_averages(series: list[DailyTotal], weeks: int = 4) -> list[dict]:
    """Средние по неделям (блоки по 7 дней от начала ряда).

    Делитель — число дней с записями в неделе (1, если таких нет).
    """
    result = []
    for week_num in range(weeks):
        week = series[week_num * 7:(week_num + 1) * 7]
        divisor = len([day for day in week if day.entry_count > 0]) or 1
        averages = {
            f"avg_{metric}": round(sum(getattr(day, metric) for day in week) / divisor)
            for metric in MACROS
        }
        result.append({"week": week_num + 1, **averages})
    return result


def get_day_stats(user_id: int, day: Optional[date] = None, store: Optional[FoodLogStore] = None) -> dict:
    """Статистика за один день (по умолчанию сегодня).

    Returns:
        dict с полями: total (DailyTotal), entries (список FoodLog)
    """
    store = store or FoodLogStore()
    day = day or date.today()
    entries = store.fetch_entries(user_id, day, day)
    [total] = aggregate(entries, day, day)
    return {"total": total, "entries": entries}


def get_period_stats(user_id: int, days: int, store: Optional[FoodLogStore] = None) -> list[DailyTotal]:
    """Суммы по дням за последние days дней, включая сегодня.

    Args:
        user_id: ID пользователя
        days: Количество дней (7, 30)
    """
    store = store or FoodLogStore()
    end = date.today()
    start = end - timedelta(days=days - 1)
    return aggregate(store.fetch_entries(user_id, start, end), start, end)
