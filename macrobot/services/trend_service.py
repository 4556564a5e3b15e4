"""Тренды показателей питания."""
import enum
from dataclasses import dataclass
from typing import Optional


class Metric(str, enum.Enum):
    """Показатель, по которому считается тренд."""
    CALORIES = "calories"
    PROTEIN = "protein"
    CARBS = "carbs"
    FATS = "fats"


class Direction(str, enum.Enum):
    UP = "up"
    DOWN = "down"
    STABLE = "stable"


@dataclass(frozen=True)
class Trend:
    """Направление и величина изменения (в процентах, по модулю)."""

    direction: Direction
    percent: float


def compute_trend(series: list, metric: Metric) -> Optional[Trend]:
    """Сравнить среднее второй половины дней с записями со средним первой.

    Дни без записей не учитываются. Меньше двух дней с записями — None
    (данных недостаточно), это не то же самое, что нулевое изменение.
    Хорошо или плохо изменение для конкретного показателя — решает вызывающий.
    """
    metric = Metric(metric).value
    days = [day for day in series if day.entry_count > 0]
    if len(days) < 2:
        return None

    mid = len(days) // 2
    first_half, second_half = days[:mid], days[mid:]

    first_avg = sum(getattr(day, metric) for day in first_half) / len(first_half)
    second_avg = sum(getattr(day, metric) for day in second_half) / len(second_half)

    diff = second_avg - first_avg
    percent = abs(diff / first_avg) * 100 if first_avg > 0 else 0.0

    if diff > 0:
        direction = Direction.UP
    elif diff < 0:
        direction = Direction.DOWN
    else:
        direction = Direction.STABLE

    return Trend(direction=direction, percent=round(percent, 1))
