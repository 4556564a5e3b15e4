"""Хранилище записей о еде."""
import logging
import math
from datetime import date, datetime, time, timedelta
from typing import Optional
from sqlalchemy import func
from macrobot.database import get_db
from macrobot.models import FoodLog

logger = logging.getLogger(__name__)

NUTRIENT_FIELDS = ("calories", "protein", "carbs", "fats")

# Поля, которые владелец может менять у записи
EDITABLE_FIELDS = (
    "food_name",
    "logged_at",
    "calories",
    "protein",
    "carbs",
    "fats",
    "fiber",
    "sugar",
    "sodium",
)


def _check_nutrients(values: dict) -> None:
    """Нутриенты должны быть конечными неотрицательными числами."""
    for name, value in values.items():
        if value is None or not math.isfinite(value) or value < 0:
            raise ValueError(f"{name} должно быть неотрицательным числом")


def day_start(day: date) -> datetime:
    """Начало календарного дня (полночь по локальному времени)."""
    return datetime.combine(day, time.min)


class FoodLogStore:
    """Доступ к FoodLog: выборки по диапазону, подсчеты, жизненный цикл записи."""

    def __init__(self, session_factory=None):
        self._session_factory = session_factory

    def fetch_entries(self, user_id: int, start: date, end: date) -> list[FoodLog]:
        """Все записи пользователя за дни [start, end] включительно, по времени."""
        with get_db(self._session_factory) as db:
            return (
                db.query(FoodLog)
                .filter(
                    FoodLog.user_id == user_id,
                    FoodLog.logged_at >= day_start(start),
                    FoodLog.logged_at < day_start(end + timedelta(days=1)),
                )
                .order_by(FoodLog.logged_at.asc())
                .all()
            )

    def count_entries(self, user_id: int, since: Optional[datetime] = None) -> int:
        """Количество записей пользователя (опционально начиная с момента since)."""
        with get_db(self._session_factory) as db:
            query = db.query(func.count(FoodLog.id)).filter(FoodLog.user_id == user_id)
            if since is not None:
                query = query.filter(FoodLog.logged_at >= since)
            return query.scalar() or 0

    def has_entry_on(self, user_id: int, day: date) -> bool:
        """Есть ли хотя бы одна запись за день."""
        with get_db(self._session_factory) as db:
            return (
                db.query(FoodLog.id)
                .filter(
                    FoodLog.user_id == user_id,
                    FoodLog.logged_at >= day_start(day),
                    FoodLog.logged_at < day_start(day + timedelta(days=1)),
                )
                .first()
                is not None
            )

    def logged_days(self, user_id: int, start: date, end: date) -> set[date]:
        """Множество дней в [start, end], за которые есть записи. Один запрос."""
        with get_db(self._session_factory) as db:
            rows = (
                db.query(FoodLog.logged_at)
                .filter(
                    FoodLog.user_id == user_id,
                    FoodLog.logged_at >= day_start(start),
                    FoodLog.logged_at < day_start(end + timedelta(days=1)),
                )
                .all()
            )
            return {logged_at.date() for (logged_at,) in rows}

    def add_entry(
        self,
        user_id: int,
        food_name: str,
        calories: float,
        protein: float = 0.0,
        carbs: float = 0.0,
        fats: float = 0.0,
        logged_at: Optional[datetime] = None,
        **extra,
    ) -> FoodLog:
        """Создать запись о еде.

        Args:
            user_id: ID пользователя
            food_name: название
            calories, protein, carbs, fats: нутриенты (неотрицательные)
            logged_at: момент приема пищи (по умолчанию сейчас)
            extra: fiber, sugar, sodium
        """
        values = {"calories": calories, "protein": protein, "carbs": carbs, "fats": fats}
        _check_nutrients(values)

        with get_db(self._session_factory) as db:
            entry = FoodLog(
                user_id=user_id,
                food_name=food_name,
                logged_at=logged_at or datetime.now(),
                fiber=extra.get("fiber"),
                sugar=extra.get("sugar"),
                sodium=extra.get("sodium"),
                **values,
            )
            db.add(entry)
            db.commit()
            db.refresh(entry)
            logger.info(f"Food log {entry.id} added for user {user_id}: {food_name}")
            return entry

    def update_entry(self, user_id: int, entry_id: int, /, **changes) -> Optional[FoodLog]:
        """Изменить запись. Возвращает None, если запись не принадлежит пользователю."""
        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValueError(f"Нельзя изменить поля: {', '.join(sorted(unknown))}")
        _check_nutrients({name: changes[name] for name in NUTRIENT_FIELDS if name in changes})

        with get_db(self._session_factory) as db:
            entry = db.query(FoodLog).filter_by(id=entry_id, user_id=user_id).first()
            if entry is None:
                return None
            for name, value in changes.items():
                setattr(entry, name, value)
            db.commit()
            db.refresh(entry)
            return entry

    def delete_entry(self, user_id: int, entry_id: int) -> bool:
        """Удалить запись владельца. False, если записи нет или она чужая."""
        with get_db(self._session_factory) as db:
            deleted = db.query(FoodLog).filter_by(id=entry_id, user_id=user_id).delete()
            db.commit()
            if deleted:
                logger.info(f"Food log {entry_id} deleted by user {user_id}")
            return bool(deleted)
