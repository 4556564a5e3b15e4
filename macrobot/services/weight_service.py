"""Сервис истории веса."""
from datetime import datetime
from typing import Optional
from macrobot.database import get_db
from macrobot.models import WeightLog
from macrobot.services.user_service import find_profile, set_body_metrics


def log_weight(
    user_id: int, weight_kg: float, note: Optional[str] = None, session_factory=None
) -> WeightLog:
    """Записать вес и обновить его в профиле.

    Запись истории и профиль сохраняются одним коммитом.
    """
    if weight_kg <= 0:
        raise ValueError("Вес должен быть положительным")

    with get_db(session_factory) as db:
        log = WeightLog(user_id=user_id, weight_kg=weight_kg, logged_at=datetime.now(), note=note)
        db.add(log)

        profile = find_profile(db, user_id)
        if profile is not None:
            set_body_metrics(profile, weight_kg=weight_kg)

        db.commit()
        db.refresh(log)
        return log


def get_weight_history(user_id: int, limit: int = 30, session_factory=None) -> list[WeightLog]:
    """Последние записи веса, новые первыми."""
    with get_db(session_factory) as db:
        return (
            db.query(WeightLog)
            .filter(WeightLog.user_id == user_id)
            .order_by(WeightLog.logged_at.desc(), WeightLog.id.desc())
            .limit(limit)
            .all()
        )


def weight_change(history: list[WeightLog]) -> Optional[float]:
    """Изменение веса: последняя запись минус самая старая (None, если записей меньше 2)."""
    if len(history) < 2:
        return None
    return round(history[0].weight_kg - history[-1].weight_kg, 1)
