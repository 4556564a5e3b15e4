"""Базовые классы для моделей SQLAlchemy."""
from datetime import datetime
from sqlalchemy import Column, Integer, DateTime
from macrobot.database import Base


class TimestampMixin:
    """Миксин временных меток.

    Время локальное и без часового пояса, как и logged_at у записей:
    границы дней считаются по локальной полуночи.
    """

    created_at = Column(DateTime, default=datetime.now)
    updated_at = Column(DateTime, onupdate=datetime.now)


class BaseModel(Base, TimestampMixin):
    """Базовая модель для всех таблиц."""

    __abstract__ = True

    id = Column(Integer, primary_key=True, index=True)
