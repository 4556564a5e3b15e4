"""Модель профиля пользователя (цели и параметры)."""
from sqlalchemy import Column, Integer, Float, Boolean, ForeignKey, Enum
from sqlalchemy.orm import relationship
import enum
from macrobot.models.base import BaseModel


class Goal(str, enum.Enum):
    """Цель пользователя."""
    CUT = "cut"    # Дефицит калорий
    BULK = "bulk"  # Профицит калорий


class Profile(BaseModel):
    """Профиль пользователя с параметрами и целями."""

    __tablename__ = "profiles"

    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False)

    # Параметры тела
    weight_kg = Column(Float, nullable=False)
    height_cm = Column(Float, nullable=False)
    age = Column(Integer, nullable=False)

    goal = Column(Enum(Goal), default=Goal.CUT, nullable=False)

    # Рассчитанные (или заданные вручную) дневные нормы
    daily_calories = Column(Integer, default=2000)
    daily_protein = Column(Integer, default=150)
    daily_carbs = Column(Integer, default=200)
    daily_fats = Column(Integer, default=60)

    # True после ручной правки норм — формула не применяется до смены цели
    targets_overridden = Column(Boolean, default=False, nullable=False)

    # Relationship
    user = relationship("User", back_populates="profile")

    def targets(self) -> dict:
        """Текущие дневные нормы в формате калькулятора."""
        return {
            "calories": self.daily_calories,
            "protein": self.daily_protein,
            "carbs": self.daily_carbs,
            "fats": self.daily_fats,
        }
