"""Модель записи о приеме пищи."""
from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from macrobot.models.base import BaseModel


class FoodLog(BaseModel):
    """Запись о съеденной еде."""

    __tablename__ = "food_logs"

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    food_name = Column(String(200), nullable=False)
    # Момент приема пищи (не только дата)
    logged_at = Column(DateTime, nullable=False, index=True)

    # Нутриенты
    calories = Column(Float, nullable=False, default=0.0)
    protein = Column(Float, default=0.0)
    carbs = Column(Float, default=0.0)
    fats = Column(Float, default=0.0)

    # Опционально
    fiber = Column(Float)
    sugar = Column(Float)
    sodium = Column(Float)

    # Relationship
    user = relationship("User", back_populates="food_logs")

    def __repr__(self):
        return f"<FoodLog {self.food_name} {self.calories} kcal @ {self.logged_at}>"
