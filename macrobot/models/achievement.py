"""Модели достижений: каталог и полученные награды."""
import enum
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Enum, UniqueConstraint
from sqlalchemy.orm import relationship
from macrobot.models.base import BaseModel


class CriteriaType(str, enum.Enum):
    """Тип условия получения достижения."""
    FIRST_ENTRY = "first_entry"
    STREAK = "streak"
    TOTAL_ENTRIES = "total_entries"
    MONTHLY_ENTRIES = "monthly_entries"


class Achievement(BaseModel):
    """Достижение из каталога (справочные данные)."""

    __tablename__ = "achievements"

    code = Column(String(50), unique=True, nullable=False)
    name = Column(String(100), nullable=False)
    description = Column(String(300), default="")
    icon = Column(String(20), default="🏆")

    criteria_type = Column(Enum(CriteriaType), nullable=False)
    criteria_value = Column(Integer, nullable=False, default=1)

    def __repr__(self):
        return f"<Achievement {self.code} {self.criteria_type.value}={self.criteria_value}>"


class UserAchievement(BaseModel):
    """Полученное пользователем достижение. Не больше одного на пару."""

    __tablename__ = "user_achievements"
    __table_args__ = (
        UniqueConstraint("user_id", "achievement_id", name="uq_user_achievement"),
    )

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    achievement_id = Column(Integer, ForeignKey("achievements.id"), nullable=False)
    earned_at = Column(DateTime, nullable=False)

    # Relationships
    user = relationship("User", back_populates="achievements")
    achievement = relationship("Achievement", lazy="joined")
