"""Модели базы данных."""
from macrobot.models.base import BaseModel, TimestampMixin
from macrobot.models.user import User
from macrobot.models.profile import Profile, Goal
from macrobot.models.food_log import FoodLog
from macrobot.models.weight_log import WeightLog
from macrobot.models.achievement import Achievement, UserAchievement, CriteriaType

__all__ = [
    "BaseModel",
    "TimestampMixin",
    "User",
    "Profile",
    "Goal",
    "FoodLog",
    "WeightLog",
    "Achievement",
    "UserAchievement",
    "CriteriaType",
]
