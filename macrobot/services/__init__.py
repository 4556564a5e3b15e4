"""Сервисы бизнес-логики."""
from macrobot.services.user_service import get_or_create_user, get_user_by_telegram_id, has_profile
from macrobot.services.nutrition_calc import calculate_targets, goal_progress
from macrobot.services.stats_service import DailyTotal, aggregate, get_day_stats, get_period_stats
from macrobot.services.trend_service import compute_trend
from macrobot.services.streak_service import current_streak
from macrobot.services.food_log_service import FoodLogStore
from macrobot.services.achievement_service import AchievementEngine, AchievementStore, check_achievements

__all__ = [
    "get_or_create_user",
    "get_user_by_telegram_id",
    "has_profile",
    "calculate_targets",
    "goal_progress",
    "DailyTotal",
    "aggregate",
    "get_day_stats",
    "get_period_stats",
    "compute_trend",
    "current_streak",
    "FoodLogStore",
    "AchievementEngine",
    "AchievementStore",
    "check_achievements",
]
