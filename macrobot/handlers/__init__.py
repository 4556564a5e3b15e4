"""Обработчики команд бота."""
from macrobot.handlers.start import register_handlers as register_start_handlers
from macrobot.handlers.registration import register_handlers as register_registration_handlers
from macrobot.handlers.food import register_handlers as register_food_handlers
from macrobot.handlers.stats import register_handlers as register_stats_handlers

__all__ = [
    "register_start_handlers",
    "register_registration_handlers",
    "register_food_handlers",
    "register_stats_handlers",
]
