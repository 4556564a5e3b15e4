"""Inline-клавиатуры бота."""
from telegram import InlineKeyboardButton, InlineKeyboardMarkup


def get_food_keyboard(log_id: int) -> InlineKeyboardMarkup:
    """Кнопки под записью о приеме пищи.

    Args:
        log_id: ID записи в БД
    """
    keyboard = [[InlineKeyboardButton("❌ Удалить", callback_data=f"delete:{log_id}")]]
    return InlineKeyboardMarkup(keyboard)


def get_stats_keyboard() -> InlineKeyboardMarkup:
    """Выбор периода статистики."""
    keyboard = [
        [InlineKeyboardButton("📅 Сегодня", callback_data="stats:today")],
        [InlineKeyboardButton("📊 За неделю", callback_data="stats:week")],
        [InlineKeyboardButton("📈 За месяц", callback_data="stats:month")],
    ]
    return InlineKeyboardMarkup(keyboard)


def get_goal_keyboard() -> InlineKeyboardMarkup:
    """Выбор цели при регистрации."""
    keyboard = [
        [InlineKeyboardButton("🔻 Сушка (дефицит)", callback_data="cut")],
        [InlineKeyboardButton("🔺 Масса (профицит)", callback_data="bulk")],
    ]
    return InlineKeyboardMarkup(keyboard)
