"""Обработчики добавления и удаления записей о еде."""
import logging
import math
from telegram import Update
from telegram.ext import Application, CallbackQueryHandler, MessageHandler, filters, ContextTypes
from macrobot.keyboards.food_menu import get_food_keyboard
from macrobot.services.user_service import get_user_by_telegram_id, has_profile
from macrobot.services.food_log_service import FoodLogStore
from macrobot.services.stats_service import get_day_stats
from macrobot.services.nutrition_calc import goal_progress
from macrobot.services.achievement_service import check_achievements

logger = logging.getLogger(__name__)

FOOD_FORMAT_HINT = (
    "Формат: <code>название; ккал; белки; углеводы; жиры</code>\n"
    "Например: <code>Гречка с курицей; 450; 35; 50; 12</code>"
)


def parse_food_text(text: str) -> dict:
    """Разбирает строку «название; ккал; Б; У; Ж».

    Белки, углеводы и жиры можно не указывать или оставить пустыми (будут 0).

    Raises:
        ValueError: если нет названия/калорий или числа некорректны
    """
    parts = [part.strip() for part in text.strip().split(";")]
    if len(parts) < 2 or not parts[0] or not parts[1]:
        raise ValueError("нужны название и калории")
    if len(parts) > 5:
        raise ValueError("слишком много значений")

    fields = parts[1:] + [""] * (5 - len(parts))
    numbers = [float(part.replace(",", ".")) if part else 0.0 for part in fields]
    if any(not math.isfinite(value) or value < 0 for value in numbers):
        raise ValueError("значения должны быть неотрицательными числами")

    calories, protein, carbs, fats = numbers
    return {
        "food_name": parts[0],
        "calories": calories,
        "protein": protein,
        "carbs": carbs,
        "fats": fats,
    }


def generate_progress_bar(current: float, total: float, length: int = 20) -> str:
    """Генерирует визуальный прогресс-бар."""
    if total <= 0:
        return "▯" * length

    filled = int(min(current / total, 1.0) * length)
    empty = length - filled

    return "🟩" * filled + "▯" * empty


def format_achievement(user_achievement) -> str:
    achievement = user_achievement.achievement
    return f"{achievement.icon} <b>{achievement.name}</b> — {achievement.description}"


async def handle_text_as_food(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Обработка обычного текста как записи о еде."""
    user = get_user_by_telegram_id(update.effective_user.id)
    if not user or not has_profile(user):
        await update.message.reply_text("❌ Сначала заполни профиль: /register")
        return

    try:
        data = parse_food_text(update.message.text)
    except ValueError as e:
        await update.message.reply_text(
            f"❌ Не понял запись: {e}\n\n{FOOD_FORMAT_HINT}", parse_mode="HTML"
        )
        return

    entry = FoodLogStore().add_entry(user.id, **data)

    stats = get_day_stats(user.id)
    total = stats["total"]
    targets = user.profile.targets()
    progress = goal_progress(total, targets)
    remaining = targets["calories"] - total.calories
    remaining_text = (
        f"{round(remaining)} ккал" if remaining >= 0 else f"{round(abs(remaining))} ккал ПРЕВЫШЕНО"
    )

    await update.message.reply_text(
        f"✅ Добавлено: {entry.food_name}\n"
        f"🔥 {round(entry.calories)} ккал | "
        f"Б:{entry.protein:g}г У:{entry.carbs:g}г Ж:{entry.fats:g}г\n\n"
        f"📊 Прогресс на сегодня:\n"
        f"{round(total.calories)} из {targets['calories']} ккал ({progress['calories']}%)\n"
        f"{generate_progress_bar(total.calories, targets['calories'])}\n"
        f"Осталось: {remaining_text}",
        reply_markup=get_food_keyboard(entry.id),
    )

    new_achievements = check_achievements(user.id)
    if new_achievements:
        lines = "\n".join(format_achievement(ua) for ua in new_achievements)
        await update.message.reply_text(
            f"🎉 <b>Новое достижение!</b>\n\n{lines}", parse_mode="HTML"
        )


async def delete_callback(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Удаление записи по кнопке (только владельцем)."""
    query = update.callback_query
    await query.answer()

    user = get_user_by_telegram_id(update.effective_user.id)
    if not user:
        return

    try:
        log_id = int(query.data.split(":", 1)[1])
    except (IndexError, ValueError):
        logger.warning(f"Некорректный callback: {query.data}")
        return

    if FoodLogStore().delete_entry(user.id, log_id):
        await query.edit_message_text("🗑️ Запись удалена")
    else:
        await query.edit_message_text("❌ Запись не найдена")


def register_handlers(application: Application) -> None:
    """Регистрация обработчиков."""
    application.add_handler(
        MessageHandler(filters.TEXT & ~filters.COMMAND & ~filters.REPLY, handle_text_as_food)
    )
    application.add_handler(CallbackQueryHandler(delete_callback, pattern=r"^delete:\d+$"))
