"""Обработчики статистики, серий, достижений и веса."""
from datetime import date, timedelta
from telegram import Update
from telegram.ext import Application, CommandHandler, CallbackQueryHandler, ContextTypes
from macrobot.config import config
from macrobot.keyboards.food_menu import get_stats_keyboard
from macrobot.services.user_service import get_user_by_telegram_id, has_profile
from macrobot.services.food_log_service import FoodLogStore
from macrobot.services.stats_service import get_day_stats, get_period_stats, summarize, weekly_averages
from macrobot.services.trend_service import compute_trend, Direction, Metric
from macrobot.services.streak_service import get_current_streak, week_overview
from macrobot.services.achievement_service import get_user_achievements
from macrobot.services.nutrition_calc import goal_progress
from macrobot.services.weight_service import log_weight, get_weight_history, weight_change

TREND_ARROWS = {Direction.UP: "📈", Direction.DOWN: "📉", Direction.STABLE: "➡️"}


def format_trend(label: str, trend) -> str:
    if trend is None:
        return f"{label}: недостаточно данных"
    return f"{label}: {TREND_ARROWS[trend.direction]} {trend.percent}%"


def format_day(total, profile, entries) -> str:
    """Текст статистики за день."""
    targets = profile.targets()
    progress = goal_progress(total, targets)
    remaining = targets["calories"] - total.calories
    food_text = (
        "\n".join(f"• {e.food_name} — {round(e.calories)} ккал" for e in entries)
        or "Нет записей"
    )
    return (
        f"🔥 Калории: {round(total.calories)} / {targets['calories']} ккал ({progress['calories']}%)\n"
        f"📉 Осталось: {round(remaining)} ккал\n\n"
        f"🥗 БЖУ:\n"
        f"   Белки: {round(total.protein, 1)}г / {targets['protein']}г ({progress['protein']}%)\n"
        f"   Углеводы: {round(total.carbs, 1)}г / {targets['carbs']}г ({progress['carbs']}%)\n"
        f"   Жиры: {round(total.fats, 1)}г / {targets['fats']}г ({progress['fats']}%)\n\n"
        f"🍽️ Съедено ({total.entry_count} записей):\n"
        f"{food_text}"
    )


def format_period(series, title: str, with_weeks: bool = False) -> str:
    """Текст статистики за период: средние, тренды, недели."""
    summary = summarize(series)
    text = (
        f"📊 <b>{title}</b>\n\n"
        f"🔥 Всего калорий: {summary['total_calories']} ккал\n"
        f"📈 Среднее в день: {summary['avg_calories']} ккал\n"
        f"🥗 Б: {summary['avg_protein']}г | У: {summary['avg_carbs']}г | Ж: {summary['avg_fats']}г\n"
        f"📅 Дней с записями: {summary['days_tracked']} из {summary['total_days']}\n\n"
        f"<b>Тренды:</b>\n"
        f"{format_trend('Калории', compute_trend(series, Metric.CALORIES))}\n"
        f"{format_trend('Белки', compute_trend(series, Metric.PROTEIN))}"
    )
    if with_weeks:
        weeks = "\n".join(
            f"Неделя {w['week']}: {w['avg_calories']} ккал, "
            f"Б {w['avg_protein']} / У {w['avg_carbs']} / Ж {w['avg_fats']}"
            for w in weekly_averages(series)
        )
        text += f"\n\n<b>По неделям:</b>\n{weeks}"
    return text


async def today_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Статистика за сегодня."""
    user = get_user_by_telegram_id(update.effective_user.id)

    if not user or not has_profile(user):
        await update.message.reply_text("❌ Сначала заполни профиль: /register")
        return

    stats = get_day_stats(user.id)
    await update.message.reply_text(
        f"📊 <b>Статистика за сегодня</b>\n\n"
        f"{format_day(stats['total'], user.profile, stats['entries'])}",
        parse_mode="HTML",
    )


async def stats_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Выбор периода статистики."""
    user = get_user_by_telegram_id(update.effective_user.id)
    if not user or not has_profile(user):
        await update.message.reply_text("❌ Сначала заполни профиль: /register")
        return

    await update.message.reply_text(
        "📊 Выбери период для статистики:", reply_markup=get_stats_keyboard()
    )


async def stats_callback(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Обработка callback-кнопок статистики."""
    query = update.callback_query
    await query.answer()

    user = get_user_by_telegram_id(update.effective_user.id)
    if not user or not has_profile(user):
        await query.edit_message_text("❌ Сначала заполни профиль: /register")
        return

    if query.data == "stats:today":
        stats = get_day_stats(user.id)
        text = (
            f"📊 <b>Статистика: Сегодня</b>\n\n"
            f"{format_day(stats['total'], user.profile, stats['entries'])}"
        )
    elif query.data == "stats:week":
        series = get_period_stats(user.id, config.STATS_WINDOW_DAYS)
        text = format_period(series, f"Статистика за {config.STATS_WINDOW_DAYS} дней")
    elif query.data == "stats:month":
        series = get_period_stats(user.id, 30)
        text = format_period(series, "Статистика за месяц", with_weeks=True)
    else:
        return

    await query.edit_message_text(text, parse_mode="HTML")


async def streak_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Текущая серия и последние 7 дней."""
    user = get_user_by_telegram_id(update.effective_user.id)
    if not user:
        await update.message.reply_text("❌ Сначала нажми /start")
        return

    store = FoodLogStore()
    today = date.today()
    streak = get_current_streak(user.id, store, today=today)
    overview = week_overview(store.logged_days(user.id, today - timedelta(days=6), today), today)

    days_line = " ".join(
        f"{'✅' if day['is_completed'] else '⬜'}{day['day']}{'*' if day['is_today'] else ''}"
        for day in overview
    )
    await update.message.reply_text(f"🔥 Серия: {streak} дн.\n\n{days_line}")


async def achievements_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Список полученных достижений."""
    user = get_user_by_telegram_id(update.effective_user.id)
    if not user:
        await update.message.reply_text("❌ Сначала нажми /start")
        return

    earned = get_user_achievements(user.id)
    if not earned:
        await update.message.reply_text("🏆 Пока нет достижений. Добавь первую запись о еде!")
        return

    lines = "\n".join(
        f"{ua.achievement.icon} <b>{ua.achievement.name}</b> — {ua.earned_at:%d.%m.%Y}"
        for ua in earned
    )
    await update.message.reply_text(f"🏆 <b>Твои достижения</b>\n\n{lines}", parse_mode="HTML")


async def weight_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """/weight 72.5 — записать вес; без аргумента — показать историю."""
    user = get_user_by_telegram_id(update.effective_user.id)
    if not user or not has_profile(user):
        await update.message.reply_text("❌ Сначала заполни профиль: /register")
        return

    if context.args:
        try:
            weight = float(context.args[0].replace(",", "."))
            if not (30 <= weight <= 250):
                raise ValueError
        except ValueError:
            await update.message.reply_text("❌ Введи корректный вес (30-250 кг): /weight 72.5")
            return
        log_weight(user.id, weight)

    history = get_weight_history(user.id)
    if not history:
        await update.message.reply_text("⚖️ Записей веса нет. Используй /weight 72.5")
        return

    change = weight_change(history)
    change_text = f"{change:+.1f} кг" if change is not None else "—"
    await update.message.reply_text(
        f"⚖️ Текущий вес: {history[0].weight_kg} кг\n"
        f"📉 Изменение за {len(history)} записей: {change_text}"
    )


def register_handlers(application: Application) -> None:
    """Регистрация обработчиков."""
    application.add_handler(CommandHandler("today", today_command))
    application.add_handler(CommandHandler("stats", stats_command))
    application.add_handler(CommandHandler("streak", streak_command))
    application.add_handler(CommandHandler("achievements", achievements_command))
    application.add_handler(CommandHandler("weight", weight_command))
    application.add_handler(CallbackQueryHandler(stats_callback, pattern=r"^stats:"))
