"""Обработчики регистрации и редактирования профиля."""
from telegram import Update
from telegram.ext import (
    Application,
    CommandHandler,
    CallbackQueryHandler,
    MessageHandler,
    ConversationHandler,
    filters,
    ContextTypes,
)
from macrobot.keyboards.food_menu import get_goal_keyboard
from macrobot.models import Goal
from macrobot.services.user_service import (
    get_or_create_user,
    get_user_by_telegram_id,
    create_profile,
    toggle_goal,
    override_targets,
)

# Состояния регистрации
AGE, HEIGHT, WEIGHT, GOAL = range(4)

GOAL_NAMES = {Goal.CUT: "сушка", Goal.BULK: "масса"}


def format_targets(profile) -> str:
    return (
        f"🔥 {profile.daily_calories} ккал\n"
        f"🥗 Б: {profile.daily_protein}г | У: {profile.daily_carbs}г | Ж: {profile.daily_fats}г"
    )


async def register_start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Начало регистрации."""
    user = get_or_create_user(update.effective_user)

    if user.profile:
        await update.message.reply_text(
            "⚠️ У тебя уже есть профиль.\n"
            "/goal — сменить цель, /weight — записать вес, /targets — задать нормы вручную."
        )
        return ConversationHandler.END

    context.user_data["user_id"] = user.id

    await update.message.reply_text(
        "👤 <b>Регистрация профиля</b>\n\n"
        "Шаг 1/4: Сколько тебе лет?\n"
        "Отправь числом (например: 25)",
        parse_mode="HTML",
    )
    return AGE


async def age_handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Обработка ввода возраста."""
    try:
        age = int(update.message.text)
        if not (10 <= age <= 100):
            raise ValueError

        context.user_data["age"] = age

        await update.message.reply_text(
            "✅ Возраст сохранен\n\n"
            "Шаг 2/4: Какой у тебя рост (в см)?\n"
            "Отправь числом (например: 175)"
        )
        return HEIGHT
    except ValueError:
        await update.message.reply_text("❌ Введи корректный возраст (10-100 лет)")
        return AGE


async def height_handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Обработка ввода роста."""
    try:
        height = float(update.message.text.replace(",", "."))
        if not (100 <= height <= 250):
            raise ValueError

        context.user_data["height"] = height

        await update.message.reply_text(
            "✅ Рост сохранен\n\n"
            "Шаг 3/4: Какой у тебя текущий вес (в кг)?\n"
            "Отправь числом (например: 70.5)"
        )
        return WEIGHT
    except ValueError:
        await update.message.reply_text("❌ Введи корректный рост (100-250 см)")
        return HEIGHT


async def weight_handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Обработка ввода веса."""
    try:
        weight = float(update.message.text.replace(",", "."))
        if not (30 <= weight <= 250):
            raise ValueError

        context.user_data["weight"] = weight

        await update.message.reply_text(
            "✅ Вес сохранен\n\n" "Шаг 4/4: Какая у тебя цель?", reply_markup=get_goal_keyboard()
        )
        return GOAL
    except ValueError:
        await update.message.reply_text("❌ Введи корректный вес (30-250 кг)")
        return WEIGHT


async def goal_handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Выбор цели и сохранение профиля."""
    query = update.callback_query
    await query.answer()

    profile = create_profile(
        user_id=context.user_data["user_id"],
        weight_kg=context.user_data["weight"],
        height_cm=context.user_data["height"],
        age=context.user_data["age"],
        goal=Goal(query.data),
    )

    context.user_data.clear()

    await query.edit_message_text(
        f"🎉 <b>Профиль создан!</b>\n\n"
        f"📊 Твои дневные нормы:\n"
        f"{format_targets(profile)}\n\n"
        f"Начни отслеживать питание — просто отправь запись о еде.",
        parse_mode="HTML",
    )
    return ConversationHandler.END


async def cancel(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Отмена регистрации."""
    await update.message.reply_text("❌ Регистрация отменена.")
    context.user_data.clear()
    return ConversationHandler.END


async def goal_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Переключить цель cut/bulk с пересчетом норм."""
    user = get_user_by_telegram_id(update.effective_user.id)
    if not user or not user.profile:
        await update.message.reply_text("❌ Сначала заполни профиль: /register")
        return

    profile = toggle_goal(user.id)
    await update.message.reply_text(
        f"🔄 Цель: <b>{GOAL_NAMES[profile.goal]}</b>\n\n"
        f"📊 Новые нормы:\n{format_targets(profile)}",
        parse_mode="HTML",
    )


async def targets_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Ручная установка норм: /targets ккал белки углеводы жиры."""
    user = get_user_by_telegram_id(update.effective_user.id)
    if not user or not user.profile:
        await update.message.reply_text("❌ Сначала заполни профиль: /register")
        return

    try:
        calories, protein, carbs, fats = (int(arg) for arg in context.args)
        if min(calories, protein, carbs, fats) < 0:
            raise ValueError
    except ValueError:
        await update.message.reply_text(
            "Использование: /targets ккал белки углеводы жиры\n"
            "Например: /targets 2200 160 220 70"
        )
        return

    profile = override_targets(user.id, calories, protein, carbs, fats)
    await update.message.reply_text(
        f"✅ Нормы заданы вручную:\n{format_targets(profile)}\n\n"
        f"Смена цели (/goal) вернет расчет по формуле."
    )


def register_handlers(application: Application) -> None:
    """Регистрация обработчиков."""
    conv_handler = ConversationHandler(
        entry_points=[CommandHandler("register", register_start)],
        states={
            AGE: [MessageHandler(filters.TEXT & ~filters.COMMAND, age_handler)],
            HEIGHT: [MessageHandler(filters.TEXT & ~filters.COMMAND, height_handler)],
            WEIGHT: [MessageHandler(filters.TEXT & ~filters.COMMAND, weight_handler)],
            GOAL: [CallbackQueryHandler(goal_handler, pattern="^(cut|bulk)$")],
        },
        fallbacks=[CommandHandler("cancel", cancel)],
    )
    application.add_handler(conv_handler)
    application.add_handler(CommandHandler("goal", goal_command))
    application.add_handler(CommandHandler("targets", targets_command))
