"""Обработчики команд /start и /help."""
from telegram import Update, InlineKeyboardButton, InlineKeyboardMarkup
from telegram.ext import Application, CommandHandler, CallbackQueryHandler, ContextTypes
from macrobot.handlers.food import FOOD_FORMAT_HINT
from macrobot.keyboards.food_menu import get_stats_keyboard
from macrobot.services.user_service import get_or_create_user, has_profile, get_user_by_telegram_id


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Обработка команды /start."""
    user = get_or_create_user(update.effective_user)

    if not has_profile(user):
        await update.message.reply_text(
            "👋 Привет! Я помогу считать калории и БЖУ, держать серию и собирать достижения.\n\n"
            "Для начала заполни профиль: /register"
        )
    else:
        keyboard = [
            [InlineKeyboardButton("🍽️ Добавить еду", callback_data="start:add_food")],
            [InlineKeyboardButton("📊 Статистика", callback_data="start:stats")],
        ]
        reply_markup = InlineKeyboardMarkup(keyboard)

        await update.message.reply_text(
            f"👋 С возвращением, {user.first_name or 'друг'}!\n\n"
            f"📊 Твоя дневная норма: {user.profile.daily_calories} ккал",
            reply_markup=reply_markup,
        )


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Обработка команды /help."""
    text = (
        "📖 <b>Команды бота:</b>\n\n"
        "🍽️ <b>Еда:</b>\n"
        "Отправь запись текстом. " + FOOD_FORMAT_HINT + "\n"
        "/today - Статистика за сегодня\n\n"
        "👤 <b>Профиль:</b>\n"
        "/register - Заполнить профиль\n"
        "/goal - Сменить цель (сушка/масса)\n"
        "/targets - Задать нормы вручную\n"
        "/weight - Записать вес\n\n"
        "📊 <b>Прогресс:</b>\n"
        "/stats - Статистика и тренды\n"
        "/streak - Серия дней\n"
        "/achievements - Достижения\n\n"
        "/help - Эта справка"
    )
    await update.message.reply_text(text, parse_mode="HTML")


async def start_callback(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Обработка inline-кнопок из /start."""
    query = update.callback_query
    await query.answer()

    if query.data == "start:add_food":
        await query.edit_message_text(f"🍽️ Отправь запись о еде.\n{FOOD_FORMAT_HINT}", parse_mode="HTML")
    elif query.data == "start:stats":
        user = get_user_by_telegram_id(update.effective_user.id)
        if not user or not has_profile(user):
            await query.edit_message_text("❌ Сначала заполни профиль: /register")
            return

        await query.edit_message_text(
            "📊 Выбери период для статистики:",
            reply_markup=get_stats_keyboard(),
        )


def register_handlers(application: Application) -> None:
    """Регистрация обработчиков."""
    application.add_handler(CommandHandler("start", start_command))
    application.add_handler(CommandHandler("help", help_command))
    application.add_handler(CallbackQueryHandler(start_callback, pattern=r"^start:"))
