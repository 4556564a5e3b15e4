"""Точка входа для macrobot."""
import logging
from telegram.ext import Application
from macrobot.config import config
from macrobot.database import init_db
from macrobot.handlers import (
    register_start_handlers,
    register_registration_handlers,
    register_food_handlers,
    register_stats_handlers,
)

# Настройка логирования
logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Запуск бота."""
    # Проверка конфигурации
    try:
        config.validate()
    except ValueError as e:
        logger.error(f"Ошибка конфигурации: {e}")
        return

    # Инициализация БД и каталога достижений
    logger.info("Инициализация базы данных...")
    init_db()

    logger.info("Запуск бота...")
    application = Application.builder().token(config.BOT_TOKEN).build()

    # Регистрация обработчиков (диалог регистрации раньше текстовых записей)
    register_start_handlers(application)
    register_registration_handlers(application)
    register_stats_handlers(application)
    register_food_handlers(application)

    application.run_polling(allowed_updates=["message", "callback_query"])


if __name__ == "__main__":
    main()
