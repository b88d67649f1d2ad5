"""Точка входа для Weight Tracker Bot."""
import logging
from telegram.ext import Application
from src.config import config
from src.database import init_db
from src.handlers import (
    register_start_handlers,
    register_auth_handlers,
    register_weight_handlers,
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

    # Инициализация БД (аккаунты и настройки)
    logger.info("Инициализация базы данных...")
    init_db()

    # Создание приложения
    logger.info("Запуск бота...")
    application = Application.builder().token(config.BOT_TOKEN).build()

    # Регистрация обработчиков
    register_start_handlers(application)
    register_auth_handlers(application)
    register_weight_handlers(application)

    application.run_polling(allowed_updates=["message", "callback_query"])


if __name__ == "__main__":
    main()
