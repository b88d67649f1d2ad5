"""Обработчики команд /start и /help."""
from telegram import Update
from telegram.ext import Application, CommandHandler, ContextTypes
from src.keyboards.weight_menu import get_auth_keyboard
from src.services.user_service import get_current_user


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Обработка команды /start."""
    username = get_current_user(context.user_data)

    if username is None:
        # Inline-кнопки входа и регистрации
        await update.message.reply_text(
            "👋 Welcome to the Weight Tracker!\n\n"
            "Log your weight once a day and add a quick note for extra context.\n\n"
            "Log in or create an account to start:",
            reply_markup=get_auth_keyboard(),
        )
    else:
        await update.message.reply_text(
            f"👋 Welcome back, {username}!\n\n"
            "/weight <lbs> [note] - log today's weight\n"
            "/history - weight history"
        )


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Обработка команды /help."""
    text = (
        "📖 <b>Commands:</b>\n\n"
        "👤 <b>Account:</b>\n"
        "/signup - Create an account\n"
        "/login - Log in\n"
        "/logout - Log out\n\n"
        "⚖️ <b>Weight:</b>\n"
        "/weight &lt;lbs&gt; [note] - Log today's weight\n"
        "/history - Weight history (edit / delete)\n"
        "/change - Recent change\n\n"
        "❓ <b>Help:</b>\n"
        "/help - This help\n"
        "/cancel - Cancel the current action"
    )
    await update.message.reply_text(text, parse_mode="HTML")


def register_handlers(application: Application) -> None:
    """Регистрация обработчиков."""
    application.add_handler(CommandHandler("start", start_command))
    application.add_handler(CommandHandler("help", help_command))
