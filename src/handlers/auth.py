"""Обработчики входа, регистрации и выхода."""
import logging
from telegram import Update
from telegram.error import TelegramError
from telegram.ext import (
    Application,
    CommandHandler,
    CallbackQueryHandler,
    MessageHandler,
    ConversationHandler,
    filters,
    ContextTypes,
)
from src.services.auth_service import AccountError
from src.services.preference_store import PreferenceStoreError
from src.services.user_service import (
    get_credential_store,
    get_current_user,
    login_user,
    logout_user,
)

logger = logging.getLogger(__name__)

# Состояния регистрации и входа
SIGNUP_USERNAME, SIGNUP_PASSWORD, SIGNUP_CONFIRM = range(3)
LOGIN_USERNAME, LOGIN_PASSWORD = range(3, 5)


async def _reply(update: Update, text: str) -> None:
    """Ответ и на команду, и на inline-кнопку."""
    if update.callback_query:
        await update.callback_query.answer()
        await update.callback_query.message.reply_text(text)
    else:
        await update.message.reply_text(text)


async def _delete_secret(update: Update) -> None:
    """Удалить сообщение с паролем из чата."""
    try:
        await update.message.delete()
    except TelegramError as e:
        logger.debug(f"Could not delete password message: {e}")


# ===== Регистрация =====


async def signup_start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Начало создания аккаунта."""
    context.user_data.pop("signup", None)
    context.user_data.pop("login", None)
    await _reply(update, "📝 Create Account\n\nStep 1/3: Choose a username:")
    return SIGNUP_USERNAME


async def signup_username(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    context.user_data["signup"] = {"username": update.message.text}
    await update.message.reply_text("Step 2/3: Choose a password:")
    return SIGNUP_PASSWORD


async def signup_password(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    context.user_data["signup"]["password"] = update.message.text
    await _delete_secret(update)
    await update.effective_chat.send_message("Step 3/3: Confirm the password:")
    return SIGNUP_CONFIRM


async def signup_confirm(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Проверка подтверждения и сохранение аккаунта."""
    data = context.user_data.pop("signup", {})
    confirm = update.message.text
    await _delete_secret(update)

    username = data.get("username", "")
    password = data.get("password", "")

    if not username.strip() or not password.strip() or not confirm.strip():
        await update.effective_chat.send_message("❌ Please complete all fields. Try again: /signup")
        return ConversationHandler.END

    if password != confirm:
        await update.effective_chat.send_message("❌ Passwords do not match. Try again: /signup")
        return ConversationHandler.END

    try:
        get_credential_store().create_account(username, password)
    except AccountError as e:
        await update.effective_chat.send_message(f"❌ {e.message}")
        return ConversationHandler.END
    except PreferenceStoreError:
        await update.effective_chat.send_message("⚠️ Could not save the account. Please try again later.")
        return ConversationHandler.END

    await update.effective_chat.send_message("🎉 Account created! You can log in now: /login")
    return ConversationHandler.END


# ===== Вход =====


async def login_start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Начало входа."""
    context.user_data.pop("login", None)
    context.user_data.pop("signup", None)
    await _reply(update, "🔑 Login\n\nUsername:")
    return LOGIN_USERNAME


async def login_username(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    context.user_data["login"] = {"username": update.message.text}
    await update.message.reply_text("Password:")
    return LOGIN_PASSWORD


async def login_password(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Проверка пароля."""
    data = context.user_data.pop("login", {})
    username = data.get("username", "")
    password = update.message.text
    await _delete_secret(update)

    if not username.strip() or not password.strip():
        await update.effective_chat.send_message("❌ Please enter a username and password. Try again: /login")
        return ConversationHandler.END

    try:
        ok = get_credential_store().validate_login(username, password)
    except PreferenceStoreError:
        await update.effective_chat.send_message("⚠️ Could not check the account. Please try again later.")
        return ConversationHandler.END

    if not ok:
        await update.effective_chat.send_message("❌ Invalid username or password")
        return ConversationHandler.END

    login_user(context.user_data, username)
    await update.effective_chat.send_message(
        f"👋 Welcome, {username.strip()}!\n\n"
        "/weight <lbs> [note] - log today's weight\n"
        "/history - weight history"
    )
    return ConversationHandler.END


async def logout_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Выход из аккаунта."""
    if get_current_user(context.user_data) is None:
        await update.message.reply_text("You are not logged in.")
        return
    logout_user(context.user_data)
    await update.message.reply_text("👋 Logged out. /login to sign in again.")


async def cancel(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Отмена входа или регистрации."""
    context.user_data.pop("signup", None)
    context.user_data.pop("login", None)
    await update.message.reply_text("❌ Cancelled.")
    return ConversationHandler.END


def register_handlers(application: Application) -> None:
    """Регистрация обработчиков."""
    text = filters.TEXT & ~filters.COMMAND

    # Один диалог на вход и регистрацию: новая команда прерывает начатую
    auth_handler = ConversationHandler(
        entry_points=[
            CommandHandler("signup", signup_start),
            CommandHandler("login", login_start),
            CallbackQueryHandler(signup_start, pattern="^start:signup$"),
            CallbackQueryHandler(login_start, pattern="^start:login$"),
        ],
        states={
            SIGNUP_USERNAME: [MessageHandler(text, signup_username)],
            SIGNUP_PASSWORD: [MessageHandler(text, signup_password)],
            SIGNUP_CONFIRM: [MessageHandler(text, signup_confirm)],
            LOGIN_USERNAME: [MessageHandler(text, login_username)],
            LOGIN_PASSWORD: [MessageHandler(text, login_password)],
        },
        fallbacks=[CommandHandler("cancel", cancel)],
        allow_reentry=True,
    )

    application.add_handler(auth_handler)
    application.add_handler(CommandHandler("logout", logout_command))
