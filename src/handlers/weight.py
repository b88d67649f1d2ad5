"""Обработчики журнала веса: добавление, история, редактирование, удаление."""
import html
import logging
from typing import Optional, Sequence
from telegram import Update
from telegram.ext import (
    Application,
    CallbackQueryHandler,
    CommandHandler,
    ConversationHandler,
    MessageHandler,
    filters,
    ContextTypes,
)
from src.keyboards.weight_menu import get_history_keyboard
from src.services.recent_change import ChangeBadge, build_badge, WEIGHT_UNIT
from src.services.user_service import get_change_display, get_current_user, get_ledger
from src.services.weight_ledger import WeightEntry

logger = logging.getLogger(__name__)

# Состояние редактирования
WAITING_EDIT_INPUT = 1

LOGIN_REQUIRED = "🔒 Please log in first: /login"


def parse_weight_text(text: str) -> tuple[str, str]:
    """Разделяет ввод «<вес> [заметка]» на вес и заметку.

    Вес не проверяется: нечисловой текст сохраняется как есть.
    """
    parts = text.strip().split(maxsplit=1)
    if not parts:
        return "", ""
    weight = parts[0]
    notes = parts[1].strip() if len(parts) > 1 else ""
    return weight, notes


def format_badge(badge: ChangeBadge) -> str:
    """Текст бейджа для сообщения."""
    return f"⚖️ <b>{badge.label}</b>\n{badge.message}"


def format_history(entries: Sequence[WeightEntry]) -> str:
    """История записей (новые сверху)."""
    if not entries:
        return "📖 <b>Weight History</b>\n\nNo entries yet. Log one: /weight 150"

    lines = ["📖 <b>Weight History</b>\n"]
    for index, entry in enumerate(entries, start=1):
        line = f"{index}. {entry.date} - {html.escape(entry.weight)} {WEIGHT_UNIT}"
        if entry.notes.strip():
            line += f"\n    📝 {html.escape(entry.notes)}"
        lines.append(line)
    return "\n".join(lines)


def _session(context: ContextTypes.DEFAULT_TYPE) -> Optional[str]:
    return get_current_user(context.user_data)


async def weight_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """/weight <вес> [заметка] - записать вес за сегодня."""
    username = _session(context)
    if username is None:
        await update.message.reply_text(LOGIN_REQUIRED)
        return

    weight, notes = parse_weight_text(" ".join(context.args or []))
    if not weight:
        await update.message.reply_text("Usage: /weight <lbs> [note]\nExample: /weight 150.4 after run")
        return

    ledger = get_ledger(context.user_data, username)
    display = get_change_display(context.user_data, username)

    display.note_add(ledger.entries(), weight)
    entry = ledger.upsert_today(weight, notes)
    logger.info(f"Weight logged for {username}: {entry.date}")

    badge = build_badge(display.current(ledger.entries()))
    await update.message.reply_text(
        f"✅ Saved {entry.date}: {html.escape(entry.weight)} {WEIGHT_UNIT}\n\n{format_badge(badge)}",
        parse_mode="HTML",
    )


async def history_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """/history - история с кнопками редактирования и удаления."""
    username = _session(context)
    if username is None:
        await update.message.reply_text(LOGIN_REQUIRED)
        return

    entries = get_ledger(context.user_data, username).entries()
    await update.message.reply_text(
        format_history(entries),
        reply_markup=get_history_keyboard(entries) if entries else None,
        parse_mode="HTML",
    )


async def change_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """/change - пересчитать изменение по журналу."""
    username = _session(context)
    if username is None:
        await update.message.reply_text(LOGIN_REQUIRED)
        return

    entries = get_ledger(context.user_data, username).entries()
    change = get_change_display(context.user_data, username).refresh(entries)
    await update.message.reply_text(format_badge(build_badge(change)), parse_mode="HTML")


async def delete_callback(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Кнопка удаления записи."""
    query = update.callback_query
    await query.answer()

    username = _session(context)
    if username is None:
        await query.message.reply_text(LOGIN_REQUIRED)
        return

    index = int(query.data.split(":")[2])
    ledger = get_ledger(context.user_data, username)

    if not ledger.delete(index):
        await query.message.reply_text("⚠️ Entry not found. Refresh: /history")
        return
    get_change_display(context.user_data, username).clear()

    entries = ledger.entries()
    await query.edit_message_text(
        format_history(entries),
        reply_markup=get_history_keyboard(entries) if entries else None,
        parse_mode="HTML",
    )


async def edit_start_callback(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Начало редактирования записи."""
    query = update.callback_query
    await query.answer()

    username = _session(context)
    if username is None:
        await query.message.reply_text(LOGIN_REQUIRED)
        return ConversationHandler.END

    index = int(query.data.split(":")[2])
    entries = get_ledger(context.user_data, username).entries()
    if not 0 <= index < len(entries):
        await query.message.reply_text("⚠️ Entry not found. Refresh: /history")
        return ConversationHandler.END

    context.user_data["editing_index"] = index
    entry = entries[index]
    await query.message.reply_text(
        f"✏️ Editing {entry.date} ({entry.weight} {WEIGHT_UNIT}).\n\n"
        "Send the new weight and an optional note, e.g. «148.5 felt great».\n"
        "/cancel to keep it unchanged."
    )
    return WAITING_EDIT_INPUT


async def edit_input_handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Сохранение отредактированной записи."""
    username = _session(context)
    index = context.user_data.pop("editing_index", None)
    if username is None or index is None:
        await update.message.reply_text(LOGIN_REQUIRED)
        return ConversationHandler.END

    weight, notes = parse_weight_text(update.message.text)
    if not weight:
        context.user_data["editing_index"] = index
        await update.message.reply_text("Send the new weight, e.g. «148.5».")
        return WAITING_EDIT_INPUT

    ledger = get_ledger(context.user_data, username)
    display = get_change_display(context.user_data, username)

    display.note_edit(ledger.entries(), index, weight)
    if not ledger.update(index, weight, notes):
        await update.message.reply_text("⚠️ Entry not found. Refresh: /history")
        return ConversationHandler.END

    badge = build_badge(display.current(ledger.entries()))
    await update.message.reply_text(f"✅ Entry updated.\n\n{format_badge(badge)}", parse_mode="HTML")
    return ConversationHandler.END


async def edit_cancel(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    context.user_data.pop("editing_index", None)
    await update.message.reply_text("❌ Edit cancelled.")
    return ConversationHandler.END


def register_handlers(application: Application) -> None:
    """Регистрация обработчиков."""
    edit_handler = ConversationHandler(
        entry_points=[CallbackQueryHandler(edit_start_callback, pattern=r"^weight:edit:\d+$")],
        states={
            WAITING_EDIT_INPUT: [MessageHandler(filters.TEXT & ~filters.COMMAND, edit_input_handler)],
        },
        fallbacks=[CommandHandler("cancel", edit_cancel)],
    )

    application.add_handler(edit_handler)
    application.add_handler(CommandHandler("weight", weight_command))
    application.add_handler(CommandHandler("history", history_command))
    application.add_handler(CommandHandler("change", change_command))
    application.add_handler(CallbackQueryHandler(delete_callback, pattern=r"^weight:delete:\d+$"))
