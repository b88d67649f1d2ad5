"""Клавиатуры для журнала веса."""
from typing import Sequence
from telegram import InlineKeyboardButton, InlineKeyboardMarkup
from src.services.weight_ledger import WeightEntry


def get_history_keyboard(entries: Sequence[WeightEntry]) -> InlineKeyboardMarkup:
    """Кнопки Edit/Delete для каждой записи истории."""
    keyboard = [
        [
            InlineKeyboardButton(f"✏️ {entry.date}", callback_data=f"weight:edit:{index}"),
            InlineKeyboardButton("❌", callback_data=f"weight:delete:{index}"),
        ]
        for index, entry in enumerate(entries)
    ]
    return InlineKeyboardMarkup(keyboard)


def get_auth_keyboard() -> InlineKeyboardMarkup:
    """Кнопки входа и регистрации для /start."""
    keyboard = [
        [InlineKeyboardButton("🔑 Login", callback_data="start:login")],
        [InlineKeyboardButton("📝 Create Account", callback_data="start:signup")],
    ]
    return InlineKeyboardMarkup(keyboard)
