"""Сервис сессии пользователя: текущий аккаунт, его журнал и бейдж."""
from typing import Optional
from src.services.auth_service import LocalCredentialStore, normalize_username
from src.services.preference_store import SqlPreferenceStore
from src.services.recent_change import RecentChangeDisplay
from src.services.weight_ledger import WeightLedger

# Ключи в context.user_data
CURRENT_USER_KEY = "current_user"
LEDGERS_KEY = "ledgers"
DISPLAYS_KEY = "change_displays"

_credential_store: Optional[LocalCredentialStore] = None


def get_credential_store() -> LocalCredentialStore:
    """Хранилище аккаунтов поверх таблицы preferences (создаётся один раз)."""
    global _credential_store
    if _credential_store is None:
        _credential_store = LocalCredentialStore(SqlPreferenceStore())
    return _credential_store


def set_credential_store(store: Optional[LocalCredentialStore]) -> None:
    """Подменить хранилище аккаунтов (тесты)."""
    global _credential_store
    _credential_store = store


def get_current_user(user_data: dict) -> Optional[str]:
    """Имя вошедшего пользователя или None."""
    return user_data.get(CURRENT_USER_KEY)


def login_user(user_data: dict, username: str) -> None:
    user_data[CURRENT_USER_KEY] = username.strip()


def logout_user(user_data: dict) -> None:
    """Выход. Журналы остаются в памяти до перезапуска."""
    user_data.pop(CURRENT_USER_KEY, None)


def get_ledger(user_data: dict, username: str) -> WeightLedger:
    """Журнал веса пользователя (только в памяти процесса).

    Args:
        user_data: context.user_data из Telegram
        username: имя аккаунта (в любом регистре)
    """
    ledgers = user_data.setdefault(LEDGERS_KEY, {})
    key = normalize_username(username)
    if key not in ledgers:
        ledgers[key] = WeightLedger()
    return ledgers[key]


def get_change_display(user_data: dict, username: str) -> RecentChangeDisplay:
    """Состояние бейджа изменения для пользователя."""
    displays = user_data.setdefault(DISPLAYS_KEY, {})
    key = normalize_username(username)
    if key not in displays:
        displays[key] = RecentChangeDisplay()
    return displays[key]
