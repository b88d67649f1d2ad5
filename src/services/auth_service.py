"""Локальные аккаунты: создание и проверка входа.

Пароли хранятся в открытом виде: хеширование без миграции
сломает уже сохранённые аккаунты.
"""
import logging
from typing import Optional
from src.services.preference_store import AUTH_NAMESPACE, PreferenceStore

logger = logging.getLogger(__name__)

USER_KEY_PREFIX = "user_"


class AccountError(Exception):
    """Ошибка создания аккаунта с сообщением для пользователя."""

    message = "Could not create account"

    def __init__(self, message: Optional[str] = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class BlankInputError(AccountError):
    """Пустое имя или пароль."""

    message = "Please enter a username and password"


class UsernameTakenError(AccountError):
    """Имя уже занято (без учёта регистра)."""

    message = "That username is already in use. Please choose another one."


def normalize_username(username: str) -> str:
    """Нормализованное имя: без пробелов по краям, в нижнем регистре."""
    return username.strip().lower()


def user_key(username: str) -> str:
    """Ключ аккаунта в хранилище."""
    return f"{USER_KEY_PREFIX}{normalize_username(username)}"


class LocalCredentialStore:
    """Аккаунты на устройстве: нормализованное имя -> пароль."""

    def __init__(self, store: PreferenceStore) -> None:
        self._store = store

    def create_account(self, username: str, password: str) -> None:
        """Создать аккаунт.

        Raises:
            BlankInputError: имя или пароль пустые
            UsernameTakenError: имя уже занято
        """
        if not username.strip() or not password.strip():
            raise BlankInputError()

        key = user_key(username)
        if self._store.contains(AUTH_NAMESPACE, key):
            raise UsernameTakenError()

        self._store.put(AUTH_NAMESPACE, key, password)
        logger.info(f"Account created: {normalize_username(username)}")

    def validate_login(self, username: str, password: str) -> bool:
        """Проверить имя и пароль.

        Не различает «нет такого пользователя» и «неверный пароль».
        """
        stored = self._store.get(AUTH_NAMESPACE, user_key(username), None)
        ok = stored is not None and stored == password

        if ok:
            logger.info(f"Login succeeded: {normalize_username(username)}")
        else:
            logger.warning(f"Login failed: {normalize_username(username)}")
        return ok
