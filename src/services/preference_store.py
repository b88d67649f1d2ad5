"""Хранилище настроек ключ-значение (аналог SharedPreferences)."""
import logging
from typing import Any, Optional
from sqlalchemy.exc import SQLAlchemyError
from src.database import get_db
from src.models import Preference

logger = logging.getLogger(__name__)

# Пространства имён
AUTH_NAMESPACE = "auth_prefs"
SETTINGS_NAMESPACE = "settings_prefs"  # dark_mode - только для UI
ALERTS_NAMESPACE = "weight_prefs"  # alerts_enabled, alert_message - экран SMS


class PreferenceStoreError(RuntimeError):
    """Не удалось прочитать или записать настройку."""


class PreferenceStore:
    """Контракт хранилища: get / put / contains по (namespace, key)."""

    def get(self, namespace: str, key: str, default: Any = None) -> Any:
        raise NotImplementedError

    def put(self, namespace: str, key: str, value: Any) -> None:
        raise NotImplementedError

    def contains(self, namespace: str, key: str) -> bool:
        raise NotImplementedError


class InMemoryPreferenceStore(PreferenceStore):
    """Хранилище в памяти процесса (тесты, превью)."""

    def __init__(self) -> None:
        self._data: dict[str, dict[str, Any]] = {}

    def get(self, namespace: str, key: str, default: Any = None) -> Any:
        return self._data.get(namespace, {}).get(key, default)

    def put(self, namespace: str, key: str, value: Any) -> None:
        self._data.setdefault(namespace, {})[key] = value

    def contains(self, namespace: str, key: str) -> bool:
        return key in self._data.get(namespace, {})


class SqlPreferenceStore(PreferenceStore):
    """Хранилище в таблице preferences через SQLAlchemy.

    Запись - upsert по (namespace, key). Ядро не перечитывает значение
    после записи: потеря последнего изменения при падении допустима.
    """

    def __init__(self, session_factory=None) -> None:
        self._session_factory = session_factory

    def _find(self, db, namespace: str, key: str) -> Optional[Preference]:
        return db.query(Preference).filter_by(namespace=namespace, key=key).first()

    def get(self, namespace: str, key: str, default: Any = None) -> Any:
        try:
            with get_db(self._session_factory) as db:
                row = self._find(db, namespace, key)
                return row.value if row is not None else default
        except SQLAlchemyError as e:
            logger.error(f"Failed to read preference {namespace}:{key}: {e}")
            raise PreferenceStoreError(f"Failed to read {namespace}:{key}") from e

    def put(self, namespace: str, key: str, value: Any) -> None:
        try:
            with get_db(self._session_factory) as db:
                row = self._find(db, namespace, key)
                if row is None:
                    db.add(Preference(namespace=namespace, key=key, value=value))
                else:
                    row.value = value
                db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Failed to write preference {namespace}:{key}: {e}")
            raise PreferenceStoreError(f"Failed to write {namespace}:{key}") from e

    def contains(self, namespace: str, key: str) -> bool:
        try:
            with get_db(self._session_factory) as db:
                return self._find(db, namespace, key) is not None
        except SQLAlchemyError as e:
            logger.error(f"Failed to read preference {namespace}:{key}: {e}")
            raise PreferenceStoreError(f"Failed to read {namespace}:{key}") from e
