"""Модель хранилища настроек (ключ-значение по пространствам имён)."""
from sqlalchemy import Column, String, JSON, UniqueConstraint
from src.models.base import BaseModel


class Preference(BaseModel):
    """Одна запись настроек: namespace + key -> value.

    Аналог SharedPreferences: пространство имён отделяет авторизацию
    от настроек интерфейса и оповещений.
    """

    __tablename__ = "preferences"
    __table_args__ = (UniqueConstraint("namespace", "key", name="uq_preferences_namespace_key"),)

    namespace = Column(String(50), nullable=False, index=True)
    key = Column(String(200), nullable=False)

    # Значение хранится как JSON (строка, bool, число)
    value = Column(JSON)

    def __repr__(self):
        return f"<Preference {self.namespace}:{self.key}>"
