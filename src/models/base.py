"""Базовые классы для моделей SQLAlchemy."""
from sqlalchemy import Column, Integer, DateTime
from sqlalchemy.sql import func
from src.database import Base


class TimestampMixin:
    """Время создания и последнего изменения строки."""

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    # Обновляется при каждой перезаписи настройки
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())


class BaseModel(Base, TimestampMixin):
    """Базовая модель: суррогатный id + временные метки."""

    __abstract__ = True

    id = Column(Integer, primary_key=True, index=True)
