"""Модели базы данных."""
from src.models.base import BaseModel, TimestampMixin
from src.models.preference import Preference

__all__ = [
    "BaseModel",
    "TimestampMixin",
    "Preference",
]
