"""Обработчики команд бота."""
from src.handlers.start import register_handlers as register_start_handlers
from src.handlers.auth import register_handlers as register_auth_handlers
from src.handlers.weight import register_handlers as register_weight_handlers

__all__ = [
    "register_start_handlers",
    "register_auth_handlers",
    "register_weight_handlers",
]
