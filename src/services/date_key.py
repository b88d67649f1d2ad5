"""Ключ дня для записей веса (формат YYYY-MM-DD)."""
from datetime import date, datetime
from typing import Callable, Optional

DATE_FORMAT = "%Y-%m-%d"

Clock = Callable[[], date]


def date_key(day: date) -> str:
    """Канонический ключ для календарного дня."""
    return day.strftime(DATE_FORMAT)


def today_key(clock: Optional[Clock] = None) -> str:
    """Ключ сегодняшнего дня.

    Args:
        clock: функция, возвращающая текущую дату (в тестах - подменяется)
    """
    return date_key((clock or date.today)())


def parse_date_key(key: str) -> date:
    """Обратное преобразование ключа в дату.

    Raises:
        ValueError: если строка не в формате YYYY-MM-DD
    """
    parsed = datetime.strptime(key, DATE_FORMAT).date()
    # strptime принимает "2024-1-5", но ключ должен быть каноническим
    if date_key(parsed) != key:
        raise ValueError(f"Не канонический ключ даты: {key!r}")
    return parsed
