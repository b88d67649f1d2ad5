"""Журнал записей веса: одна запись на день, новые сверху."""
import logging
from dataclasses import dataclass, replace
from typing import Iterable, Optional
from src.services.date_key import Clock, today_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeightEntry:
    """Запись веса за день.

    weight хранится как введённый текст: разбор в число откладывается
    до расчёта изменений и отображения.
    """

    date: str
    weight: str
    notes: str = ""


class WeightLedger:
    """Упорядоченный журнал записей веса.

    Порядок: новые записи дня вставляются в начало (индекс 0),
    изменение существующей записи не меняет её позицию.
    В журнале не бывает двух записей с одной датой.
    """

    def __init__(self, entries: Iterable[WeightEntry] = (), clock: Optional[Clock] = None) -> None:
        self._entries: list[WeightEntry] = []
        self._clock = clock
        for entry in entries:
            if self.find_index(entry.date) is not None:
                raise ValueError(f"Дубликат даты в журнале: {entry.date}")
            self._entries.append(entry)

    def __len__(self) -> int:
        return len(self._entries)

    def entries(self) -> tuple[WeightEntry, ...]:
        """Снимок записей (новые сверху); дальнейшие изменения журнала его не затрагивают."""
        return tuple(self._entries)

    def find_index(self, key: str) -> Optional[int]:
        """Индекс записи с указанной датой или None."""
        for index, entry in enumerate(self._entries):
            if entry.date == key:
                return index
        return None

    def upsert_today(self, weight: str, notes: str = "") -> WeightEntry:
        """Добавить вес за сегодня или обновить уже существующую запись.

        Args:
            weight: вес как текст (не проверяется)
            notes: заметка (может быть пустой)

        Returns:
            Актуальная запись за сегодня
        """
        key = today_key(self._clock)
        index = self.find_index(key)

        if index is not None:
            # Уже есть запись за сегодня - обновляем на месте
            entry = replace(self._entries[index], weight=weight, notes=notes)
            self._entries[index] = entry
            logger.debug(f"Updated entry for {key} at index {index}")
        else:
            entry = WeightEntry(date=key, weight=weight, notes=notes)
            self._entries.insert(0, entry)
            logger.debug(f"Created entry for {key}")

        return entry

    def update(self, index: int, weight: str, notes: str) -> bool:
        """Изменить запись по индексу.

        Индекс вне диапазона молча игнорируется (устаревшая ссылка из UI).

        Returns:
            True, если запись изменена
        """
        if not 0 <= index < len(self._entries):
            logger.debug(f"Ignoring update of stale index {index} (size {len(self._entries)})")
            return False

        self._entries[index] = replace(self._entries[index], weight=weight, notes=notes)
        return True

    def delete(self, index: int) -> bool:
        """Удалить запись по индексу. Индекс вне диапазона - без изменений.

        Returns:
            True, если запись удалена
        """
        if not 0 <= index < len(self._entries):
            logger.debug(f"Ignoring delete of stale index {index} (size {len(self._entries)})")
            return False

        del self._entries[index]
        return True
