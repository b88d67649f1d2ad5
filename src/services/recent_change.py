"""Расчёт недавнего изменения веса и бейдж для отображения."""
import enum
import math
from dataclasses import dataclass
from typing import Optional, Sequence
from src.services.weight_ledger import WeightEntry

WEIGHT_UNIT = "lbs"


class ChangeCategory(str, enum.Enum):
    """Категория отображения изменения."""
    LOSS = "loss"
    GAIN = "gain"
    NO_CHANGE = "no_change"
    NOT_ENOUGH_DATA = "not_enough_data"


@dataclass(frozen=True)
class ChangeBadge:
    """Текст бейджа изменения веса."""

    category: ChangeCategory
    label: str
    message: str


def parse_weight(text: Optional[str]) -> Optional[float]:
    """Разобрать вес из текста. Запятая допускается как десятичный разделитель.

    Returns:
        Число или None, если текст не является конечным числом
    """
    if text is None:
        return None
    cleaned = text.strip().replace(",", ".")
    if not cleaned:
        return None
    try:
        value = float(cleaned)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def _parsed_weights(entries: Sequence[WeightEntry]):
    """Числовые веса записей от новых к старым, без неразобранных."""
    for entry in entries:
        value = parse_weight(entry.weight)
        if value is not None:
            yield value


def compute_recent_change(entries: Sequence[WeightEntry]) -> Optional[float]:
    """Изменение между двумя последними записями с числовым весом.

    Записи идут от новых к старым (как в журнале). Неразобранные
    записи пропускаются.

    Returns:
        latest - previous или None, если таких записей меньше двух
    """
    weights = _parsed_weights(entries)
    latest = next(weights, None)
    previous = next(weights, None)
    if latest is None or previous is None:
        return None
    return latest - previous


def classify(change: Optional[float]) -> ChangeCategory:
    if change is None:
        return ChangeCategory.NOT_ENOUGH_DATA
    if change < 0:
        return ChangeCategory.LOSS
    if change > 0:
        return ChangeCategory.GAIN
    return ChangeCategory.NO_CHANGE


def build_badge(change: Optional[float]) -> ChangeBadge:
    """Сформировать бейдж для значения изменения."""
    category = classify(change)

    if category is ChangeCategory.NOT_ENOUGH_DATA:
        return ChangeBadge(
            category,
            "Keep logging",
            "Log at least one more weight to see your recent change.",
        )
    if category is ChangeCategory.LOSS:
        return ChangeBadge(
            category,
            f"-{abs(change):.1f} {WEIGHT_UNIT}",
            "Lost since your last entry. Nice work!",
        )
    if category is ChangeCategory.GAIN:
        return ChangeBadge(
            category,
            f"+{change:.1f} {WEIGHT_UNIT}",
            "Gained since your last entry. Stay consistent.",
        )
    return ChangeBadge(category, f"0.0 {WEIGHT_UNIT}", "No change since your last entry.")


def _delta(new_value: Optional[float], previous: Optional[float]) -> Optional[float]:
    if new_value is None or previous is None:
        return None
    return new_value - previous


class RecentChangeDisplay:
    """Отображаемое изменение: override после действия пользователя или расчёт по журналу.

    Override - мгновенная обратная связь после добавления/редактирования.
    Не сохраняется и не принадлежит журналу.
    """

    def __init__(self) -> None:
        self.override: Optional[float] = None

    def note_add(self, entries_before: Sequence[WeightEntry], new_weight: str) -> None:
        """Запомнить изменение относительно последней записи до добавления.

        Если одно из значений не число - override сбрасывается.
        """
        # Повторный ввод за сегодня сравнивается с прежним значением за сегодня,
        # а не со вчерашним: /change при этом покажет разницу со вчера.
        previous = next(_parsed_weights(entries_before), None)
        new_value = parse_weight(new_weight)
        self.override = _delta(new_value, previous)

    def note_edit(self, entries_before: Sequence[WeightEntry], index: int, new_weight: str) -> None:
        """Запомнить изменение относительно веса записи до редактирования."""
        if not 0 <= index < len(entries_before):
            self.override = None
            return
        previous = parse_weight(entries_before[index].weight)
        new_value = parse_weight(new_weight)
        self.override = _delta(new_value, previous)

    def clear(self) -> None:
        self.override = None

    def current(self, entries: Sequence[WeightEntry]) -> Optional[float]:
        if self.override is not None:
            return self.override
        return compute_recent_change(entries)

    def refresh(self, entries: Sequence[WeightEntry]) -> Optional[float]:
        """Сбросить override и пересчитать по журналу."""
        self.clear()
        return compute_recent_change(entries)
