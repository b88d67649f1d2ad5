"""Тесты журнала веса."""
import pytest
from src.services.recent_change import compute_recent_change
from src.services.weight_ledger import WeightEntry, WeightLedger


def test_first_weight_creates_entry(clock):
    """Первая запись дня появляется в начале журнала."""
    ledger = WeightLedger(clock=clock)

    entry = ledger.upsert_today("150", "")

    assert entry == WeightEntry("2024-03-10", "150", "")
    assert ledger.entries() == (entry,)


def test_same_day_submissions_collapse(clock):
    """Несколько записей за день - одна запись, побеждает последняя."""
    ledger = WeightLedger(clock=clock)

    for weight, notes in [("150", ""), ("149", "a"), ("148", "feeling good")]:
        ledger.upsert_today(weight, notes)

    assert len(ledger) == 1
    assert ledger.entries()[0] == WeightEntry("2024-03-10", "148", "feeling good")


def test_new_day_inserted_at_front(clock):
    """Записи новых дней идут в начало."""
    ledger = WeightLedger(clock=clock)
    for _ in range(3):
        ledger.upsert_today("150", "")
        clock.next_day()

    assert [e.date for e in ledger.entries()] == ["2024-03-12", "2024-03-11", "2024-03-10"]


def test_update_in_place_keeps_position(clock):
    """Обновление не переносит запись в начало."""
    ledger = WeightLedger(clock=clock)
    ledger.upsert_today("150", "")
    clock.next_day()
    ledger.upsert_today("149", "")

    assert ledger.update(1, "151", "fixed typo")

    entries = ledger.entries()
    assert entries[0] == WeightEntry("2024-03-11", "149", "")
    assert entries[1] == WeightEntry("2024-03-10", "151", "fixed typo")


def test_upsert_today_keeps_position_of_edited_today(clock):
    """Повторный ввод за сегодня обновляет запись там, где она есть."""
    ledger = WeightLedger(
        [WeightEntry("2024-03-11", "149"), WeightEntry("2024-03-10", "150")],
        clock=clock,
    )

    ledger.upsert_today("152", "later")

    assert [e.date for e in ledger.entries()] == ["2024-03-11", "2024-03-10"]
    assert ledger.entries()[1].weight == "152"


@pytest.mark.parametrize("index", [-1, 2, 10])
def test_out_of_range_update_and_delete_are_noops(clock, index):
    """Индекс вне диапазона не меняет журнал."""
    ledger = WeightLedger(clock=clock)
    ledger.upsert_today("150", "")
    clock.next_day()
    ledger.upsert_today("149", "")
    before = ledger.entries()

    assert ledger.update(index, "1", "x") is False
    assert ledger.delete(index) is False
    assert ledger.entries() == before


def test_delete_makes_date_vacant(clock):
    """После удаления сегодняшней записи новая запись создаётся заново."""
    ledger = WeightLedger(clock=clock)
    ledger.upsert_today("150", "")
    clock.next_day()
    ledger.upsert_today("149", "note")

    assert ledger.delete(0)
    assert [e.date for e in ledger.entries()] == ["2024-03-10"]

    ledger.upsert_today("148", "")
    assert ledger.entries()[0] == WeightEntry("2024-03-11", "148", "")
    assert len(ledger) == 2


def test_malformed_weight_is_stored(clock):
    """Нечисловой вес сохраняется как введён."""
    ledger = WeightLedger(clock=clock)

    ledger.upsert_today("one fifty", "")

    assert ledger.entries()[0].weight == "one fifty"


def test_entries_is_snapshot(clock):
    """Снимок не меняется при дальнейших изменениях журнала."""
    ledger = WeightLedger(clock=clock)
    ledger.upsert_today("150", "")
    snapshot = ledger.entries()

    ledger.upsert_today("140", "changed")
    ledger.delete(0)

    assert snapshot == (WeightEntry("2024-03-10", "150", ""),)
    assert ledger.entries() == ()


def test_duplicate_dates_rejected_on_construction():
    """Журнал не принимает две записи с одной датой."""
    with pytest.raises(ValueError):
        WeightLedger([WeightEntry("2024-03-10", "1"), WeightEntry("2024-03-10", "2")])


def test_find_index(clock):
    """Поиск записи по дате."""
    ledger = WeightLedger(clock=clock)
    ledger.upsert_today("150", "")

    assert ledger.find_index("2024-03-10") == 0
    assert ledger.find_index("2024-03-09") is None


def test_two_day_scenario(clock):
    """Сценарий: 150 → 148 в тот же день → 146 на следующий день."""
    ledger = WeightLedger(clock=clock)

    ledger.upsert_today("150", "")
    assert ledger.entries() == (WeightEntry("2024-03-10", "150", ""),)

    ledger.upsert_today("148", "feeling good")
    assert ledger.entries() == (WeightEntry("2024-03-10", "148", "feeling good"),)

    clock.next_day()
    ledger.upsert_today("146", "")
    entries = ledger.entries()
    assert entries[0] == WeightEntry("2024-03-11", "146", "")
    assert entries[1] == WeightEntry("2024-03-10", "148", "feeling good")

    assert compute_recent_change(entries) == -2
