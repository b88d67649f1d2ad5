"""Общие фикстуры тестов."""
import os
from datetime import date, timedelta

# До импорта src.config: тесты не трогают файл боевой БД
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest


class FakeClock:
    """Часы с ручным переключением дня."""

    def __init__(self, today: date) -> None:
        self.today = today

    def __call__(self) -> date:
        return self.today

    def next_day(self) -> None:
        self.today += timedelta(days=1)


@pytest.fixture
def clock():
    return FakeClock(date(2024, 3, 10))
