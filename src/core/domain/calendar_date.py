"""
CalendarDate — Модель календарной даты для derivation

Immutable Pydantic модель поверх datetime.date. Дата приходит строкой
YYYY-MM-DD; парсинг возвращает PotdResult, а не бросает исключение:
- InvalidDateFormat: строка не соответствует YYYY-MM-DD
- InvalidDateValue: формат верный, но такой даты нет (месяц 14, день 40)

Производные поля: weekday (Monday=0..Sunday=6) и two_digit_year.
"""

import re
from datetime import date, datetime, timedelta
from typing import Final

from pydantic import BaseModel, Field

from src.core.domain.constants import DATE_FORMAT
from src.core.domain.errors import invalid_date_format, invalid_date_value
from src.core.domain.result import PotdResult


# Только ASCII цифры: \d в Python принимает любые Unicode digits
DATE_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")


# =============================================================================
# MODEL
# =============================================================================


class CalendarDate(BaseModel):
    """
    Календарная дата (proleptic Gregorian).

    Immutable модель (frozen=True). Сравнивается и хэшируется по value.
    """

    value: date = Field(..., description="Дата")

    model_config = {"frozen": True}

    @property
    def year(self) -> int:
        return self.value.year

    @property
    def month(self) -> int:
        return self.value.month

    @property
    def day(self) -> int:
        return self.value.day

    @property
    def weekday(self) -> int:
        """Индекс дня недели: Monday=0 .. Sunday=6."""
        return self.value.weekday()

    @property
    def two_digit_year(self) -> int:
        """Последние две цифры 4-значного года (2021 → 21, 1960 → 60)."""
        return self.value.year % 100

    def isoformat(self) -> str:
        # date.strftime("%Y") на glibc не дополняет год нулями (year 1 → "1")
        return self.value.isoformat()

    def plus_days(self, days: int) -> "CalendarDate":
        return CalendarDate(value=self.value + timedelta(days=days))

    def days_until(self, other: "CalendarDate") -> int:
        """Число дней от self до other (отрицательное, если other раньше)."""
        return (other.value - self.value).days

    def __str__(self) -> str:
        return self.isoformat()


# =============================================================================
# PARSING
# =============================================================================


def parse_calendar_date(date_str: str) -> PotdResult[CalendarDate]:
    """
    Парсинг строки YYYY-MM-DD.

    Args:
        date_str: Дата в формате YYYY-MM-DD

    Returns:
        PotdResult с CalendarDate или ошибкой InvalidDateFormat / InvalidDateValue
    """
    if not isinstance(date_str, str) or not DATE_PATTERN.fullmatch(date_str):
        return PotdResult.failure(invalid_date_format(str(date_str)))

    try:
        parsed = datetime.strptime(date_str, DATE_FORMAT).date()
    except ValueError:
        return PotdResult.failure(invalid_date_value(date_str))

    return PotdResult.success(CalendarDate(value=parsed))
