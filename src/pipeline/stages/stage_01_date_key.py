"""STAGE 1: Date-key вектор

Преобразует валидную дату в 8 целых чисел:
- [0..4]: строка WEEKDAY_TABLE по дню недели (Monday=0)
- [5]:    день месяца
- [6]:    ((yy + month) - day) mod 36, с +36 для отрицательной разности
- [7]:    (((3 + ((yy + month) mod 12)) * day) mod 37) mod 36

Ошибок нет: дата уже проверена parse_calendar_date().
"""

from dataclasses import dataclass

from src.core.domain.calendar_date import CalendarDate
from src.core.domain.constants import WEEKDAY_TABLE
from src.core.math.modular import mod_positive


@dataclass(frozen=True)
class DateKeyResult:
    """Результат STAGE 1."""

    date_key: tuple[int, ...]

    # Входные параметры для диагностики
    weekday: int
    two_digit_year: int
    month: int
    day: int


class DateKeyDeriver:
    """STAGE 1: дата → date-key вектор (stateless)."""

    def evaluate(self, calendar_date: CalendarDate) -> DateKeyResult:
        """Вычисление date-key вектора.

        Args:
            calendar_date: валидная дата

        Returns:
            DateKeyResult с 8-элементным вектором
        """
        weekday = calendar_date.weekday
        yy = calendar_date.two_digit_year
        month = calendar_date.month
        day = calendar_date.day

        year_month = yy + month

        date_key = (
            *WEEKDAY_TABLE[weekday],
            day,
            mod_positive(year_month - day),
            (((3 + (year_month % 12)) * day) % 37) % 36,
        )

        return DateKeyResult(
            date_key=date_key,
            weekday=weekday,
            two_digit_year=yy,
            month=month,
            day=day,
        )
