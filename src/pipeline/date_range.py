"""DateRange — диапазон дат для generate_multiple.

Валидация:
- end строго позже begin (одинаковые даты недопустимы)
- end - begin <= max_range_days (по умолчанию 365)

DateRange: ленивая, перезапускаемая, конечная последовательность дат
от begin до end включительно. Каждый вызов __iter__ начинает заново.
"""

from dataclasses import dataclass
from typing import Iterator

from src.core.config import DEFAULT_CONFIG, PotdConfig
from src.core.domain.calendar_date import CalendarDate
from src.core.domain.errors import invalid_date_range
from src.core.domain.result import PotdResult


@dataclass(frozen=True)
class DateRange:
    """Включительный диапазон дат [begin, end]."""

    begin: CalendarDate
    end: CalendarDate

    def __iter__(self) -> Iterator[CalendarDate]:
        # Не шагаем за end: end может быть date.max (9999-12-31)
        for offset in range(len(self)):
            yield self.begin.plus_days(offset)

    def __len__(self) -> int:
        return max(self.begin.days_until(self.end) + 1, 0)

    @property
    def span_days(self) -> int:
        return self.begin.days_until(self.end)


def build_date_range(
    begin: CalendarDate,
    end: CalendarDate,
    config: PotdConfig = DEFAULT_CONFIG,
) -> PotdResult[DateRange]:
    """Валидация и построение диапазона.

    Args:
        begin: первая дата
        end: последняя дата (включительно)
        config: max_range_days

    Returns:
        PotdResult с DateRange или ошибкой InvalidDateRange
    """
    span = begin.days_until(end)

    if span <= 0:
        return PotdResult.failure(
            invalid_date_range(
                "Invalid date range. Beginning date must occur before end date, "
                "and the values cannot be the same.",
                begin.isoformat(),
                end.isoformat(),
            )
        )

    if span > config.max_range_days:
        return PotdResult.failure(
            invalid_date_range(
                f"Invalid date range. Span of {span} days exceeds "
                f"{config.max_range_days} days.",
                begin.isoformat(),
                end.isoformat(),
            )
        )

    return PotdResult.success(DateRange(begin=begin, end=end))
