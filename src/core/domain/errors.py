"""
Errors — типизированные ошибки валидации входных данных

Ошибки возвращаются как значения (PotdError внутри PotdResult), а не
бросаются. Исключение PotdValidationError используется только на границе
unwrap() и в CLI.
"""

from dataclasses import dataclass
from enum import Enum


# =============================================================================
# ENUMS
# =============================================================================


class ErrorKind(str, Enum):
    """Вид ошибки валидации.

    Все ошибки восстановимы и зависят только от входных данных.
    """

    INVALID_DATE_FORMAT = "InvalidDateFormat"
    INVALID_DATE_VALUE = "InvalidDateValue"
    INVALID_SEED_LENGTH = "InvalidSeedLength"
    INVALID_SEED_CHARACTERS = "InvalidSeedCharacters"
    INVALID_DATE_RANGE = "InvalidDateRange"


# =============================================================================
# ERROR VALUE
# =============================================================================


@dataclass(frozen=True)
class PotdError:
    """Ошибка валидации.

    Attributes:
        kind: вид ошибки
        message: человекочитаемое описание
        value: отклонённое значение (для seed только длина, не сам seed)
    """

    kind: ErrorKind
    message: str
    value: str = ""

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


class PotdValidationError(ValueError):
    """Исключение-обёртка над PotdError для unwrap() и CLI."""

    def __init__(self, error: PotdError):
        super().__init__(str(error))
        self.error = error

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind


# =============================================================================
# FACTORIES
# =============================================================================


def invalid_date_format(date_str: str) -> PotdError:
    return PotdError(
        kind=ErrorKind.INVALID_DATE_FORMAT,
        message=f"Invalid date format '{date_str}', must be YYYY-MM-DD",
        value=date_str,
    )


def invalid_date_value(date_str: str) -> PotdError:
    return PotdError(
        kind=ErrorKind.INVALID_DATE_VALUE,
        message=(
            f"Unable to parse date '{date_str}'. "
            "Year, month or day value out of range."
        ),
        value=date_str,
    )


def invalid_seed_length(length: int, min_length: int, max_length: int) -> PotdError:
    return PotdError(
        kind=ErrorKind.INVALID_SEED_LENGTH,
        message=(
            f"Seed should be >= {min_length} and <= {max_length} characters long "
            f"(got {length})."
        ),
        value=str(length),
    )


def invalid_seed_characters(length: int) -> PotdError:
    return PotdError(
        kind=ErrorKind.INVALID_SEED_CHARACTERS,
        message="Seed must contain only ASCII characters.",
        value=str(length),
    )


def invalid_date_range(message: str, date_begin: str, date_end: str) -> PotdError:
    return PotdError(
        kind=ErrorKind.INVALID_DATE_RANGE,
        message=message,
        value=f"{date_begin}..{date_end}",
    )
