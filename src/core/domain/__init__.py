"""
Domain models and value objects.

Contains fixed tables, error values, PotdResult, CalendarDate and
PasswordOfTheDay. Seed validation lives in src.core.domain.seed (depends on
src.core.config, so it is not re-exported here).
"""

from src.core.domain.calendar_date import CalendarDate, parse_calendar_date
from src.core.domain.constants import (
    ALPHABET,
    DEFAULT_SEED,
    DEFAULT_SEED_TOKEN,
    MAX_RANGE_DAYS,
    PASSWORD_LENGTH,
    PERMUTATION_TABLE,
    WEEKDAY_TABLE,
)
from src.core.domain.errors import ErrorKind, PotdError, PotdValidationError
from src.core.domain.password import PasswordOfTheDay
from src.core.domain.result import PotdResult

__all__ = [
    # Constants
    "ALPHABET",
    "DEFAULT_SEED",
    "DEFAULT_SEED_TOKEN",
    "MAX_RANGE_DAYS",
    "PASSWORD_LENGTH",
    "PERMUTATION_TABLE",
    "WEEKDAY_TABLE",
    # Errors
    "ErrorKind",
    "PotdError",
    "PotdValidationError",
    "PotdResult",
    # Models
    "CalendarDate",
    "parse_calendar_date",
    "PasswordOfTheDay",
]
