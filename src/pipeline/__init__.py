"""Pipeline — derivation пароля дня ARRIS/CommScope.

derive_password = STAGE 0 (seed) → STAGE 1 (date-key) → STAGE 2 (mixing)
"""

from .date_range import DateRange, build_date_range
from .generator import (
    PasswordGenerator,
    derive_password,
    derive_password_of_the_day,
    derive_password_range,
    encode_seed,
)

__all__ = [
    "DateRange",
    "build_date_range",
    "PasswordGenerator",
    "derive_password",
    "derive_password_of_the_day",
    "derive_password_range",
    "encode_seed",
]
