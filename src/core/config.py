"""PotdConfig — конфигурация валидации входных данных.

Передаётся в stages и публичные операции явно (по умолчанию PotdConfig()).
Значения по умолчанию соответствуют официальной утилите ARRIS.
"""

from dataclasses import dataclass

from src.core.domain.constants import MAX_RANGE_DAYS, SEED_MAX_LENGTH, SEED_MIN_LENGTH


@dataclass(frozen=True)
class PotdConfig:
    """Конфигурация derivation.

    Ограничения:
    - seed_min_length >= 1
    - seed_min_length <= seed_max_length <= 8 (один DES блок)
    - max_range_days > 0
    """

    seed_min_length: int = SEED_MIN_LENGTH
    seed_max_length: int = SEED_MAX_LENGTH
    max_range_days: int = MAX_RANGE_DAYS

    def __post_init__(self) -> None:
        if self.seed_min_length < 1:
            raise ValueError(f"seed_min_length must be >= 1, got {self.seed_min_length}")
        if self.seed_max_length < self.seed_min_length:
            raise ValueError(
                f"seed_max_length {self.seed_max_length} must be >= "
                f"seed_min_length {self.seed_min_length}"
            )
        if self.seed_max_length > SEED_MAX_LENGTH:
            raise ValueError(
                f"seed_max_length {self.seed_max_length} exceeds one DES block "
                f"({SEED_MAX_LENGTH})"
            )
        if self.max_range_days <= 0:
            raise ValueError(f"max_range_days must be positive, got {self.max_range_days}")


DEFAULT_CONFIG = PotdConfig()
