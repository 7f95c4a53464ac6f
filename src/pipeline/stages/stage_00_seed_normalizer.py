"""STAGE 0: Seed validation и нормализация

Первый этап derivation:
- Default seed (MPSJKMDHAI) проходит без проверки длины и без изменений
- Seed должен состоять из ASCII символов
- Длина seed в [seed_min_length, seed_max_length] (по умолчанию [4, 8])
- Нормализованный seed: ровно 10 символов (pad_seed)

Seed не логируется, только его длина.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from src.core.config import DEFAULT_CONFIG, PotdConfig
from src.core.domain.errors import PotdError
from src.core.domain.seed import is_default_seed, pad_seed, validate_seed


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeedNormalizationResult:
    """Результат STAGE 0."""

    valid: bool
    error: Optional[PotdError]

    raw_length: int
    normalized_seed: str
    is_default_seed: bool

    # Детали
    details: str


class SeedNormalizer:
    """STAGE 0: Seed validation и нормализация.

    Порядок проверок:
    1. Default seed → возвращается без изменений
    2. Non-ASCII → InvalidSeedCharacters
    3. Длина вне [min, max] → InvalidSeedLength
    4. PASS → циклическое дополнение до 10 символов
    """

    def __init__(self, config: PotdConfig | None = None):
        """Инициализация STAGE 0.

        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or DEFAULT_CONFIG

    def evaluate(self, seed: str) -> SeedNormalizationResult:
        """Оценка STAGE 0.

        Args:
            seed: исходный seed

        Returns:
            SeedNormalizationResult с нормализованным seed или ошибкой
        """
        if is_default_seed(seed):
            return SeedNormalizationResult(
                valid=True,
                error=None,
                raw_length=len(seed),
                normalized_seed=seed,
                is_default_seed=True,
                details="PASS: default seed",
            )

        error = validate_seed(seed, self.config)
        if error is not None:
            logger.debug("seed rejected: %s", error)
            return SeedNormalizationResult(
                valid=False,
                error=error,
                raw_length=len(seed),
                normalized_seed="",
                is_default_seed=False,
                details=f"BLOCKED: {error.kind.value}",
            )

        normalized = pad_seed(seed)
        return SeedNormalizationResult(
            valid=True,
            error=None,
            raw_length=len(seed),
            normalized_seed=normalized,
            is_default_seed=False,
            details=f"PASS: padded {len(seed)} -> {len(normalized)} chars",
        )
