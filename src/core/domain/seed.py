"""
Seed — проверка и дополнение seed

Seed: ASCII строка длиной [4, 8] либо DEFAULT_SEED (10 символов),
который проходит без проверки длины.

Нормализованный seed имеет ровно 10 символов, seed циклически повторяется
с начала (ABCD → ABCDABCDAB, 1122AABB → 1122AABB11).
"""

from typing import Optional

from src.core.config import DEFAULT_CONFIG, PotdConfig
from src.core.domain.constants import DEFAULT_SEED, NORMALIZED_SEED_LENGTH
from src.core.domain.errors import PotdError, invalid_seed_characters, invalid_seed_length


def is_default_seed(seed: str) -> bool:
    return seed == DEFAULT_SEED


def validate_seed(seed: str, config: PotdConfig = DEFAULT_CONFIG) -> Optional[PotdError]:
    """
    Проверка сырого seed.

    Args:
        seed: Исходный seed
        config: Ограничения длины

    Returns:
        None если seed валиден, иначе PotdError
        (InvalidSeedCharacters или InvalidSeedLength)
    """
    if is_default_seed(seed):
        return None

    if not seed.isascii():
        return invalid_seed_characters(len(seed))

    if len(seed) < config.seed_min_length or len(seed) > config.seed_max_length:
        return invalid_seed_length(len(seed), config.seed_min_length, config.seed_max_length)

    return None


def pad_seed(seed: str, length: int = NORMALIZED_SEED_LENGTH) -> str:
    """
    Циклическое дополнение seed его начальными символами.

    Args:
        seed: Непустой seed
        length: Целевая длина

    Returns:
        Строка длины length

    Raises:
        ValueError: Если seed пустой
    """
    if not seed:
        raise ValueError("seed must not be empty")

    repeats = -(-length // len(seed))
    return (seed * repeats)[:length]
