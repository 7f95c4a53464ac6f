"""STAGE 2: Mixing pipeline

Три последовательных шага над date-key вектором и нормализованным seed:

1. Checksum:
   sum[i] = (date_key[i] + ord(seed[i])) mod 36, i in [0, 8)
   sum[8] = (sum[0] + ... + sum[7]) mod 36        (checksum)
   sum[9] = round_half_up(float((checksum mod 6) ** 2))
2. Permutation:
   selector = checksum mod 6
   mixed[i] = sum[PERMUTATION_TABLE[selector][i]]
3. Offset:
   final[i] = (ord(seed[i]) + mixed[i]) mod 36
   password[i] = ALPHABET[final[i]]

Порядок шагов и float-ветка округления должны совпадать с прошивкой.
"""

import logging
from dataclasses import dataclass

from src.core.domain.constants import (
    ALPHABET,
    ALPHABET_SIZE,
    DATE_KEY_LENGTH,
    NORMALIZED_SEED_LENGTH,
    PASSWORD_LENGTH,
    PERMUTATION_TABLE,
)
from src.core.math.modular import add_vectors_mod, round_half_up, sum_mod


logger = logging.getLogger(__name__)


# Число строк PERMUTATION_TABLE
SELECTOR_MODULUS = len(PERMUTATION_TABLE)


@dataclass(frozen=True)
class MixingResult:
    """Результат STAGE 2."""

    password: str

    # Промежуточные векторы для диагностики
    checksum_vector: tuple[int, ...]
    checksum: int
    selector: int
    mixed_vector: tuple[int, ...]
    final_vector: tuple[int, ...]


def seed_codes(normalized_seed: str) -> list[int]:
    """Коды символов нормализованного seed (без mod 36)."""
    return [ord(ch) for ch in normalized_seed]


def checksum_stage(date_key: tuple[int, ...], codes: list[int]) -> list[int]:
    """Шаг 1: 8 сумм + checksum + квадрат остатка checksum mod 6.

    Args:
        date_key: 8-элементный date-key вектор
        codes: коды символов нормализованного seed

    Returns:
        10-элементный вектор
    """
    sums = add_vectors_mod(date_key, codes, DATE_KEY_LENGTH)
    checksum = sum_mod(sums)
    sums.append(checksum)

    # Квадрат целого всегда целый, округление ничего не меняет
    squared = float((checksum % SELECTOR_MODULUS) ** 2)
    sums.append(round_half_up(squared))
    return sums


def permutation_stage(checksum_vector: list[int]) -> tuple[int, list[int]]:
    """Шаг 2: перестановка по строке таблицы, выбранной checksum.

    Returns:
        (selector, переставленный вектор)
    """
    selector = checksum_vector[DATE_KEY_LENGTH] % SELECTOR_MODULUS
    row = PERMUTATION_TABLE[selector]
    return selector, [checksum_vector[row[i]] for i in range(PASSWORD_LENGTH)]


def offset_stage(codes: list[int], mixed: list[int]) -> list[int]:
    """Шаг 3: (код символа seed + mixed[i]) mod 36."""
    return add_vectors_mod(codes, mixed, PASSWORD_LENGTH, ALPHABET_SIZE)


class MixingPipeline:
    """STAGE 2: checksum → permutation → offset → пароль (stateless)."""

    def evaluate(self, date_key: tuple[int, ...], normalized_seed: str) -> MixingResult:
        """Вычисление пароля.

        Args:
            date_key: результат STAGE 1
            normalized_seed: результат STAGE 0 (ровно 10 символов)

        Returns:
            MixingResult с паролем и промежуточными векторами

        Raises:
            ValueError: Если seed не нормализован или date_key неверной длины
        """
        if len(normalized_seed) != NORMALIZED_SEED_LENGTH:
            raise ValueError(
                f"normalized seed must be {NORMALIZED_SEED_LENGTH} chars, "
                f"got {len(normalized_seed)}"
            )
        if len(date_key) != DATE_KEY_LENGTH:
            raise ValueError(
                f"date key must have {DATE_KEY_LENGTH} values, got {len(date_key)}"
            )

        codes = seed_codes(normalized_seed)
        checksum_vector = checksum_stage(date_key, codes)
        selector, mixed = permutation_stage(checksum_vector)
        final = offset_stage(codes, mixed)

        password = "".join(ALPHABET[v] for v in final)
        logger.debug(
            "mixing: checksum=%d selector=%d", checksum_vector[DATE_KEY_LENGTH], selector
        )

        return MixingResult(
            password=password,
            checksum_vector=tuple(checksum_vector),
            checksum=checksum_vector[DATE_KEY_LENGTH],
            selector=selector,
            mixed_vector=tuple(mixed),
            final_vector=tuple(final),
        )
