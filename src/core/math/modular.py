"""
Modular — арифметические примитивы mixing pipeline

Модуль содержит целочисленные операции, используемые на всех этапах
derivation:
- Модуль с нормализацией в [0, m) для отрицательных разностей
- Округление half-up через float (checksum stage)
- Поэлементные операции над векторами по модулю 36

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат mod_positive всегда в [0, m)
2. round_half_up проходит через float-ветку floor/ceil ровно так, как это
   делает прошивка, даже когда результат заведомо целый
3. Все операции детерминированы
"""

import math
from typing import Sequence

from src.core.domain.constants import ALPHABET_SIZE


# =============================================================================
# МОДУЛЬ
# =============================================================================


def mod_positive(value: int, modulus: int = ALPHABET_SIZE) -> int:
    """
    Модуль с нормализацией отрицательного значения.

    Отрицательное значение сначала сдвигается на modulus, затем берётся
    остаток: ((v + m) % m). Для v >= -m это совпадает с математическим mod.

    Args:
        value: Значение
        modulus: Модуль (по умолчанию 36)

    Returns:
        Значение в [0, modulus)

    Raises:
        ValueError: Если modulus <= 0
    """
    if modulus <= 0:
        raise ValueError(f"modulus must be positive, got {modulus}")

    if value < 0:
        return (value + modulus) % modulus
    return value % modulus


def add_mod(a: int, b: int, modulus: int = ALPHABET_SIZE) -> int:
    """(a + b) mod modulus."""
    return (a + b) % modulus


def sum_mod(values: Sequence[int], modulus: int = ALPHABET_SIZE) -> int:
    """Сумма элементов по модулю."""
    return sum(values) % modulus


def add_vectors_mod(
    left: Sequence[int],
    right: Sequence[int],
    length: int,
    modulus: int = ALPHABET_SIZE,
) -> list[int]:
    """
    Поэлементная сумма первых length элементов двух векторов по модулю.

    Args:
        left: Первый вектор (не короче length)
        right: Второй вектор (не короче length)
        length: Сколько элементов складывать
        modulus: Модуль

    Returns:
        Список длины length

    Raises:
        ValueError: Если один из векторов короче length
    """
    if len(left) < length or len(right) < length:
        raise ValueError(
            f"vectors too short: len(left)={len(left)}, len(right)={len(right)}, "
            f"required {length}"
        )
    return [add_mod(left[i], right[i], modulus) for i in range(length)]


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_half_up(value: float) -> int:
    """
    Округление half-up через floor/ceil.

    Дробная часть < 0.5 → floor, иначе → ceil. Для неотрицательных целых
    (квадрат целого) результат совпадает с входом, но ветка сохраняется
    как есть: пароль должен совпадать с прошивкой побитно.

    Args:
        value: Значение (float)

    Returns:
        Округлённое целое

    Examples:
        >>> round_half_up(25.0)
        25
        >>> round_half_up(2.5)
        3
        >>> round_half_up(2.49)
        2
    """
    if value - math.floor(value) < 0.5:
        return int(math.floor(value))
    return int(math.ceil(value))
