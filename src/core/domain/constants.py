"""
Constants — фиксированные таблицы алгоритма password of the day

Все значения являются частью внешнего контракта с прошивкой модема
ARRIS/CommScope и должны совпадать побайтно:
- ALPHABET (36 символов, цифры перед буквами)
- WEEKDAY_TABLE (7x5, индекс: день недели, Monday=0)
- PERMUTATION_TABLE (6x10, индекс: checksum mod 6)
- DES_KEY / DES_IV для шифрования seed
- DEFAULT_SEED / DEFAULT_SEED_TOKEN

Таблицы хранятся как tuple, изменять их во время работы нельзя.
"""

from typing import Final


# =============================================================================
# АЛФАВИТ
# =============================================================================
ALPHABET: Final[str] = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Модуль всех арифметических шагов = размер алфавита
ALPHABET_SIZE: Final[int] = len(ALPHABET)

# Длина пароля и нормализованного seed
PASSWORD_LENGTH: Final[int] = 10
NORMALIZED_SEED_LENGTH: Final[int] = 10

# Длина date-key вектора (и число байтов seed в checksum stage)
DATE_KEY_LENGTH: Final[int] = 8


# =============================================================================
# ТАБЛИЦЫ
# =============================================================================

# Строки: Monday..Sunday, столбцы: позиции 0-4 date-key вектора
WEEKDAY_TABLE: Final[tuple[tuple[int, ...], ...]] = (
    (15, 15, 24, 20, 24),
    (13, 14, 27, 32, 10),
    (29, 14, 32, 29, 24),
    (23, 32, 24, 29, 29),
    (14, 29, 10, 21, 29),
    (34, 27, 16, 23, 30),
    (14, 22, 24, 17, 13),
)

# Строка выбирается по checksum mod 6; значения: индексы в 10-элементном векторе
PERMUTATION_TABLE: Final[tuple[tuple[int, ...], ...]] = (
    (0, 1, 2, 9, 3, 4, 5, 6, 7, 8),
    (1, 4, 3, 9, 0, 7, 8, 2, 5, 6),
    (7, 2, 8, 9, 4, 1, 6, 0, 3, 5),
    (6, 3, 5, 9, 1, 8, 2, 7, 4, 0),
    (4, 7, 0, 9, 5, 2, 3, 1, 8, 6),
    (5, 6, 1, 9, 8, 0, 4, 3, 2, 7),
)


# =============================================================================
# SEED
# =============================================================================

# Заводской seed ARRIS, обходит проверку длины
DEFAULT_SEED: Final[str] = "MPSJKMDHAI"

# DES-токен заводского seed. Seed длиннее одного DES блока, общий путь
# шифрования для него неизвестен, поэтому значение зашито как есть.
DEFAULT_SEED_TOKEN: Final[str] = "DB.B5.CB.D6.11.17.D6.EB"

SEED_MIN_LENGTH: Final[int] = 4
SEED_MAX_LENGTH: Final[int] = 8


# =============================================================================
# DES
# =============================================================================
DES_BLOCK_SIZE: Final[int] = 8

DES_KEY: Final[bytes] = bytes([20, 157, 64, 213, 193, 46, 85, 2])
DES_IV: Final[bytes] = bytes(DES_BLOCK_SIZE)

# Разделитель байтов в токене
TOKEN_SEPARATOR: Final[str] = "."


# =============================================================================
# ДАТЫ
# =============================================================================
DATE_FORMAT: Final[str] = "%Y-%m-%d"

# Максимальный диапазон generate_multiple (официальная утилита: не более года)
MAX_RANGE_DAYS: Final[int] = 365
