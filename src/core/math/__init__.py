"""
Core math modules

Целочисленные примитивы mixing pipeline.
"""

from src.core.math.modular import (
    add_mod,
    add_vectors_mod,
    mod_positive,
    round_half_up,
    sum_mod,
)

__all__ = [
    "add_mod",
    "add_vectors_mod",
    "mod_positive",
    "round_half_up",
    "sum_mod",
]
