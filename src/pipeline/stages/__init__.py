"""Stages — этапы derivation пароля дня.

- STAGE 0: Seed validation и нормализация
- STAGE 1: Date-key вектор
- STAGE 2: Mixing pipeline (checksum → permutation → offset)
"""

from .stage_00_seed_normalizer import SeedNormalizer, SeedNormalizationResult
from .stage_01_date_key import DateKeyDeriver, DateKeyResult
from .stage_02_mixing import MixingPipeline, MixingResult

__all__ = [
    "SeedNormalizer",
    "SeedNormalizationResult",
    "DateKeyDeriver",
    "DateKeyResult",
    "MixingPipeline",
    "MixingResult",
]
