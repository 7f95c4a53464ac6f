"""Generator — публичные операции password of the day.

- derive_password(date, seed) → пароль дня
- derive_password_range(date_begin, date_end, seed) → {дата: пароль}
- derive_password_of_the_day(date, seed) → PasswordOfTheDay
- encode_seed(seed) → DES-токен для конфигурации модема

Вся валидация выполняется до начала derivation; при ошибке частичные
результаты не возвращаются. Порядок проверок в derive_password_range:
begin → end → диапазон → seed.
"""

import logging

from src.cipher.seed_cipher import SeedCipher
from src.core.config import DEFAULT_CONFIG, PotdConfig
from src.core.domain.calendar_date import CalendarDate, parse_calendar_date
from src.core.domain.constants import DEFAULT_SEED
from src.core.domain.password import PasswordOfTheDay
from src.core.domain.result import PotdResult
from src.pipeline.date_range import build_date_range
from src.pipeline.stages.stage_00_seed_normalizer import SeedNormalizer
from src.pipeline.stages.stage_01_date_key import DateKeyDeriver
from src.pipeline.stages.stage_02_mixing import MixingPipeline


logger = logging.getLogger(__name__)


class PasswordGenerator:
    """Цепочка STAGE 0 → STAGE 1 → STAGE 2."""

    def __init__(self, config: PotdConfig | None = None):
        self.config = config or DEFAULT_CONFIG
        self.seed_normalizer = SeedNormalizer(self.config)
        self.date_key_deriver = DateKeyDeriver()
        self.mixing_pipeline = MixingPipeline()

    def derive(self, calendar_date: CalendarDate, normalized_seed: str) -> str:
        """Пароль для уже провалидированных даты и нормализованного seed."""
        date_key = self.date_key_deriver.evaluate(calendar_date).date_key
        return self.mixing_pipeline.evaluate(date_key, normalized_seed).password

    def generate(self, date: str, seed: str = DEFAULT_SEED) -> PotdResult[str]:
        parsed = parse_calendar_date(date)
        if not parsed.ok:
            logger.debug("date rejected: %s", parsed.error)
            return PotdResult.failure(parsed.error)

        seed_result = self.seed_normalizer.evaluate(seed)
        if not seed_result.valid:
            return PotdResult.failure(seed_result.error)

        password = self.derive(parsed.unwrap(), seed_result.normalized_seed)
        logger.debug("derived password for %s (seed length %d)", date, seed_result.raw_length)
        return PotdResult.success(password)

    def generate_multiple(
        self, date_begin: str, date_end: str, seed: str = DEFAULT_SEED
    ) -> PotdResult[dict[str, str]]:
        begin = parse_calendar_date(date_begin)
        if not begin.ok:
            return PotdResult.failure(begin.error)

        end = parse_calendar_date(date_end)
        if not end.ok:
            return PotdResult.failure(end.error)

        date_range = build_date_range(begin.unwrap(), end.unwrap(), self.config)
        if not date_range.ok:
            logger.debug("range rejected: %s", date_range.error)
            return PotdResult.failure(date_range.error)

        # Seed нормализуется один раз на весь диапазон
        seed_result = self.seed_normalizer.evaluate(seed)
        if not seed_result.valid:
            return PotdResult.failure(seed_result.error)

        passwords = {
            day.isoformat(): self.derive(day, seed_result.normalized_seed)
            for day in date_range.unwrap()
        }
        logger.debug("derived %d passwords for %s..%s", len(passwords), date_begin, date_end)
        return PotdResult.success(passwords)


# =============================================================================
# PUBLIC API
# =============================================================================


def derive_password(
    date: str, seed: str = DEFAULT_SEED, config: PotdConfig | None = None
) -> PotdResult[str]:
    """
    Пароль дня для даты и seed.

    Args:
        date: Дата YYYY-MM-DD
        seed: 4-8 ASCII символов или DEFAULT_SEED
        config: Конфигурация (опционально)

    Returns:
        PotdResult с 10-символьным паролем 0-9A-Z или ошибкой

    Examples:
        >>> derive_password("2021-12-25").unwrap()
        'ZCARK8TPK5'
    """
    return PasswordGenerator(config).generate(date, seed)


def derive_password_range(
    date_begin: str,
    date_end: str,
    seed: str = DEFAULT_SEED,
    config: PotdConfig | None = None,
) -> PotdResult[dict[str, str]]:
    """
    Пароли дня для диапазона дат (включительно).

    Args:
        date_begin: Первая дата YYYY-MM-DD
        date_end: Последняя дата YYYY-MM-DD, строго позже date_begin,
            не дальше 365 дней
        seed: 4-8 ASCII символов или DEFAULT_SEED
        config: Конфигурация (опционально)

    Returns:
        PotdResult со словарём {YYYY-MM-DD: пароль} в порядке возрастания дат
    """
    return PasswordGenerator(config).generate_multiple(date_begin, date_end, seed)


def derive_password_of_the_day(
    date: str, seed: str = DEFAULT_SEED, config: PotdConfig | None = None
) -> PotdResult[PasswordOfTheDay]:
    """Как derive_password, но возвращает модель PasswordOfTheDay."""
    result = derive_password(date, seed, config)
    if not result.ok:
        return PotdResult.failure(result.error)
    return PotdResult.success(PasswordOfTheDay(date=date, password=result.unwrap()))


def encode_seed(seed: str, config: PotdConfig | None = None) -> PotdResult[str]:
    """
    DES-токен seed для конфигурационного файла модема.

    Args:
        seed: 4-8 ASCII символов или DEFAULT_SEED
        config: Конфигурация (опционально)

    Returns:
        PotdResult с токеном XX.XX.XX.XX.XX.XX.XX.XX или ошибкой

    Examples:
        >>> encode_seed("ABCD").unwrap()
        '3F.94.E2.AA.46.63.AA.78'
    """
    return SeedCipher(config).encode(seed)
