"""
SeedCipher — DES-токен seed для конфигурации модема

Модем, получивший этот токен в конфигурационном файле, принимает пароли
дня, сгенерированные тем же seed. Токен один на seed.

Алгоритм:
1. Seed (сырой, не нормализованный) дополняется нулями до 8 байт
2. DES-CBC, фиксированный ключ DES_KEY, IV из нулей
3. Каждый байт шифротекста → две заглавные hex цифры, разделитель "."

Default seed длиннее одного блока, для него возвращается зашитый
DEFAULT_SEED_TOKEN.
"""

import logging

from Crypto.Cipher import DES

from src.core.config import DEFAULT_CONFIG, PotdConfig
from src.core.domain.constants import (
    DEFAULT_SEED,
    DEFAULT_SEED_TOKEN,
    DES_BLOCK_SIZE,
    DES_IV,
    DES_KEY,
    TOKEN_SEPARATOR,
)
from src.core.domain.result import PotdResult
from src.core.domain.seed import validate_seed


logger = logging.getLogger(__name__)


def encrypt_block(block: bytes) -> bytes:
    """DES-CBC шифрование одного 8-байтного блока.

    Raises:
        ValueError: Если длина блока != 8
    """
    if len(block) != DES_BLOCK_SIZE:
        raise ValueError(f"block must be {DES_BLOCK_SIZE} bytes, got {len(block)}")

    cipher = DES.new(DES_KEY, DES.MODE_CBC, iv=DES_IV)
    return cipher.encrypt(block)


def format_token(data: bytes) -> str:
    """Байты → "XX.XX..." без разделителя после последнего байта."""
    return TOKEN_SEPARATOR.join(f"{b:02X}" for b in data)


class SeedCipher:
    """Кодирование seed в DES-токен (stateless)."""

    def __init__(self, config: PotdConfig | None = None):
        self.config = config or DEFAULT_CONFIG

    def encode(self, seed: str) -> PotdResult[str]:
        """Кодирование seed.

        Args:
            seed: сырой seed (4-8 ASCII символов) или DEFAULT_SEED

        Returns:
            PotdResult с токеном вида XX.XX.XX.XX.XX.XX.XX.XX или ошибкой
        """
        if seed == DEFAULT_SEED:
            return PotdResult.success(DEFAULT_SEED_TOKEN)

        error = validate_seed(seed, self.config)
        if error is not None:
            logger.debug("seed cipher rejected seed: %s", error)
            return PotdResult.failure(error)

        block = seed.encode("ascii").ljust(DES_BLOCK_SIZE, b"\x00")
        return PotdResult.success(format_token(encrypt_block(block)))
