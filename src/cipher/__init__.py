"""Cipher — DES-токен seed для конфигурационного файла модема."""

from .seed_cipher import SeedCipher, encrypt_block, format_token

__all__ = [
    "SeedCipher",
    "encrypt_block",
    "format_token",
]
