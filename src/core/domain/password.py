"""
PasswordOfTheDay — Модель пароля дня

Immutable Pydantic модель: дата + 10-символьный пароль из алфавита 0-9A-Z.
Используется для JSON вывода CLI и как типизированный результат
derive_password_of_the_day().
"""

from pydantic import BaseModel, Field, field_validator

from src.core.domain.constants import ALPHABET, PASSWORD_LENGTH


class PasswordOfTheDay(BaseModel):
    """
    Пароль дня для конкретной даты.

    Пароль чувствителен к регистру: только заглавные буквы и цифры.
    """

    date: str = Field(
        ..., pattern=r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$", description="Дата YYYY-MM-DD"
    )
    password: str = Field(
        ...,
        min_length=PASSWORD_LENGTH,
        max_length=PASSWORD_LENGTH,
        description="Пароль дня (10 символов 0-9A-Z)",
    )

    model_config = {"frozen": True}

    @field_validator("password")
    @classmethod
    def validate_alphabet(cls, v: str) -> str:
        """Все символы пароля из ALPHABET"""
        invalid = sorted({ch for ch in v if ch not in ALPHABET})
        if invalid:
            raise ValueError(f"password contains characters outside 0-9A-Z: {invalid}")
        return v
