"""
PotdResult — контейнер результата публичных операций

Либо value, либо error, но не оба сразу. Вызывающий код проверяет
result.ok и композирует валидацию без исключений; unwrap() для тех мест,
где исключение удобнее (CLI, тесты).
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from src.core.domain.errors import PotdError, PotdValidationError


T = TypeVar("T")


@dataclass(frozen=True)
class PotdResult(Generic[T]):
    """Результат операции: value при успехе, error при ошибке валидации."""

    value: Optional[T] = None
    error: Optional[PotdError] = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("PotdResult requires exactly one of value or error")

    @classmethod
    def success(cls, value: T) -> "PotdResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: PotdError) -> "PotdResult[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """
        Значение результата.

        Raises:
            PotdValidationError: Если результат содержит ошибку
        """
        if self.error is not None:
            raise PotdValidationError(self.error)
        return self.value  # type: ignore[return-value]
