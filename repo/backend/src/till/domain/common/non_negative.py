from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from till.domain.common.currency import Currency


class NegativeValueError(ValueError):
    def __init__(self, value: Currency) -> None:
        super().__init__(f"amount must be >= 0, got {value}")
        self.value = value

    @property
    def details(self) -> dict[str, Any]:
        return {"hundredths": int(self.value)}


@dataclass(frozen=True, order=True, repr=False)
class NonNegativeCurrency:
    """A ``Currency`` that is never below zero, such as a catalog price.

    Sums of two non-negative amounts are always valid. Differences are
    re-validated and raise ``NegativeValueError`` rather than clamping.
    """

    currency: Currency

    def __post_init__(self) -> None:
        if not isinstance(self.currency, Currency):
            raise TypeError(f"currency must be a Currency, got {type(self.currency).__name__}")
        if self.currency.hundredths < 0:
            raise NegativeValueError(self.currency)

    @classmethod
    def from_raw(cls, hundredths: int) -> NonNegativeCurrency:
        return cls(Currency.from_raw(hundredths))

    @classmethod
    def parse(cls, text: str) -> NonNegativeCurrency:
        return cls(Currency.parse(text))

    def to_currency(self) -> Currency:
        return self.currency

    def checked_sub(self, other: NonNegativeCurrency) -> NonNegativeCurrency:
        if not isinstance(other, NonNegativeCurrency):
            raise TypeError(f"expected NonNegativeCurrency, got {type(other).__name__}")
        return NonNegativeCurrency(self.currency - other.currency)

    def __add__(self, other: object) -> NonNegativeCurrency:
        if not isinstance(other, NonNegativeCurrency):
            return NotImplemented
        return NonNegativeCurrency(self.currency + other.currency)

    def __sub__(self, other: object) -> NonNegativeCurrency:
        if not isinstance(other, NonNegativeCurrency):
            return NotImplemented
        return self.checked_sub(other)

    def __bool__(self) -> bool:
        return bool(self.currency)

    def __int__(self) -> int:
        return int(self.currency)

    def __str__(self) -> str:
        return str(self.currency)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self.currency}')"
