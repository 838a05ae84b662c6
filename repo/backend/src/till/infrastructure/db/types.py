from __future__ import annotations

from typing import Any

from sqlalchemy import Integer
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator

from till.domain.common.currency import Currency
from till.domain.common.non_negative import NonNegativeCurrency


class CurrencyType(TypeDecorator[Currency]):
    impl = Integer
    cache_ok = True

    def process_bind_param(self, value: Any, dialect: Dialect) -> int | None:
        if value is None:
            return None
        if not isinstance(value, Currency):
            raise TypeError(f"expected Currency, got {type(value).__name__}")
        return int(value)

    def process_result_value(self, value: Any, dialect: Dialect) -> Currency | None:
        if value is None:
            return None
        return Currency.from_raw(value)


class NonNegativeCurrencyType(TypeDecorator[NonNegativeCurrency]):
    impl = Integer
    cache_ok = True

    def process_bind_param(self, value: Any, dialect: Dialect) -> int | None:
        if value is None:
            return None
        if not isinstance(value, NonNegativeCurrency):
            raise TypeError(f"expected NonNegativeCurrency, got {type(value).__name__}")
        return int(value)

    def process_result_value(self, value: Any, dialect: Dialect) -> NonNegativeCurrency | None:
        if value is None:
            return None
        return NonNegativeCurrency.from_raw(value)
