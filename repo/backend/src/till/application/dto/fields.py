from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator, BeforeValidator, Field, PlainSerializer, Strict

from till.domain.common.currency import I32_MAX, I32_MIN, Currency
from till.domain.common.non_negative import NonNegativeCurrency


def _to_wire(value: Currency | NonNegativeCurrency) -> int:
    return int(value)


def _unwrap(value: object) -> object:
    if isinstance(value, (Currency, NonNegativeCurrency)):
        return int(value)
    return value


CurrencyField = Annotated[
    int,
    Strict(),
    Field(ge=I32_MIN, le=I32_MAX),
    BeforeValidator(_unwrap),
    AfterValidator(Currency.from_raw),
    PlainSerializer(_to_wire, return_type=int),
]

NonNegativeCurrencyField = Annotated[
    int,
    Strict(),
    Field(ge=0, le=I32_MAX),
    BeforeValidator(_unwrap),
    AfterValidator(NonNegativeCurrency.from_raw),
    PlainSerializer(_to_wire, return_type=int),
]
