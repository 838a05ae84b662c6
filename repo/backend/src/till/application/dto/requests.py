from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from till.application.dto.fields import CurrencyField, NonNegativeCurrencyField


def _to_camel(value: str) -> str:
    parts = value.split("_")
    return parts[0] + "".join(part.capitalize() for part in parts[1:])


class CamelBaseModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=_to_camel,
        populate_by_name=True,
    )


class ParseAmountRequest(CamelBaseModel):
    text: str = Field(max_length=64)
    non_negative: bool = False


class SumAmountsRequest(CamelBaseModel):
    amounts: list[CurrencyField] = Field(min_length=1)


class AdjustBalanceRequest(CamelBaseModel):
    balance: NonNegativeCurrencyField
    delta: CurrencyField
