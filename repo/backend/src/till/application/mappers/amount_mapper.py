from __future__ import annotations

from till.application.dto.responses import AmountResponse
from till.domain.common.currency import Currency
from till.domain.common.non_negative import NonNegativeCurrency


def to_amount_response(amount: Currency | NonNegativeCurrency) -> AmountResponse:
    if isinstance(amount, NonNegativeCurrency):
        amount = amount.to_currency()
    return AmountResponse(
        hundredths=int(amount),
        display=str(amount),
        whole=amount.whole,
        fractional=amount.fractional,
    )
