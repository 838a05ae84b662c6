from __future__ import annotations

from till.application.dto.requests import AdjustBalanceRequest
from till.application.dto.responses import AmountResponse
from till.application.mappers.amount_mapper import to_amount_response
from till.domain.common.currency import Currency
from till.domain.common.non_negative import NonNegativeCurrency


def apply_delta(balance: NonNegativeCurrency, delta: Currency) -> NonNegativeCurrency:
    # a non-negative plus a negative operand always stays in range
    return NonNegativeCurrency(balance.to_currency() + delta)


class AdjustBalance:
    def execute(self, request_dto: AdjustBalanceRequest) -> AmountResponse:
        return to_amount_response(apply_delta(request_dto.balance, request_dto.delta))
