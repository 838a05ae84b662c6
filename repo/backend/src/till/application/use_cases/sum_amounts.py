from __future__ import annotations

from till.application.dto.requests import SumAmountsRequest
from till.application.dto.responses import AmountResponse
from till.application.mappers.amount_mapper import to_amount_response


class SumAmounts:
    def execute(self, request_dto: SumAmountsRequest) -> AmountResponse:
        return to_amount_response(sum(request_dto.amounts))
