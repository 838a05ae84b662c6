from __future__ import annotations

from fastapi import APIRouter

from till.application.dto.requests import (
    AdjustBalanceRequest,
    ParseAmountRequest,
    SumAmountsRequest,
)
from till.application.dto.responses import AmountResponse
from till.application.use_cases.adjust_balance import AdjustBalance
from till.application.use_cases.parse_amount import ParseAmount
from till.application.use_cases.sum_amounts import SumAmounts

router = APIRouter(prefix="/v1/amounts")


@router.post("/parse", response_model=AmountResponse)
def parse_amount(request_dto: ParseAmountRequest) -> AmountResponse:
    return ParseAmount().execute(request_dto)


@router.post("/sum", response_model=AmountResponse)
def sum_amounts(request_dto: SumAmountsRequest) -> AmountResponse:
    return SumAmounts().execute(request_dto)


@router.post("/adjust", response_model=AmountResponse)
def adjust_balance(request_dto: AdjustBalanceRequest) -> AmountResponse:
    return AdjustBalance().execute(request_dto)
