from __future__ import annotations

import logging

from till.application.dto.requests import ParseAmountRequest
from till.application.dto.responses import AmountResponse
from till.application.mappers.amount_mapper import to_amount_response
from till.domain.common.currency import Currency, CurrencyParseError
from till.domain.common.non_negative import NegativeValueError, NonNegativeCurrency

logger = logging.getLogger(__name__)


class ParseAmount:
    def execute(self, request_dto: ParseAmountRequest) -> AmountResponse:
        try:
            amount = Currency.parse(request_dto.text)
        except CurrencyParseError as exc:
            logger.info("amount_rejected", extra={"kind": exc.kind.value})
            raise

        if request_dto.non_negative:
            try:
                amount = NonNegativeCurrency(amount).to_currency()
            except NegativeValueError:
                logger.info("amount_rejected", extra={"kind": "NegativeValue"})
                raise

        return to_amount_response(amount)
