from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from till.application.dto.requests import (
    AdjustBalanceRequest,
    ParseAmountRequest,
    SumAmountsRequest,
)
from till.application.use_cases.adjust_balance import AdjustBalance, apply_delta
from till.application.use_cases.parse_amount import ParseAmount
from till.application.use_cases.sum_amounts import SumAmounts
from till.domain.common.currency import (
    I32_MAX,
    I32_MIN,
    Currency,
    CurrencyOverflowError,
    CurrencyParseError,
    CurrencyParseErrorKind,
)
from till.domain.common.non_negative import NegativeValueError, NonNegativeCurrency


def test_parse_amount_returns_wire_and_display_forms() -> None:
    response = ParseAmount().execute(ParseAmountRequest(text=" -5.1 "))

    assert response.hundredths == -510
    assert response.display == "-5.10"
    assert response.whole == -5
    assert response.fractional == -10


def test_parse_amount_logs_and_reraises_parse_errors(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="till.application.use_cases.parse_amount")

    with pytest.raises(CurrencyParseError) as exc_info:
        ParseAmount().execute(ParseAmountRequest(text="12.345"))

    assert exc_info.value.kind == CurrencyParseErrorKind.FRAC_GREATER_THAN_99
    assert [record.kind for record in caplog.records] == ["FracGreaterThan99"]


def test_parse_amount_non_negative_flag() -> None:
    request_dto = ParseAmountRequest.model_validate({"text": "-1", "nonNegative": True})

    with pytest.raises(NegativeValueError):
        ParseAmount().execute(request_dto)

    allowed = ParseAmountRequest.model_validate({"text": "0", "nonNegative": True})
    assert ParseAmount().execute(allowed).display == "0"


def test_sum_amounts_uses_checked_arithmetic() -> None:
    response = SumAmounts().execute(SumAmountsRequest(amounts=[150, -25, 5]))
    assert response.hundredths == 130
    assert response.display == "1.30"

    with pytest.raises(CurrencyOverflowError):
        SumAmounts().execute(SumAmountsRequest(amounts=[I32_MAX, 1]))


def test_apply_delta_refuses_to_go_negative() -> None:
    balance = NonNegativeCurrency.from_raw(1000)

    assert apply_delta(balance, Currency(250)) == NonNegativeCurrency.from_raw(1250)
    assert apply_delta(balance, Currency(-1000)) == NonNegativeCurrency.from_raw(0)
    with pytest.raises(NegativeValueError):
        apply_delta(balance, Currency(-1001))
    assert balance == NonNegativeCurrency.from_raw(1000)


def test_adjust_balance_use_case() -> None:
    response = AdjustBalance().execute(AdjustBalanceRequest(balance=500, delta=-120))
    assert response.display == "3.80"


def test_currency_fields_validate_and_serialize_as_int() -> None:
    request_dto = AdjustBalanceRequest.model_validate({"balance": 500, "delta": -120})

    assert request_dto.balance == NonNegativeCurrency.from_raw(500)
    assert request_dto.delta == Currency(-120)
    assert request_dto.model_dump() == {"balance": 500, "delta": -120}
    assert request_dto.model_dump_json() == '{"balance":500,"delta":-120}'


def test_currency_fields_accept_value_objects() -> None:
    request_dto = AdjustBalanceRequest(
        balance=NonNegativeCurrency.from_raw(1),  # type: ignore[arg-type]
        delta=Currency(2),  # type: ignore[arg-type]
    )
    assert request_dto.model_dump() == {"balance": 1, "delta": 2}


@pytest.mark.parametrize(
    "payload",
    [
        {"balance": -1, "delta": 0},
        {"balance": 1, "delta": I32_MAX + 1},
        {"balance": "5", "delta": 0},
        {"balance": 5, "delta": 1.5},
        {"balance": True, "delta": 0},
    ],
)
def test_currency_fields_reject_invalid_wire_values(payload: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        AdjustBalanceRequest.model_validate(payload)


def test_sum_request_requires_at_least_one_amount() -> None:
    with pytest.raises(ValidationError):
        SumAmountsRequest(amounts=[])


def test_apply_delta_with_most_negative_delta_is_refused_as_negative() -> None:
    balance = NonNegativeCurrency.from_raw(I32_MAX)

    with pytest.raises(NegativeValueError) as exc_info:
        apply_delta(balance, Currency(I32_MIN))

    assert exc_info.value.value == Currency(-1)
