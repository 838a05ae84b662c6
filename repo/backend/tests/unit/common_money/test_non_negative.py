from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[3] / "src"))

from till.domain.common.currency import (
    I32_MAX,
    Currency,
    CurrencyOverflowError,
    CurrencyParseError,
    CurrencyParseErrorKind,
)
from till.domain.common.non_negative import NegativeValueError, NonNegativeCurrency


def test_negative_value_is_rejected_on_construction() -> None:
    with pytest.raises(NegativeValueError) as exc_info:
        NonNegativeCurrency(Currency(-1))

    assert exc_info.value.value == Currency(-1)
    assert exc_info.value.details == {"hundredths": -1}
    assert isinstance(exc_info.value, ValueError)


def test_zero_and_positive_values_are_accepted() -> None:
    assert NonNegativeCurrency(Currency(0)).to_currency() == Currency(0)
    assert NonNegativeCurrency.from_raw(1250).currency == Currency(1250)
    assert NonNegativeCurrency.parse("12.5") == NonNegativeCurrency.from_raw(1250)


def test_parse_keeps_parse_errors_and_rejects_negatives() -> None:
    with pytest.raises(CurrencyParseError) as exc_info:
        NonNegativeCurrency.parse("1.2.3")
    assert exc_info.value.kind == CurrencyParseErrorKind.MATCH_FAILED

    with pytest.raises(NegativeValueError):
        NonNegativeCurrency.parse("-0.01")


def test_only_currency_can_be_wrapped() -> None:
    with pytest.raises(TypeError):
        NonNegativeCurrency(5)  # type: ignore[arg-type]


def test_checked_sub_requires_non_negative_operand() -> None:
    with pytest.raises(TypeError):
        NonNegativeCurrency.from_raw(500).checked_sub(Currency(100))  # type: ignore[arg-type]


def test_addition_never_fails_for_non_negative_operands() -> None:
    sample = [NonNegativeCurrency.from_raw(value) for value in range(0, 5000, 173)]
    for a in sample:
        for b in sample:
            total = a + b
            assert isinstance(total, NonNegativeCurrency)
            assert total.to_currency() == a.to_currency() + b.to_currency()


def test_addition_still_checks_the_integer_range() -> None:
    with pytest.raises(CurrencyOverflowError):
        NonNegativeCurrency.from_raw(I32_MAX) + NonNegativeCurrency.from_raw(1)


def test_subtraction_revalidates() -> None:
    ten = NonNegativeCurrency.from_raw(1000)
    three = NonNegativeCurrency.from_raw(300)

    assert ten - three == NonNegativeCurrency.from_raw(700)
    assert ten.checked_sub(ten) == NonNegativeCurrency.from_raw(0)

    with pytest.raises(NegativeValueError) as exc_info:
        three - ten
    assert exc_info.value.value == Currency(-700)

    with pytest.raises(NegativeValueError):
        three.checked_sub(ten)

    assert three == NonNegativeCurrency.from_raw(300)
    assert ten == NonNegativeCurrency.from_raw(1000)


def test_mixed_arithmetic_requires_unwrapping() -> None:
    price = NonNegativeCurrency.from_raw(500)
    discount = Currency(-150)

    with pytest.raises(TypeError):
        price + discount  # type: ignore[operator]

    assert price.to_currency() + discount == Currency(350)


def test_conversions_and_ordering() -> None:
    price = NonNegativeCurrency.from_raw(512)

    assert str(price) == "5.12"
    assert int(price) == 512
    assert repr(price) == "NonNegativeCurrency('5.12')"
    assert not NonNegativeCurrency.from_raw(0)
    assert NonNegativeCurrency.from_raw(1) < price
    assert len({price, NonNegativeCurrency.from_raw(512)}) == 1
