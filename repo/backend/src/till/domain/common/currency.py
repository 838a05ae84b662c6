from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

I32_MIN = -(2**31)
I32_MAX = 2**31 - 1

_ASCII_DIGITS = frozenset("0123456789")


class CurrencyParseErrorKind(str, Enum):
    FRAC_GREATER_THAN_99 = "FracGreaterThan99"
    MATCH_FAILED = "MatchFailed"
    INTEGER_OVERFLOW = "IntegerOverflow"


_PARSE_ERROR_MESSAGES = {
    CurrencyParseErrorKind.MATCH_FAILED: "parsing failed",
    CurrencyParseErrorKind.INTEGER_OVERFLOW: "integer overflow",
    CurrencyParseErrorKind.FRAC_GREATER_THAN_99: "decimal fraction greater than 99",
}


class CurrencyParseError(ValueError):
    def __init__(self, kind: CurrencyParseErrorKind) -> None:
        super().__init__(_PARSE_ERROR_MESSAGES[kind])
        self.kind = kind

    @property
    def details(self) -> dict[str, Any]:
        return {"kind": self.kind.value}


class CurrencyOverflowError(OverflowError):
    """A result fell outside the signed 32-bit range of hundredths."""

    def __init__(self, hundredths: int) -> None:
        super().__init__(f"amount of {hundredths} hundredths is out of range")
        self.hundredths = hundredths


@dataclass(frozen=True)
class _Tokens:
    negative: bool
    whole: str
    frac: str | None


def _digit_run_end(text: str, start: int) -> int:
    end = start
    while end < len(text) and text[end] in _ASCII_DIGITS:
        end += 1
    return end


def _tokenize(text: str) -> _Tokens:
    # -?[0-9]+(\.[0-9]+)?, anchored at both ends
    position = 0
    negative = text.startswith("-")
    if negative:
        position = 1

    whole_end = _digit_run_end(text, position)
    if whole_end == position:
        raise CurrencyParseError(CurrencyParseErrorKind.MATCH_FAILED)
    whole = text[position:whole_end]
    position = whole_end

    frac: str | None = None
    if position < len(text) and text[position] == ".":
        frac_end = _digit_run_end(text, position + 1)
        if frac_end == position + 1:
            raise CurrencyParseError(CurrencyParseErrorKind.MATCH_FAILED)
        frac = text[position + 1 : frac_end]
        position = frac_end

    if position != len(text):
        raise CurrencyParseError(CurrencyParseErrorKind.MATCH_FAILED)

    return _Tokens(negative=negative, whole=whole, frac=frac)


def _parse_whole(digits: str) -> int:
    significant = digits.lstrip("0")
    # I32_MAX has 10 digits
    if len(significant) > 10 or (significant and int(significant) > I32_MAX):
        raise CurrencyParseError(CurrencyParseErrorKind.INTEGER_OVERFLOW)
    return int(significant or "0")


def _parse_frac(digits: str | None) -> int:
    if digits is None:
        return 0
    significant = digits.lstrip("0")
    if len(significant) > 2:
        raise CurrencyParseError(CurrencyParseErrorKind.FRAC_GREATER_THAN_99)

    frac = int(significant or "0")
    if len(digits) == 1:
        # a single digit after the point is tenths
        frac *= 10
    if not 0 <= frac < 100:
        raise CurrencyParseError(CurrencyParseErrorKind.FRAC_GREATER_THAN_99)
    return frac


def _check_range(hundredths: int) -> int:
    if not I32_MIN <= hundredths <= I32_MAX:
        raise CurrencyOverflowError(hundredths)
    return hundredths


@dataclass(frozen=True, order=True, repr=False)
class Currency:
    """An amount of money with two decimals of precision.

    Stored as a signed 32-bit count of hundredths of the display unit, so
    ``Currency(512)`` is 5.12. Arithmetic is checked against that range and
    raises ``CurrencyOverflowError`` instead of wrapping.
    """

    hundredths: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.hundredths, bool) or not isinstance(self.hundredths, int):
            raise TypeError(f"hundredths must be an int, got {type(self.hundredths).__name__}")
        _check_range(self.hundredths)

    @classmethod
    def from_raw(cls, hundredths: int) -> Currency:
        return cls(hundredths)

    @classmethod
    def parse(cls, text: str) -> Currency:
        """Parse the canonical textual form, e.g. ``"-12.5"`` or ``"3.05"``.

        Surrounding whitespace is ignored. A single fractional digit means
        tenths. Raises ``CurrencyParseError`` whose ``kind`` tells why the
        text was rejected.
        """
        tokens = _tokenize(text.strip())
        whole = _parse_whole(tokens.whole)
        frac = _parse_frac(tokens.frac)

        magnitude = whole * 100 + frac
        # I32_MIN has one more unit of magnitude than I32_MAX
        limit = -I32_MIN if tokens.negative else I32_MAX
        if magnitude > limit:
            raise CurrencyParseError(CurrencyParseErrorKind.INTEGER_OVERFLOW)

        return cls(-magnitude if tokens.negative else magnitude)

    @property
    def whole(self) -> int:
        units = abs(self.hundredths) // 100
        return -units if self.hundredths < 0 else units

    @property
    def fractional(self) -> int:
        remainder = abs(self.hundredths) % 100
        return -remainder if self.hundredths < 0 else remainder

    def as_float(self) -> float:
        """Lossy conversion to a float. Never use for ledger calculations."""
        return self.whole + self.fractional / 100.0

    def __add__(self, other: object) -> Currency:
        if not isinstance(other, Currency):
            return NotImplemented
        return Currency(self.hundredths + other.hundredths)

    def __radd__(self, other: object) -> Currency:
        # lets the builtin sum() start from its int 0
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Currency:
        if not isinstance(other, Currency):
            return NotImplemented
        return Currency(self.hundredths - other.hundredths)

    def __neg__(self) -> Currency:
        return Currency(-self.hundredths)

    def __pos__(self) -> Currency:
        return self

    def __abs__(self) -> Currency:
        return Currency(abs(self.hundredths))

    def __bool__(self) -> bool:
        return self.hundredths != 0

    def __int__(self) -> int:
        return self.hundredths

    def __str__(self) -> str:
        sign = "-" if self.hundredths < 0 else ""
        text = f"{sign}{abs(self.whole)}"
        if self.fractional != 0:
            text += f".{abs(self.fractional):02d}"
        return text

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self}')"
