"""Currency-aware money.

Money is an immutable value: conversion and arithmetic return new instances.
All conversions normalise through the base currency (USD).
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

from domainmodel.domain.models import Amount, CurrencyCode
from domainmodel.errors import InvalidCurrencyError

SUPPORTED_CURRENCIES: Final[tuple[CurrencyCode, ...]] = (
    CurrencyCode("USD"),
    CurrencyCode("GBP"),
    CurrencyCode("EUR"),
    CurrencyCode("CAN"),
)

BASE_CURRENCY: Final[CurrencyCode] = CurrencyCode("USD")

# Units of each currency per 1 USD
EXCHANGE_RATES: Final[Mapping[CurrencyCode, float]] = {
    CurrencyCode("USD"): 1.0,
    CurrencyCode("GBP"): 0.5,
    CurrencyCode("EUR"): 1.5,
    CurrencyCode("CAN"): 1.25,
}


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, ties away from zero.

    The builtin round() rounds ties to even, so 2.5 would become 2.

    Args:
        value: Value to round.

    Returns:
        Nearest integer (2.5 -> 3, -2.5 -> -3).
    """
    magnitude = abs(value)
    whole = math.floor(magnitude)
    # Exact, unlike abs(value) + 0.5
    if magnitude - whole >= 0.5:
        whole += 1
    return -whole if value < 0 else whole


def validate_currency(currency: str) -> CurrencyCode:
    """Check a currency code against the supported set.

    Args:
        currency: Currency code to check.

    Returns:
        The code as a CurrencyCode.

    Raises:
        InvalidCurrencyError: If the code is not supported.
    """
    if currency not in SUPPORTED_CURRENCIES:
        raise InvalidCurrencyError(currency)
    return CurrencyCode(currency)


@dataclass(frozen=True)
class Money:
    """Immutable whole-unit amount in a supported currency."""

    amount: Amount
    currency: CurrencyCode

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise TypeError(f"Money amount must be an int, got {self.amount!r}")
        validate_currency(self.currency)

    def convert(
        self,
        to: str,
        rates: Mapping[CurrencyCode, float] = EXCHANGE_RATES,
    ) -> "Money":
        """Convert into another currency.

        Args:
            to: Target currency code.
            rates: Exchange rates relative to the base currency.

        Returns:
            self when already in the target currency, otherwise a new Money.

        Raises:
            InvalidCurrencyError: If the target currency is not supported.
        """
        target = validate_currency(to)
        if self.currency == target:
            return self

        in_base = self.amount / rates[self.currency]
        return Money(Amount(round_half_away_from_zero(in_base * rates[target])), target)

    def add(
        self,
        other: "Money",
        rates: Mapping[CurrencyCode, float] = EXCHANGE_RATES,
    ) -> "Money":
        """Add another amount, giving the result in the other's currency.

        a.add(b) is in b's currency and b.add(a) is in a's, so the two can
        differ by rounding.
        """
        converted = self.convert(other.currency, rates)
        return Money(Amount(converted.amount + other.amount), other.currency)

    def subtract(
        self,
        other: "Money",
        rates: Mapping[CurrencyCode, float] = EXCHANGE_RATES,
    ) -> "Money":
        """Subtract another amount, giving the result in the other's currency."""
        converted = self.convert(other.currency, rates)
        return Money(Amount(converted.amount - other.amount), other.currency)
