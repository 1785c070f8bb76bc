"""Exceptions raised by domainmodel.

Both errors signal a broken calling contract. Nothing in the package
catches them.
"""


class DomainModelError(Exception):
    """Base class for domainmodel errors."""


class InvalidCurrencyError(DomainModelError):
    """Raised when a currency code is outside the supported set."""

    def __init__(self, currency: str) -> None:
        super().__init__(f"Invalid currency: {currency}")
        self.currency = currency


class AlreadyMarriedError(DomainModelError):
    """Raised when a family is founded by someone who already has a spouse."""
