"""Domain type definitions for domainmodel.

These NewTypes provide semantic clarity and help with type checking:
- CurrencyCode: Three-letter currency code (e.g., "USD")
- Amount: Whole-unit money amount in some currency
- Wage: Hourly wage, may be fractional
"""

from typing import NewType

# Currency codes are plain strings validated against SUPPORTED_CURRENCIES
CurrencyCode = NewType("CurrencyCode", str)

# Amounts are whole units of their currency, never fractional
Amount = NewType("Amount", int)

# Hourly wages are fractional
Wage = NewType("Wage", float)
