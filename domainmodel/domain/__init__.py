"""Domain models and types for domainmodel.

This package contains the functional core:
- No I/O operations
- Age gates and currency rules live here
- Easy to test
"""

from domainmodel.domain.family import Family
from domainmodel.domain.job import Hourly, Job, JobType, Salary
from domainmodel.domain.models import Amount, CurrencyCode, Wage
from domainmodel.domain.money import EXCHANGE_RATES, SUPPORTED_CURRENCIES, Money
from domainmodel.domain.person import Person

__all__ = [
    # Types
    "Amount",
    "CurrencyCode",
    "Wage",
    # Money
    "EXCHANGE_RATES",
    "SUPPORTED_CURRENCIES",
    "Money",
    # Employment
    "Hourly",
    "Job",
    "JobType",
    "Salary",
    # People
    "Family",
    "Person",
]
