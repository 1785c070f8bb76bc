"""Employment and income.

A Job's pay is either an hourly wage or a yearly salary. Raises replace the
pay in place; everything else is a pure calculation.
"""

from dataclasses import dataclass

from domainmodel.domain.models import Amount, Wage
from domainmodel.domain.money import round_half_away_from_zero

# Hours worked in a year when none are given
DEFAULT_HOURS = 2000


@dataclass(frozen=True)
class Hourly:
    """Immutable hourly pay."""

    wage: Wage

    def __str__(self) -> str:
        return f"Hourly({self.wage})"


@dataclass(frozen=True)
class Salary:
    """Immutable yearly salary."""

    amount: Amount

    def __str__(self) -> str:
        return f"Salary({self.amount})"


JobType = Hourly | Salary


class Job:
    """A titled job with hourly or salaried pay."""

    def __init__(self, title: str, type: JobType) -> None:
        self.title = title
        self.type = type

    def calculate_income(self, hours: int = DEFAULT_HOURS) -> int:
        """Calculate income for a number of hours worked.

        Args:
            hours: Hours worked. Ignored for salaried jobs.

        Returns:
            Income in whole units.
        """
        if isinstance(self.type, Hourly):
            return round_half_away_from_zero(self.type.wage * hours)
        return self.type.amount

    def raise_by_amount(self, amount: float) -> None:
        """Raise pay by a fixed amount.

        Salaries only take the whole part of the raise (7.9 adds 7).
        """
        if isinstance(self.type, Hourly):
            self.type = Hourly(Wage(self.type.wage + amount))
        else:
            self.type = Salary(Amount(self.type.amount + int(amount)))

    def raise_by_percent(self, percent: float) -> None:
        """Raise pay by a fraction (0.1 is ten percent)."""
        if isinstance(self.type, Hourly):
            self.type = Hourly(Wage(self.type.wage * (1 + percent)))
        else:
            self.type = Salary(Amount(round_half_away_from_zero(self.type.amount * (1 + percent))))

    @property
    def description(self) -> str:
        return str(self.type)

    def __str__(self) -> str:
        return self.description

    def __repr__(self) -> str:
        return f"Job(title={self.title!r}, type={self.type!r})"
