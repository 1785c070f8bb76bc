"""Households: two founding spouses plus their children."""

from domainmodel.domain.person import Person
from domainmodel.errors import AlreadyMarriedError

MINIMUM_PARENT_AGE = 21


class Family:
    """A married couple (members 0 and 1) followed by any children."""

    def __init__(self, spouse1: Person, spouse2: Person) -> None:
        if spouse1.spouse is not None or spouse2.spouse is not None:
            raise AlreadyMarriedError("One or both persons are already married.")

        # Person.marry is one-directional, so set both sides
        spouse1.marry(spouse2)
        spouse2.marry(spouse1)
        self.members: list[Person] = [spouse1, spouse2]

    def have_child(self, child: Person) -> bool:
        """Add a child if at least one founding spouse is old enough.

        Args:
            child: Person to add.

        Returns:
            True if the child was added.
        """
        if len(self.members) < 2:
            return False

        spouse1, spouse2 = self.members[0], self.members[1]
        if spouse1.age >= MINIMUM_PARENT_AGE or spouse2.age >= MINIMUM_PARENT_AGE:
            self.members.append(child)
            return True
        return False

    def household_income(self) -> int:
        """Sum the default-hours income of every member with a job."""
        return sum(member.job.calculate_income() for member in self.members if member.job is not None)
