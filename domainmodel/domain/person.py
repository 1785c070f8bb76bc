"""People, their jobs, and their spouses.

Job and spouse assignment are age-gated. An assignment that fails the gate
clears the field instead of raising.
"""

import weakref

from domainmodel.domain.job import Job

MINIMUM_WORKING_AGE = 16
MINIMUM_MARRIAGE_AGE = 18


class Person:
    """A person with an optional job and an optional spouse."""

    def __init__(self, first_name: str, last_name: str, age: int) -> None:
        self.first_name = first_name
        self.last_name = last_name
        self.age = age
        self._job: Job | None = None
        self._spouse: weakref.ref[Person] | None = None

    @property
    def job(self) -> Job | None:
        return self._job

    @property
    def spouse(self) -> "Person | None":
        if self._spouse is None:
            return None
        return self._spouse()

    def assign_job(self, job: Job | None) -> bool:
        """Give this person a job, or clear it if they are too young.

        Args:
            job: Job to assign, or None to clear.

        Returns:
            True if the person now holds the given job.
        """
        if self.age >= MINIMUM_WORKING_AGE:
            self._job = job
        else:
            self._job = None
        return self._job is job

    def marry(self, other: "Person | None") -> bool:
        """Set this person's spouse, or clear it if either is too young.

        Only this side of the relation changes; the caller sets the other
        side (see Family).

        Args:
            other: Spouse to set, or None to clear.

        Returns:
            True if the spouse was set.
        """
        if other is not None and self.age >= MINIMUM_MARRIAGE_AGE and other.age >= MINIMUM_MARRIAGE_AGE:
            self._spouse = weakref.ref(other)
            return True

        self._spouse = None
        return False

    def to_string(self) -> str:
        """Render the person.

        Example: "[Person: firstName:Ted lastName:Neward age:45 job:Salary(1000) spouse:Charlotte]"
        """
        job = str(self.job) if self.job is not None else "nil"
        spouse = self.spouse.first_name if self.spouse is not None else "nil"
        return (
            f"[Person: firstName:{self.first_name} lastName:{self.last_name} "
            f"age:{self.age} job:{job} spouse:{spouse}]"
        )

    def __str__(self) -> str:
        return self.to_string()
