"""Tests for domainmodel.domain.job."""

from domainmodel.domain.job import Hourly, Job, Salary


class TestCalculateIncome:
    """Tests for Job.calculate_income."""

    def test_hourly_default_hours(self) -> None:
        """Should use 2000 hours by default."""
        job = Job("Guest Lecturer", Hourly(20.0))
        assert job.calculate_income() == 40000

    def test_hourly_given_hours(self) -> None:
        """Should multiply the wage by the given hours."""
        job = Job("Guest Lecturer", Hourly(20.0))
        assert job.calculate_income(10) == 200

    def test_hourly_rounds_to_nearest(self) -> None:
        """Should round fractional income."""
        job = Job("Barista", Hourly(12.25))
        assert job.calculate_income(3) == 37  # 36.75
        assert job.calculate_income(2) == 25  # 24.5

    def test_hourly_just_below_half_rounds_down(self) -> None:
        """Should not round a wage just under 0.5 up to 1."""
        job = Job("Tester", Hourly(0.49999999999999994))
        assert job.calculate_income(1) == 0

    def test_salary_ignores_hours(self) -> None:
        """Should return the salary regardless of hours."""
        job = Job("Engineer", Salary(50000))
        assert job.calculate_income() == 50000
        assert job.calculate_income(10) == 50000


class TestRaiseByAmount:
    """Tests for Job.raise_by_amount."""

    def test_hourly(self) -> None:
        """Should add to the hourly wage."""
        job = Job("Guest Lecturer", Hourly(10.0))
        job.raise_by_amount(1.5)
        assert job.type == Hourly(11.5)
        assert job.calculate_income() == 23000

    def test_salary(self) -> None:
        """Should add to the salary."""
        job = Job("Engineer", Salary(1000))
        job.raise_by_amount(500.0)
        assert job.type == Salary(1500)

    def test_salary_truncates_fractional_raise(self) -> None:
        """Should drop the fractional part of a salary raise."""
        job = Job("Engineer", Salary(1000))
        job.raise_by_amount(7.9)
        assert job.type == Salary(1007)


class TestRaiseByPercent:
    """Tests for Job.raise_by_percent."""

    def test_salary(self) -> None:
        """Should raise a salary by the percentage."""
        job = Job("Engineer", Salary(50000))
        job.raise_by_percent(0.1)
        assert job.type == Salary(55000)

    def test_salary_rounds(self) -> None:
        """Should round the raised salary to nearest."""
        job = Job("Engineer", Salary(1001))
        job.raise_by_percent(0.5)
        assert job.type == Salary(1502)  # 1501.5

    def test_hourly(self) -> None:
        """Should scale the hourly wage."""
        job = Job("Guest Lecturer", Hourly(10.0))
        job.raise_by_percent(1.0)
        assert job.type == Hourly(20.0)
        assert job.calculate_income() == 40000


class TestJobDescription:
    """Tests for Job text rendering."""

    def test_hourly(self) -> None:
        """Should render the wage."""
        assert str(Job("Guest Lecturer", Hourly(20.0))) == "Hourly(20.0)"

    def test_salary(self) -> None:
        """Should render the salary."""
        job = Job("Engineer", Salary(1000))
        assert str(job) == "Salary(1000)"
        assert job.description == "Salary(1000)"

    def test_reflects_raise(self) -> None:
        """Should render the pay after a raise."""
        job = Job("Engineer", Salary(1000))
        job.raise_by_amount(10.0)
        assert str(job) == "Salary(1010)"
