# src/solid_principles/srp.py
"""
Single Responsibility Principle (SRP).

A class should have one reason to change. ``EmployeeV1`` holds employee
data, computes salary and persists itself, so a change to any of those
concerns touches the same class. The V2 design gives each concern its own
class: ``EmployeeV2`` for data, ``EmployeeSalaryCalculator`` for pay and
``EmployeeRepository`` for storage.
"""

import logging
from datetime import date

logger = logging.getLogger(__name__)


class EmployeeV1:
    """Employee data, salary calculation and persistence in one class."""

    def __init__(self, name: str, date_of_birth: date):
        self._name = name
        self._date_of_birth = date_of_birth

    def get_name(self) -> str:
        return self._name

    def get_date_of_birth(self) -> date:
        return self._date_of_birth

    def calculate_salary(self) -> float:
        """Placeholder for the salary rules."""
        return 0.0

    def save_to_database(self) -> None:
        """Placeholder for persistence."""
        logger.info(f"Saving {self._name} (EmployeeV1 persists itself)")


class EmployeeV2:
    """Employee data only."""

    def __init__(self, name: str, date_of_birth: date):
        self._name = name
        self._date_of_birth = date_of_birth

    def get_name(self) -> str:
        return self._name

    def get_date_of_birth(self) -> date:
        return self._date_of_birth


class EmployeeSalaryCalculator:
    """Salary rules for an employee."""

    def calculate_salary(self, employee: EmployeeV2) -> float:
        """Placeholder for the salary rules."""
        return 0.0


class EmployeeRepository:
    """Persistence for employees."""

    def save_to_database(self, employee: EmployeeV2) -> None:
        """Placeholder for persistence."""
        logger.info(f"Saving {employee.get_name()} through EmployeeRepository")


def main():
    """Run the SRP demonstration."""
    print("Single Responsibility Principle (SRP) Example")

    employee1 = EmployeeV1("John Doe", date(1990, 1, 15))
    print(f"{employee1.get_name()} salary: {employee1.calculate_salary()}")
    employee1.save_to_database()

    employee2 = EmployeeV2("Jane Doe", date(1992, 6, 30))
    calculator = EmployeeSalaryCalculator()
    repository = EmployeeRepository()
    print(f"{employee2.get_name()} salary: {calculator.calculate_salary(employee2)}")
    repository.save_to_database(employee2)
    logger.info("EmployeeV2 delegated salary and persistence to dedicated classes")


if __name__ == "__main__":
    main()
