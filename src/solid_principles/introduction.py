# src/solid_principles/introduction.py
"""
Basic good practices: DRY, KISS and YAGNI.

DRY  - Don't Repeat Yourself
KISS - Keep It Simple, Stupid
YAGNI - You Ain't Gonna Need It

Each practice is shown as a V1 class that ignores it next to a V2 class
that follows it.
"""

import logging

logger = logging.getLogger(__name__)


class AreaCalculatorV1:
    """Repeats the area computation once per rectangle (not DRY)."""

    @staticmethod
    def calculate():
        length1 = 10
        breadth1 = 5
        area1 = float(length1 * breadth1)
        print(f"Area: {area1}")
        length2 = 20
        breadth2 = 10
        area2 = float(length2 * breadth2)
        print(f"Area: {area2}")


class AreaCalculatorV2:
    """One reusable area computation (DRY)."""

    @staticmethod
    def calculate(length: int, breadth: int) -> float:
        return float(length * breadth)


class IsNumberEvenV1:
    """Even check padded with a temporary flag and branches (not KISS)."""

    @staticmethod
    def is_even(number: int) -> bool:
        if number % 2 == 0:
            is_even = True
        else:
            is_even = False
        return is_even


class IsNumberEvenV2:
    """Even check as a single expression (KISS)."""

    @staticmethod
    def is_even(number: int) -> bool:
        return number % 2 == 0


class InvoiceV1:
    """Invoice carrying an accessor nothing calls (not YAGNI)."""

    def __init__(self, customer_name: str, amount: float):
        self._customer_name = customer_name
        self._amount = amount

    def get_customer_name(self) -> str:
        return self._customer_name

    def print_invoice(self):
        print(f"Customer Name: {self._customer_name}")
        print(f"Amount: {self._amount}")


class InvoiceV2:
    """Invoice with only what printing needs (YAGNI)."""

    def __init__(self, customer_name: str, amount: float):
        self._customer_name = customer_name
        self._amount = amount

    def print_invoice(self):
        print(f"Customer Name: {self._customer_name}")
        print(f"Amount: {self._amount}")


def main():
    """Run the DRY, KISS and YAGNI demonstrations."""
    print("Introduction to OOP in Python")

    logger.info("DRY: duplicated area blocks vs. a reusable calculator")
    AreaCalculatorV1.calculate()
    area1 = AreaCalculatorV2.calculate(10, 5)
    print(f"Area: {area1}")
    area2 = AreaCalculatorV2.calculate(20, 10)
    print(f"Area: {area2}")

    logger.info("KISS: branching even check vs. a single expression")
    number = 4
    print(f"{number} is even: {IsNumberEvenV1.is_even(number)}")
    print(f"{number} is even: {IsNumberEvenV2.is_even(number)}")

    logger.info("YAGNI: unused accessor vs. just enough invoice")
    InvoiceV1("John Doe", 100.0).print_invoice()
    InvoiceV2("Jane Doe", 200.0).print_invoice()


if __name__ == "__main__":
    main()
