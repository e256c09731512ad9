# src/solid_principles/isp.py
"""
Interface Segregation Principle (ISP).

Clients should not be forced to depend on methods they do not use.
``MultiFunctionalDevice`` bundles printing, scanning and faxing, so a
printer without fax hardware still has to provide ``fax`` and can only
refuse it. The V2 design splits the capabilities into ``Printable``,
``Scannable`` and ``Faxable`` and lets each device pick what it supports.
"""

import logging
from abc import ABC, abstractmethod

from .errors import UnsupportedOperationError

logger = logging.getLogger(__name__)


class MultiFunctionalDevice(ABC):
    @abstractmethod
    def print(self):
        pass

    @abstractmethod
    def scan(self):
        pass

    @abstractmethod
    def fax(self):
        pass


class MultiFunctionalPrinter(MultiFunctionalDevice):
    """Printer/scanner without fax hardware, forced to expose ``fax``."""

    def print(self):
        print("Printing...")

    def scan(self):
        print("Scanning...")

    def fax(self):
        raise UnsupportedOperationError("Faxing not supported")


class Printable(ABC):
    @abstractmethod
    def print(self):
        pass


class Scannable(ABC):
    @abstractmethod
    def scan(self):
        pass


class Faxable(ABC):
    @abstractmethod
    def fax(self):
        pass


class SimplePrinter(Printable):
    def print(self):
        print("Printing...")


class AllInOnePrinter(Printable, Scannable, Faxable):
    def print(self):
        print("Printing...")

    def scan(self):
        print("Scanning...")

    def fax(self):
        print("Faxing...")


def main():
    """Run the ISP demonstration."""
    print("Interface Segregation Principle (ISP) Example")

    printer_v1 = MultiFunctionalPrinter()
    printer_v1.print()
    printer_v1.scan()
    logger.info("MultiFunctionalPrinter.fax is skipped: it can only refuse")

    SimplePrinter().print()
    all_in_one = AllInOnePrinter()
    all_in_one.print()
    all_in_one.scan()
    all_in_one.fax()


if __name__ == "__main__":
    main()
