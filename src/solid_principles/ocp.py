# src/solid_principles/ocp.py
"""
Open/Closed Principle (OCP).

Software entities should be open for extension but closed for
modification. ``PaymentMethodV1`` branches on a payment type string, so
supporting a new type means editing it. The V2 design puts each payment
type behind the ``PaymentMethod`` interface; ``PaymentProcessorV2`` only
knows the interface, so new types are added as new classes.
"""

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class PaymentMethodV1:
    """Processes every payment type through one if/else chain."""

    def process_payment(self, payment_type: str) -> None:
        if payment_type == "CreditCard":
            print("Processing credit card payment...")
        elif payment_type == "PayPal":
            print("Processing PayPal payment...")
        else:
            # Each new type needs another branch here
            raise ValueError(f"Unknown payment type: {payment_type}")


class PaymentMethod(ABC):
    """A way of paying."""

    @abstractmethod
    def process_payment(self) -> None:
        pass


class CreditCardPaymentMethod(PaymentMethod):
    def process_payment(self) -> None:
        print("Processing credit card payment...")


class PayPalPaymentMethod(PaymentMethod):
    def process_payment(self) -> None:
        print("Processing PayPal payment...")


class PaymentProcessorV2:
    """Processes payments through whichever ``PaymentMethod`` it is given."""

    def __init__(self, payment_method: PaymentMethod):
        self.payment_method = payment_method

    def process(self) -> None:
        logger.info(f"Processing with {type(self.payment_method).__name__}")
        self.payment_method.process_payment()


def main():
    """Run the OCP demonstration."""
    print("Open/Closed Principle (OCP) Example")

    payment_v1 = PaymentMethodV1()
    for payment_type in ("CreditCard", "PayPal"):
        payment_v1.process_payment(payment_type)

    for method in (CreditCardPaymentMethod(), PayPalPaymentMethod()):
        PaymentProcessorV2(method).process()


if __name__ == "__main__":
    main()
