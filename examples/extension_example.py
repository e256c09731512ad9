# examples/extension_example.py
"""
Extending the compliant (V2) designs without modifying them
"""

from solid_principles.ocp import PaymentMethod, PaymentMethodV1, PaymentProcessorV2
from solid_principles.dip import (
    RecommendationEngine,
    RecommendationEngineV2,
    RecentlyAddedRecommendationEngineV2,
)
from solid_principles.lsp import BirdV2, Flyable, PenguinV2, test_fly_v2


class BankTransferPaymentMethod(PaymentMethod):
    """A payment type PaymentProcessorV2 has never heard of."""

    def process_payment(self):
        print("Processing bank transfer payment...")


class TopRatedRecommendationEngine(RecommendationEngine):
    def get_recommendations(self):
        print("Generating recommendations based on top rated movies...")


class EagleV2(BirdV2, Flyable):
    def fly(self):
        print("Eagle is soaring")


def open_closed_example():
    print("=== Open/Closed: new payment type ===")
    PaymentProcessorV2(BankTransferPaymentMethod()).process()

    # The V1 chain has to be edited before it accepts the new type
    try:
        PaymentMethodV1().process_payment("BankTransfer")
    except ValueError as e:
        print(f"✗ PaymentMethodV1: {e}")


def dependency_inversion_example():
    print("\n=== Dependency Inversion: swapping engines ===")
    for engine in (RecentlyAddedRecommendationEngineV2(), TopRatedRecommendationEngine()):
        RecommendationEngineV2(engine).recommend()


def liskov_substitution_example():
    print("\n=== Liskov Substitution: only flyers are passed to flying code ===")
    test_fly_v2(EagleV2())
    try:
        test_fly_v2(PenguinV2())
    except TypeError as e:
        print(f"✗ {e}")


def main():
    open_closed_example()
    dependency_inversion_example()
    liskov_substitution_example()


if __name__ == "__main__":
    main()
