# src/solid_principles/lsp.py
"""
Liskov Substitution Principle (LSP).

Objects of a subclass must be usable wherever the base class is expected
without breaking the program. ``PenguinV1`` inherits ``fly`` from
``BirdV1`` but cannot honour it, so passing a penguin to code written for
birds fails at runtime. The V2 design moves flight into the ``Flyable``
interface, implemented only by birds that really fly.

The notification services show the same violation: ``SMSNotificationService``
inherits ``attach_file`` and can only refuse it.
"""

import logging
from abc import ABC, abstractmethod

from .errors import UnsupportedOperationError

logger = logging.getLogger(__name__)


class BirdV1:
    def fly(self):
        print("Bird is flying")


class SparrowV1(BirdV1):
    def fly(self):
        print("Sparrow is flying")


class PenguinV1(BirdV1):
    def fly(self):
        raise UnsupportedOperationError("Penguins cannot fly")


class Flyable(ABC):
    """Something that can fly."""

    @abstractmethod
    def fly(self):
        pass


class BirdV2(ABC):
    """Behaviour shared by all birds; flight is not part of it."""


class SparrowV2(BirdV2, Flyable):
    def fly(self):
        print("Sparrow is flying")


class PenguinV2(BirdV2):
    """Does not implement ``Flyable``."""


def test_fly_v1(bird: BirdV1):
    """Fly any ``BirdV1``; breaks for subclasses that refuse to fly."""
    bird.fly()


def test_fly_v2(flyable_bird: Flyable):
    """Fly anything that is ``Flyable``."""
    if not isinstance(flyable_bird, Flyable):
        raise TypeError(f"{type(flyable_bird).__name__} is not Flyable")
    flyable_bird.fly()


class NotificationService:
    def send_notification(self, message: str):
        print(f"Sending notification: {message}")

    def attach_file(self, file_path: str):
        print(f"Attaching file: {file_path}")


class EmailNotificationService(NotificationService):
    def send_notification(self, message: str):
        print(f"Sending email notification: {message}")

    def attach_file(self, file_path: str):
        print(f"Attaching file to email: {file_path}")


class SMSNotificationService(NotificationService):
    def send_notification(self, message: str):
        print(f"Sending SMS notification: {message}")

    def attach_file(self, file_path: str):
        raise UnsupportedOperationError("SMS does not support file attachments")


def run_compliant():
    """Run only the calls every substituted type can honour."""
    test_fly_v2(SparrowV2())

    email_notification = EmailNotificationService()
    sms_notification = SMSNotificationService()
    email_notification.send_notification("Hello via Email!")
    sms_notification.send_notification("Hello via SMS!")
    email_notification.attach_file("file.txt")


def main():
    """Run the LSP demonstration.

    Flying the V1 penguin raises ``UnsupportedOperationError``, which ends
    the demonstration. That failure is the point of this example.
    """
    print("Liskov Substitution Principle (LSP) Example")

    sparrow1 = SparrowV1()
    penguin1 = PenguinV1()
    test_fly_v1(sparrow1)
    logger.info("Substituting PenguinV1 where a BirdV1 is expected")
    test_fly_v1(penguin1)

    run_compliant()


if __name__ == "__main__":
    main()
