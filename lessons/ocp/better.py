"""
Open-Closed Principle - extension through new implementations.

Each service depends on an interface. Adding a shape, discount, log
destination, payment method or channel is a new class; the service itself
does not change.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, TextIO, Union
import logging
import math
import sys

from app.config import settings

logger = logging.getLogger("solid.lessons.ocp")


# =============================================================================
# AREA CALCULATOR
# =============================================================================


class Shape(ABC):
    @abstractmethod
    def calculate_area(self) -> float:
        """Return the area of the shape"""


class Rectangle(Shape):
    def __init__(self, length: float, width: float):
        self.length = length
        self.width = width

    def calculate_area(self) -> float:
        return self.length * self.width


class Circle(Shape):
    def __init__(self, radius: float):
        self.radius = radius

    def calculate_area(self) -> float:
        return math.pi * self.radius * self.radius


class AreaCalculator:
    def calculate_shape_area(self, shape: Shape) -> float:
        return shape.calculate_area()


# =============================================================================
# DISCOUNTS
# =============================================================================


class DiscountStrategy(ABC):
    @abstractmethod
    def apply_discount(self, amount: float) -> float:
        """Return the amount after the discount"""


class FixedDiscountStrategy(DiscountStrategy):
    def __init__(self, amount_off: float = 50):
        self.amount_off = amount_off

    def apply_discount(self, amount: float) -> float:
        return amount - self.amount_off


class PercentageDiscountStrategy(DiscountStrategy):
    def __init__(self, rate: float = 0.1):
        self.rate = rate

    def apply_discount(self, amount: float) -> float:
        return amount - amount * self.rate


class DiscountCalculator:
    def calculate_discount(self, discount_strategy: DiscountStrategy, amount: float) -> float:
        return discount_strategy.apply_discount(amount)


# =============================================================================
# LOGGING
# =============================================================================


class LogStrategy(ABC):
    @abstractmethod
    def log(self, message: str) -> None:
        """Write a message to this destination"""


class ConsoleLogStrategy(LogStrategy):
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def log(self, message: str) -> None:
        print(message, file=self.stream or sys.stdout)


class FileLogStrategy(LogStrategy):
    """Appends one line per message"""

    def __init__(self, file_path: Optional[Union[str, Path]] = None):
        self.file_path = Path(file_path or settings.log_file_path)

    def log(self, message: str) -> None:
        with self.file_path.open("a", encoding="utf-8") as fh:
            fh.write(message + "\n")


class Logger:
    def __init__(self, log_strategy: LogStrategy):
        self.log_strategy = log_strategy

    def log(self, message: str) -> None:
        self.log_strategy.log(message)


# =============================================================================
# PAYMENT PROCESSING
# =============================================================================


class PaymentMethod(ABC):
    @abstractmethod
    def process_payment(self, amount: float) -> None:
        """Charge ``amount`` through this payment method"""


class CreditPaymentMethod(PaymentMethod):
    def process_payment(self, amount: float) -> None:
        logger.info(f"credit_payment_processed amount={amount}")


class PaypalPaymentMethod(PaymentMethod):
    def process_payment(self, amount: float) -> None:
        logger.info(f"paypal_payment_processed amount={amount}")


class PaymentProcessor:
    def process_payment(self, payment_method: PaymentMethod, amount: float) -> None:
        payment_method.process_payment(amount)


# =============================================================================
# NOTIFICATIONS
# =============================================================================


class NotificationChannel(ABC):
    @abstractmethod
    def send_notification(self, message: str) -> None:
        """Deliver ``message`` over this channel"""


class EmailNotification(NotificationChannel):
    def send_notification(self, message: str) -> None:
        logger.info(f"email_notification_sent message={message!r}")


class SmsNotification(NotificationChannel):
    def send_notification(self, message: str) -> None:
        logger.info(f"sms_notification_sent message={message!r}")


class NotificationService:
    def send_notification(self, channel: NotificationChannel, message: str) -> None:
        channel.send_notification(message)
