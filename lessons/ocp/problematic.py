"""
Open-Closed Principle - code that must be edited for every new case.

Each class switches on a type argument or on concrete classes, so supporting
a new shape, discount, log destination, payment method or notification
channel means modifying code that already works.
"""

import logging
import math
import sys
from pathlib import Path
from typing import Optional, TextIO, Union

from app.config import settings

logger = logging.getLogger("solid.lessons.ocp")


# =============================================================================
# AREA CALCULATOR
# =============================================================================


class Rectangle:
    def __init__(self, length: float, width: float):
        self.length = length
        self.width = width


class Circle:
    def __init__(self, radius: float):
        self.radius = radius


class AreaCalculator:
    """Needs a new method for every new shape"""

    def calculate_rectangle_area(self, r: Rectangle) -> float:
        return r.length * r.width

    def calculate_circle_area(self, c: Circle) -> float:
        return math.pi * c.radius * c.radius


# =============================================================================
# DISCOUNTS
# =============================================================================


class DiscountCalculator:
    def calculate_discount(self, discount_type: str, amount: float) -> float:
        if discount_type == "FIXED":
            return amount - 50
        elif discount_type == "PERCENTAGE":
            return amount - amount * 0.1
        return amount


# =============================================================================
# LOGGING
# =============================================================================


class Logger:
    """Routes messages by a log type string; unknown types are dropped"""

    def __init__(self, file_path: Optional[Union[str, Path]] = None, stream: Optional[TextIO] = None):
        self.file_path = Path(file_path or settings.log_file_path)
        self.stream = stream

    def log(self, message: str, log_type: str) -> None:
        if log_type == "console":
            print(message, file=self.stream or sys.stdout)
        elif log_type == "file":
            with self.file_path.open("a", encoding="utf-8") as fh:
                fh.write(message + "\n")
        # More conditions for other log types


# =============================================================================
# PAYMENT PROCESSING
# =============================================================================


class PaymentProcessor:
    def process_payment(self, payment_type: str, amount: float) -> None:
        if payment_type == "credit":
            logger.info(f"credit_payment_processed amount={amount}")
        elif payment_type == "paypal":
            logger.info(f"paypal_payment_processed amount={amount}")
        # Additional conditions for other payment types


# =============================================================================
# NOTIFICATIONS
# =============================================================================


class NotificationService:
    def send_notification(self, user_type: str, message: str) -> None:
        if user_type == "email":
            logger.info(f"email_notification_sent message={message!r}")
        elif user_type == "sms":
            logger.info(f"sms_notification_sent message={message!r}")
        # More conditions for other notification types
