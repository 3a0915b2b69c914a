"""
Liskov Substitution Principle - problematic hierarchies.

Every subtype here inherits an operation it cannot honour, so a caller written
against the base type breaks when handed the subtype.
"""

import logging

from app.exceptions import UnauthorizedError, UnsupportedOperationError

logger = logging.getLogger("solid.lessons.lsp")


# =============================================================================
# SHAPES
# =============================================================================


class Rectangle:
    def __init__(self):
        self.width = 0
        self.height = 0

    def set_width(self, width: int) -> None:
        self.width = width

    def set_height(self, height: int) -> None:
        self.height = height

    def get_area(self) -> int:
        return self.width * self.height


class Square(Rectangle):
    """Keeps both sides equal, which silently changes the Rectangle contract."""

    def set_width(self, width: int) -> None:
        super().set_width(width)
        super().set_height(width)

    def set_height(self, height: int) -> None:
        super().set_width(height)
        super().set_height(height)


def stretch(rectangle: Rectangle, width: int, height: int) -> int:
    """Resize a rectangle and return its area.

    Callers expect ``width * height``; a Square returns ``height * height``.
    """
    rectangle.set_width(width)
    rectangle.set_height(height)
    return rectangle.get_area()


# =============================================================================
# BIRDS
# =============================================================================


class Bird:
    def fly(self) -> None:
        logger.info(f"bird_flew kind={type(self).__name__}")


class Duck(Bird):
    pass


class Ostrich(Bird):
    def fly(self) -> None:
        raise UnsupportedOperationError("Ostriches cannot fly")


# =============================================================================
# USER AUTHENTICATION
# =============================================================================


class User:
    def check_access(self) -> bool:
        # Check user access
        return True


class GuestUser(User):
    def check_access(self) -> bool:
        raise UnauthorizedError("Guest users don't have access")


# =============================================================================
# PAYMENTS
# =============================================================================


class Payment:
    def process_payment(self) -> None:
        logger.info(f"payment_processed kind={type(self).__name__}")


class CreditCardPayment(Payment):
    pass


class FreeTrialPayment(Payment):
    def process_payment(self) -> None:
        raise UnsupportedOperationError("Free trials don't process payments")


# =============================================================================
# ENGINES
# =============================================================================


class Engine:
    def __init__(self):
        self.running = False

    def start_engine(self) -> None:
        self.running = True
        logger.info(f"engine_started kind={type(self).__name__}")


class ElectricEngine(Engine):
    def start_engine(self) -> None:
        raise UnsupportedOperationError("Electric engines start differently")
