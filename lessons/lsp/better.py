"""
Liskov Substitution Principle - substitutable designs.

Each variant implements only the interfaces it can fully honour, so any
implementation can stand in wherever its interface is expected.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List
import logging

logger = logging.getLogger("solid.lessons.lsp")


# =============================================================================
# SHAPES
# =============================================================================


class Shape(ABC):
    @abstractmethod
    def get_area(self) -> int:
        """Return the area of the shape"""


class Rectangle(Shape):
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height

    def get_area(self) -> int:
        return self.width * self.height


class Square(Shape):
    def __init__(self, side: int):
        self.side = side

    def get_area(self) -> int:
        return self.side * self.side


# =============================================================================
# BIRDS
# =============================================================================


class Bird(ABC):
    """Marker for every bird, flying or not."""


class FlyingBird(ABC):
    """Capability interface for birds that can actually fly."""

    @abstractmethod
    def fly(self) -> None:
        """Take off"""


class Duck(Bird, FlyingBird):
    def fly(self) -> None:
        logger.info(f"bird_flew kind={type(self).__name__}")


class Ostrich(Bird):
    pass


def take_off(birds: Iterable[Bird]) -> List[FlyingBird]:
    """Make every bird that can fly take off and return those birds.

    The capability is checked here, at the call site, instead of waiting for
    a grounded bird to fail inside ``fly``.
    """
    flown = []
    for bird in birds:
        if isinstance(bird, FlyingBird):
            bird.fly()
            flown.append(bird)
    return flown


# =============================================================================
# USER AUTHENTICATION
# =============================================================================


class User(ABC):
    @abstractmethod
    def check_access(self) -> bool:
        """Return whether this user may access protected resources"""


class RegularUser(User):
    def check_access(self) -> bool:
        return True


class GuestUser(User):
    def check_access(self) -> bool:
        # Guests have different access rights, not a broken contract
        return False


# =============================================================================
# PAYMENTS
# =============================================================================


class Payment(ABC):
    @abstractmethod
    def process_payment(self) -> None:
        """Complete the payment step for this purchase"""


class CreditCardPayment(Payment):
    def process_payment(self) -> None:
        logger.info("credit_card_payment_processed")


class FreeTrialPayment(Payment):
    def process_payment(self) -> None:
        # Nothing to charge; record the activation instead
        logger.info("free_trial_activated charged=False")


# =============================================================================
# ENGINES
# =============================================================================


class Engine(ABC):
    def __init__(self):
        self.running = False

    @abstractmethod
    def start_engine(self) -> None:
        """Bring the engine to a running state"""


class CombustionEngine(Engine):
    def start_engine(self) -> None:
        self.running = True
        logger.info("engine_started kind=CombustionEngine mechanism=ignition")


class ElectricEngine(Engine):
    def start_engine(self) -> None:
        self.running = True
        logger.info("engine_started kind=ElectricEngine mechanism=power_on")
