"""
Open-Closed lessons: prose and demonstrations for each example.

The demonstrations add a case the problematic code did not anticipate, to show
which design absorbs it without edits.
"""

from contextlib import contextmanager
from io import StringIO
from pathlib import Path
from typing import Iterator, List
import logging
import tempfile
import threading

from domain.enums import Principle
from domain.schemas.lesson_schemas import DemoTranscript, Lesson
from lessons.ocp import better, problematic

_ocp_logger = logging.getLogger("solid.lessons.ocp")
_capture_lock = threading.Lock()
_active_captures = 0
_level_before_capture = logging.NOTSET


class _EventCollector(logging.Handler):
    """Keeps the messages logged by the thread that created it"""

    def __init__(self):
        super().__init__(level=logging.INFO)
        self.thread_id = threading.get_ident()
        self.events: List[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        if record.thread == self.thread_id:
            self.events.append(record.getMessage())


@contextmanager
def _collect_events() -> Iterator[List[str]]:
    """Collect the messages the OCP stubs log on this thread while the block runs"""
    global _active_captures, _level_before_capture

    collector = _EventCollector()
    with _capture_lock:
        # The first capture lowers the level and the last one restores it
        if _active_captures == 0:
            _level_before_capture = _ocp_logger.level
            _ocp_logger.setLevel(logging.INFO)
        _active_captures += 1
    _ocp_logger.addHandler(collector)
    try:
        yield collector.events
    finally:
        _ocp_logger.removeHandler(collector)
        with _capture_lock:
            _active_captures -= 1
            if _active_captures == 0:
                _ocp_logger.setLevel(_level_before_capture)


class _Square(better.Shape):
    def __init__(self, side: float):
        self.side = side

    def calculate_area(self) -> float:
        return self.side * self.side


class _BuyOneGetOneDiscount(better.DiscountStrategy):
    def apply_discount(self, amount: float) -> float:
        return amount / 2


class _MemoryLogStrategy(better.LogStrategy):
    def __init__(self):
        self.messages: List[str] = []

    def log(self, message: str) -> None:
        self.messages.append(message)


class _GiftCardPaymentMethod(better.PaymentMethod):
    def __init__(self):
        self.charged: List[float] = []

    def process_payment(self, amount: float) -> None:
        self.charged.append(amount)


class _PushNotification(better.NotificationChannel):
    def __init__(self):
        self.delivered: List[str] = []

    def send_notification(self, message: str) -> None:
        self.delivered.append(message)


def demonstrate_area_calculator() -> DemoTranscript:
    transcript = DemoTranscript()

    calculator = problematic.AreaCalculator()
    rectangle_area = calculator.calculate_rectangle_area(problematic.Rectangle(3, 4))
    circle_area = calculator.calculate_circle_area(problematic.Circle(1))
    transcript.problematic.append(f"rectangle area {rectangle_area}, circle area {circle_area:.4f}")
    transcript.problematic.append("a square needs a new calculate_square_area method")

    calculator = better.AreaCalculator()
    for shape in (better.Rectangle(3, 4), better.Circle(1), _Square(2)):
        transcript.better.append(
            f"{type(shape).__name__.lstrip('_')} area {calculator.calculate_shape_area(shape):.4f}"
        )
    return transcript


def demonstrate_discounts() -> DemoTranscript:
    transcript = DemoTranscript()

    calculator = problematic.DiscountCalculator()
    for discount_type in ("FIXED", "PERCENTAGE", "BOGO"):
        result = calculator.calculate_discount(discount_type, 200.0)
        transcript.problematic.append(f"{discount_type} on 200.0 gives {result}")

    calculator = better.DiscountCalculator()
    strategies = (
        better.FixedDiscountStrategy(),
        better.PercentageDiscountStrategy(),
        _BuyOneGetOneDiscount(),
    )
    for strategy in strategies:
        result = calculator.calculate_discount(strategy, 200.0)
        transcript.better.append(f"{type(strategy).__name__.lstrip('_')} on 200.0 gives {result}")
    return transcript


def demonstrate_logging() -> DemoTranscript:
    transcript = DemoTranscript()

    with tempfile.TemporaryDirectory() as tmp:
        log_file = Path(tmp) / "lesson.log"
        console = StringIO()
        old_logger = problematic.Logger(file_path=log_file, stream=console)
        for log_type in ("console", "file", "memory"):
            old_logger.log(f"hello {log_type}", log_type)
        written = log_file.read_text(encoding="utf-8").splitlines()
        transcript.problematic.append(
            f"console got {console.getvalue().splitlines()}, file got {written}, "
            "'memory' was silently dropped"
        )

        log_file = Path(tmp) / "lesson-better.log"
        console = StringIO()
        memory = _MemoryLogStrategy()
        for strategy in (better.ConsoleLogStrategy(console), better.FileLogStrategy(log_file), memory):
            better.Logger(strategy).log(f"hello {type(strategy).__name__.lstrip('_')}")
        transcript.better.append(f"console got {console.getvalue().splitlines()}")
        transcript.better.append(f"file got {log_file.read_text(encoding='utf-8').splitlines()}")
        transcript.better.append(f"memory got {memory.messages}")
    return transcript


def demonstrate_payment_processing() -> DemoTranscript:
    transcript = DemoTranscript()

    with _collect_events() as events:
        processor = problematic.PaymentProcessor()
        for payment_type in ("credit", "paypal", "gift_card"):
            processor.process_payment(payment_type, 25.0)
    transcript.problematic.extend(events)
    transcript.problematic.append("'gift_card' was silently ignored")

    gift_card = _GiftCardPaymentMethod()
    with _collect_events() as events:
        processor = better.PaymentProcessor()
        for method in (better.CreditPaymentMethod(), better.PaypalPaymentMethod(), gift_card):
            processor.process_payment(method, 25.0)
    transcript.better.extend(events)
    transcript.better.append(f"gift card charged {gift_card.charged}")
    return transcript


def demonstrate_notifications() -> DemoTranscript:
    transcript = DemoTranscript()

    with _collect_events() as events:
        service = problematic.NotificationService()
        for channel_type in ("email", "sms", "push"):
            service.send_notification(channel_type, "Your order shipped")
    transcript.problematic.extend(events)
    transcript.problematic.append("'push' was silently ignored")

    push = _PushNotification()
    with _collect_events() as events:
        service = better.NotificationService()
        for channel in (better.EmailNotification(), better.SmsNotification(), push):
            service.send_notification(channel, "Your order shipped")
    transcript.better.extend(events)
    transcript.better.append(f"push delivered {push.delivered}")
    return transcript


LESSONS: List[Lesson] = [
    Lesson(
        slug="ocp-area-calculator",
        principle=Principle.OCP,
        title="Shape Area Calculator",
        problem="AreaCalculator must be modified every time a new shape needs an area.",
        remedy=(
            "With a Shape interface exposing calculate_area, AreaCalculator works "
            "with any shape, and new shapes are added without touching it."
        ),
        problematic_classes=[problematic.AreaCalculator, problematic.Rectangle, problematic.Circle],
        better_classes=[better.Shape, better.Rectangle, better.Circle, better.AreaCalculator],
        demo=demonstrate_area_calculator,
    ),
    Lesson(
        slug="ocp-discounts",
        principle=Principle.OCP,
        title="Discount Calculator",
        problem="Adding a new discount type requires modifying DiscountCalculator.",
        remedy=(
            "DiscountCalculator relies on the DiscountStrategy interface, so new "
            "discounts are new strategies and the calculator stays closed for modification."
        ),
        problematic_classes=[problematic.DiscountCalculator],
        better_classes=[
            better.DiscountStrategy,
            better.FixedDiscountStrategy,
            better.PercentageDiscountStrategy,
            better.DiscountCalculator,
        ],
        demo=demonstrate_discounts,
    ),
    Lesson(
        slug="ocp-logging",
        principle=Principle.OCP,
        title="Logging Mechanism",
        problem="Adding a new logging destination requires modifying Logger.",
        remedy=(
            "Logger delegates to a LogStrategy, so a new destination is a new "
            "strategy passed in at construction."
        ),
        problematic_classes=[problematic.Logger],
        better_classes=[
            better.LogStrategy,
            better.ConsoleLogStrategy,
            better.FileLogStrategy,
            better.Logger,
        ],
        demo=demonstrate_logging,
    ),
    Lesson(
        slug="ocp-payment-processing",
        principle=Principle.OCP,
        title="Payment Processing System",
        problem="Adding a new payment method requires changes to PaymentProcessor.",
        remedy=(
            "PaymentProcessor operates on the PaymentMethod interface, so new "
            "methods are added as new implementations."
        ),
        problematic_classes=[problematic.PaymentProcessor],
        better_classes=[
            better.PaymentMethod,
            better.CreditPaymentMethod,
            better.PaypalPaymentMethod,
            better.PaymentProcessor,
        ],
        demo=demonstrate_payment_processing,
    ),
    Lesson(
        slug="ocp-notifications",
        principle=Principle.OCP,
        title="User Notification System",
        problem="Introducing a new notification type means altering NotificationService.",
        remedy=(
            "NotificationService depends on the NotificationChannel interface, so "
            "the mechanism is extended by implementing new channels."
        ),
        problematic_classes=[problematic.NotificationService],
        better_classes=[
            better.NotificationChannel,
            better.EmailNotification,
            better.SmsNotification,
            better.NotificationService,
        ],
        demo=demonstrate_notifications,
    ),
]
