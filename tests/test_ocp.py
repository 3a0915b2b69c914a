"""
Tests for the Open-Closed lessons.

The better versions are also exercised with an implementation defined here
in the test, to confirm the services accept new cases without edits.
"""

import io
import logging
import math

import pytest

from app.config import settings
from lessons.ocp import better, problematic


# =============================================================================
# AREA CALCULATOR
# =============================================================================


def test_problematic_area_calculator_per_shape_methods():
    calculator = problematic.AreaCalculator()

    assert calculator.calculate_rectangle_area(problematic.Rectangle(3, 4)) == 12
    assert calculator.calculate_circle_area(problematic.Circle(2)) == pytest.approx(4 * math.pi)


def test_better_area_calculator_accepts_any_shape():
    class Triangle(better.Shape):
        def __init__(self, base, height):
            self.base = base
            self.height = height

        def calculate_area(self):
            return self.base * self.height / 2

    calculator = better.AreaCalculator()

    assert calculator.calculate_shape_area(better.Rectangle(3, 4)) == 12
    assert calculator.calculate_shape_area(better.Circle(1)) == pytest.approx(math.pi)
    assert calculator.calculate_shape_area(Triangle(6, 2)) == 6


# =============================================================================
# DISCOUNTS
# =============================================================================


@pytest.mark.parametrize("discount_type, expected", [
    ("FIXED", 150.0),
    ("PERCENTAGE", 180.0),
    ("SEASONAL", 200.0),
    ("fixed", 200.0),
])
def test_problematic_discount_calculator(discount_type, expected):
    assert problematic.DiscountCalculator().calculate_discount(discount_type, 200.0) == pytest.approx(expected)


def test_better_discount_strategies():
    calculator = better.DiscountCalculator()

    assert calculator.calculate_discount(better.FixedDiscountStrategy(), 200.0) == 150.0
    assert calculator.calculate_discount(better.PercentageDiscountStrategy(), 200.0) == pytest.approx(180.0)
    assert calculator.calculate_discount(better.FixedDiscountStrategy(amount_off=20), 200.0) == 180.0
    assert calculator.calculate_discount(better.PercentageDiscountStrategy(rate=0.25), 200.0) == 150.0


# =============================================================================
# LOGGING
# =============================================================================


def test_problematic_logger_routes_by_type(tmp_path):
    """
    Verifies:
    - "console" goes to the stream
    - "file" appends to the file
    - unknown types are silently dropped
    """
    log_file = tmp_path / "app.log"
    console = io.StringIO()
    logger = problematic.Logger(file_path=log_file, stream=console)

    logger.log("to console", "console")
    logger.log("to file", "file")
    logger.log("nowhere", "syslog")

    assert console.getvalue() == "to console\n"
    assert log_file.read_text(encoding="utf-8") == "to file\n"


def test_better_logger_delegates_to_strategy(tmp_path, capsys):
    log_file = tmp_path / "app.log"

    better.Logger(better.ConsoleLogStrategy()).log("hello")
    better.Logger(better.FileLogStrategy(log_file)).log("first")
    better.Logger(better.FileLogStrategy(str(log_file))).log("second")

    assert capsys.readouterr().out == "hello\n"
    assert log_file.read_text(encoding="utf-8").splitlines() == ["first", "second"]


def test_file_log_strategy_defaults_to_settings_path(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "log_file_path", str(tmp_path / "default.log"))

    better.FileLogStrategy().log("defaulted")

    assert (tmp_path / "default.log").read_text(encoding="utf-8") == "defaulted\n"


def test_better_logger_accepts_new_destination():
    class ListLogStrategy(better.LogStrategy):
        def __init__(self):
            self.messages = []

        def log(self, message):
            self.messages.append(message)

    strategy = ListLogStrategy()
    better.Logger(strategy).log("kept")

    assert strategy.messages == ["kept"]


# =============================================================================
# PAYMENT PROCESSING
# =============================================================================


def test_problematic_payment_processor_ignores_unknown_types(caplog):
    caplog.set_level(logging.INFO, logger="solid.lessons.ocp")
    processor = problematic.PaymentProcessor()

    processor.process_payment("credit", 10.0)
    processor.process_payment("paypal", 20.0)
    processor.process_payment("crypto", 30.0)

    assert "credit_payment_processed amount=10.0" in caplog.text
    assert "paypal_payment_processed amount=20.0" in caplog.text
    assert "30.0" not in caplog.text


def test_better_payment_processor_delegates(caplog):
    caplog.set_level(logging.INFO, logger="solid.lessons.ocp")
    processor = better.PaymentProcessor()

    processor.process_payment(better.CreditPaymentMethod(), 10.0)
    processor.process_payment(better.PaypalPaymentMethod(), 20.0)

    assert "credit_payment_processed amount=10.0" in caplog.text
    assert "paypal_payment_processed amount=20.0" in caplog.text


# =============================================================================
# NOTIFICATIONS
# =============================================================================


def test_problematic_notification_service_branches(caplog):
    caplog.set_level(logging.INFO, logger="solid.lessons.ocp")
    service = problematic.NotificationService()

    service.send_notification("email", "hi")
    service.send_notification("sms", "yo")
    service.send_notification("pigeon", "coo")

    assert "email_notification_sent message='hi'" in caplog.text
    assert "sms_notification_sent message='yo'" in caplog.text
    assert "coo" not in caplog.text


def test_better_notification_service_accepts_new_channel(caplog):
    caplog.set_level(logging.INFO, logger="solid.lessons.ocp")

    class PushNotification(better.NotificationChannel):
        def __init__(self):
            self.delivered = []

        def send_notification(self, message):
            self.delivered.append(message)

    push = PushNotification()
    service = better.NotificationService()
    for channel in (better.EmailNotification(), better.SmsNotification(), push):
        service.send_notification(channel, "shipped")

    assert push.delivered == ["shipped"]
    assert caplog.text.count("shipped") == 2


def test_channels_must_implement_send_notification():
    class Incomplete(better.NotificationChannel):
        pass

    with pytest.raises(TypeError):
        Incomplete()
