"""
Single Responsibility Principle - classes with more than one reason to change.

Each class here mixes its data with persistence, presentation or delivery
concerns. Changing a database schema, a print layout or an email provider
means editing the same class.
"""

from decimal import Decimal
from typing import List, Optional, TextIO
from uuid import UUID, uuid4
import logging
import sys

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationError

from app.exceptions import NotFoundError, ServiceValidationError

logger = logging.getLogger("solid.lessons.srp")

CENTS = Decimal("0.01")


# =============================================================================
# USER MANAGEMENT
# =============================================================================


class User(BaseModel):
    """User properties plus database and email concerns"""

    user_id: UUID = Field(default_factory=uuid4)
    name: str = Field(..., min_length=1)
    email: EmailStr

    model_config = ConfigDict(validate_assignment=True)

    def save_user(self) -> None:
        logger.info(f"User saved to the database user_id={self.user_id}")

    def send_email_verification(self) -> None:
        logger.info(f"Email verification sent email={self.email}")


# =============================================================================
# REPORTS
# =============================================================================


class Report:
    def __init__(self, title: str = "Report", lines: Optional[List[str]] = None):
        self.title = title
        self.lines = list(lines or [])

    def generate_report(self) -> str:
        content = "\n".join([self.title, *self.lines])
        logger.info(f"Report generated title={self.title}")
        return content

    def print_report(self, stream: Optional[TextIO] = None) -> None:
        print(self.generate_report(), file=stream or sys.stdout)
        logger.info(f"Report printed title={self.title}")


# =============================================================================
# EMPLOYEES
# =============================================================================


class Employee(BaseModel):
    """Employee properties plus payroll, persistence and reporting"""

    employee_id: UUID = Field(default_factory=uuid4)
    name: str
    department: str
    annual_salary: Decimal = Field(default=Decimal("0"), ge=0)

    def calculate_pay(self) -> Decimal:
        return (self.annual_salary / 12).quantize(CENTS)

    def save_employee(self) -> None:
        logger.info(f"Employee saved to the database employee_id={self.employee_id}")

    def generate_employee_report(self) -> str:
        return f"{self.name} ({self.department}): monthly pay {self.calculate_pay()}"


# =============================================================================
# ORDERS
# =============================================================================


class Item(BaseModel):
    name: str
    price: Decimal = Field(..., ge=0)
    quantity: int = Field(default=1, ge=1)


class Order:
    """Item management, presentation and persistence in one class"""

    def __init__(self, order_id: Optional[UUID] = None):
        self.order_id = order_id or uuid4()
        self._items: List[Item] = []

    # item management
    def calculate_total_sum(self) -> Decimal:
        return sum((item.price * item.quantity for item in self._items), Decimal("0"))

    def get_items(self) -> List[Item]:
        return list(self._items)

    def get_item_count(self) -> int:
        return len(self._items)

    def add_item(self, item: Item) -> None:
        self._items.append(item)

    def delete_item(self, item: Item) -> None:
        if item not in self._items:
            raise NotFoundError(f"Item {item.name} is not part of order {self.order_id}")
        self._items.remove(item)

    # presentation
    def print_order(self, stream: Optional[TextIO] = None) -> None:
        print(self.show_order(), file=stream or sys.stdout)

    def show_order(self) -> str:
        rows = [f"Order {self.order_id}"]
        rows += [f"{item.quantity} x {item.name} @ {item.price}" for item in self._items]
        rows.append(f"Total: {self.calculate_total_sum()}")
        return "\n".join(rows)

    # persistence
    def load_order(self) -> None:
        logger.info(f"Order loaded order_id={self.order_id}")

    def save_order(self) -> None:
        logger.info(f"Order saved order_id={self.order_id}")

    def update_order(self) -> None:
        logger.info(f"Order updated order_id={self.order_id}")

    def delete_order(self) -> None:
        logger.info(f"Order deleted order_id={self.order_id}")


# =============================================================================
# USER SETTINGS
# =============================================================================


class UserSettings:
    """Changes settings and also decides how they are stored"""

    def change_email(self, user: User, email: str) -> User:
        try:
            user.email = email
        except ValidationError as e:
            raise ServiceValidationError(f"Invalid email address: {email}") from e
        return user

    def change_username(self, user: User, username: str) -> User:
        try:
            user.name = username
        except ValidationError as e:
            raise ServiceValidationError("Username must not be empty") from e
        return user

    def save_settings(self, user: User) -> None:
        logger.info(f"Settings saved user_id={user.user_id}")

    def load_settings(self, user: User) -> None:
        logger.info(f"Settings loaded user_id={user.user_id}")
