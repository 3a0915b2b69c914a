"""
Single Responsibility Principle - one reason to change per class.

Data holders keep only their properties. Persistence, delivery, payroll and
presentation each live in a class of their own.
"""

from decimal import Decimal
from typing import Dict, List, Optional, TextIO
from uuid import UUID, uuid4
import logging
import sys

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationError

from app.exceptions import ConflictError, NotFoundError, ServiceValidationError

logger = logging.getLogger("solid.lessons.srp")

CENTS = Decimal("0.01")


# =============================================================================
# USER MANAGEMENT
# =============================================================================


class User(BaseModel):
    user_id: UUID = Field(default_factory=uuid4)
    name: str = Field(..., min_length=1)
    email: EmailStr

    model_config = ConfigDict(validate_assignment=True)


class UserRepository:
    """Keeps saved users in memory"""

    def __init__(self):
        self._users: Dict[UUID, User] = {}

    def save_user(self, user: User) -> None:
        self._users[user.user_id] = user
        logger.info(f"User saved to the database user_id={user.user_id}")

    def get_by_id(self, user_id: UUID) -> Optional[User]:
        return self._users.get(user_id)


class EmailService:
    def __init__(self):
        self.sent: List[str] = []

    def send_email_verification(self, user: User) -> None:
        self.sent.append(user.email)
        logger.info(f"Email verification sent email={user.email}")


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


class ReportPrinter:
    def print_report(self, report: Report, stream: Optional[TextIO] = None) -> None:
        print(report.generate_report(), file=stream or sys.stdout)
        logger.info(f"Report printed title={report.title}")


# =============================================================================
# EMPLOYEES
# =============================================================================


class Employee(BaseModel):
    employee_id: UUID = Field(default_factory=uuid4)
    name: str
    department: str
    annual_salary: Decimal = Field(default=Decimal("0"), ge=0)


class Payroll:
    def calculate_pay(self, employee: Employee) -> Decimal:
        """Monthly pay, rounded to cents"""
        return (employee.annual_salary / 12).quantize(CENTS)


class EmployeeRepository:
    def __init__(self):
        self._employees: Dict[UUID, Employee] = {}

    def save_employee(self, employee: Employee) -> None:
        self._employees[employee.employee_id] = employee
        logger.info(f"Employee saved to the database employee_id={employee.employee_id}")

    def get_by_id(self, employee_id: UUID) -> Optional[Employee]:
        return self._employees.get(employee_id)


class ReportGenerator:
    """Builds employee reports, asking Payroll for the figures"""

    def __init__(self, payroll: Optional[Payroll] = None):
        self.payroll = payroll or Payroll()

    def generate_employee_report(self, employee: Employee) -> str:
        pay = self.payroll.calculate_pay(employee)
        return f"{employee.name} ({employee.department}): monthly pay {pay}"


# =============================================================================
# ORDERS
# =============================================================================


class Item(BaseModel):
    name: str
    price: Decimal = Field(..., ge=0)
    quantity: int = Field(default=1, ge=1)


class Order:
    def __init__(self, order_id: Optional[UUID] = None):
        self.order_id = order_id or uuid4()
        self._items: List[Item] = []

    def calculate_total_sum(self) -> Decimal:
        return sum((item.price * item.quantity for item in self._items), Decimal("0"))

    def get_items(self) -> List[Item]:
        return list(self._items)

    def get_item_count(self) -> int:
        """Number of line items, regardless of their quantities"""
        return len(self._items)

    def add_item(self, item: Item) -> None:
        self._items.append(item)

    def delete_item(self, item: Item) -> None:
        if item not in self._items:
            raise NotFoundError(f"Item {item.name} is not part of order {self.order_id}")
        self._items.remove(item)


class OrderPersistence:
    """Stores orders in memory, keyed by order id"""

    def __init__(self):
        self._orders: Dict[UUID, Order] = {}

    def load_order(self, order_id: UUID) -> Order:
        order = self._orders.get(order_id)
        if order is None:
            raise NotFoundError(f"Order {order_id} not found")
        logger.info(f"Order loaded order_id={order_id}")
        return order

    def save_order(self, order: Order) -> Order:
        if order.order_id in self._orders:
            raise ConflictError(f"Order {order.order_id} already exists")
        self._orders[order.order_id] = order
        logger.info(f"Order saved order_id={order.order_id}")
        return order

    def update_order(self, order: Order) -> Order:
        if order.order_id not in self._orders:
            raise NotFoundError(f"Order {order.order_id} not found")
        self._orders[order.order_id] = order
        logger.info(f"Order updated order_id={order.order_id}")
        return order

    def delete_order(self, order_id: UUID) -> bool:
        if self._orders.pop(order_id, None) is None:
            return False
        logger.info(f"Order deleted order_id={order_id}")
        return True


class OrderUI:
    def show_order(self, order: Order) -> str:
        rows = [f"Order {order.order_id}"]
        rows += [f"{item.quantity} x {item.name} @ {item.price}" for item in order.get_items()]
        rows.append(f"Total: {order.calculate_total_sum()}")
        return "\n".join(rows)

    def print_order(self, order: Order, stream: Optional[TextIO] = None) -> None:
        print(self.show_order(order), file=stream or sys.stdout)


# =============================================================================
# USER SETTINGS
# =============================================================================


class UserSettings:
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


class SettingsPersistence:
    """Saves a snapshot of a user's settings and restores it on load"""

    def __init__(self):
        self._snapshots: Dict[UUID, dict] = {}

    def save_settings(self, user: User) -> None:
        self._snapshots[user.user_id] = user.model_dump(include={"name", "email"})
        logger.info(f"Settings saved user_id={user.user_id}")

    def load_settings(self, user: User) -> User:
        snapshot = self._snapshots.get(user.user_id)
        if snapshot is None:
            raise NotFoundError(f"No saved settings for user {user.user_id}")
        for key, value in snapshot.items():
            setattr(user, key, value)
        logger.info(f"Settings loaded user_id={user.user_id}")
        return user
