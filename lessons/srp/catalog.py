"""
Single Responsibility lessons: prose and demonstrations for each example.
"""

from decimal import Decimal
from io import StringIO
from typing import List

from domain.enums import Principle
from domain.schemas.lesson_schemas import DemoTranscript, Lesson
from lessons.srp import better, problematic


def demonstrate_user_management() -> DemoTranscript:
    transcript = DemoTranscript()

    user = problematic.User(name="Ada Lovelace", email="ada@example.com")
    user.save_user()
    user.send_email_verification()
    transcript.problematic.append(
        "User saved itself and sent its own verification email"
    )

    user = better.User(name="Ada Lovelace", email="ada@example.com")
    repository = better.UserRepository()
    email_service = better.EmailService()
    repository.save_user(user)
    email_service.send_email_verification(user)
    transcript.better.append(
        f"UserRepository holds user {user.name}: {repository.get_by_id(user.user_id) is not None}"
    )
    transcript.better.append(f"EmailService sent verification to {', '.join(email_service.sent)}")
    return transcript


def demonstrate_reports() -> DemoTranscript:
    transcript = DemoTranscript()
    lines = ["Revenue: 1200", "Costs: 800"]

    out = StringIO()
    problematic.Report("Quarterly report", lines).print_report(stream=out)
    transcript.problematic.append(f"Report printed itself ({len(out.getvalue().splitlines())} lines)")

    out = StringIO()
    better.ReportPrinter().print_report(better.Report("Quarterly report", lines), stream=out)
    transcript.better.append(
        f"ReportPrinter printed the Report ({len(out.getvalue().splitlines())} lines)"
    )
    return transcript


def demonstrate_employees() -> DemoTranscript:
    transcript = DemoTranscript()
    salary = Decimal("60000")

    employee = problematic.Employee(name="Grace Hopper", department="Engineering", annual_salary=salary)
    employee.save_employee()
    transcript.problematic.append(employee.generate_employee_report())

    employee = better.Employee(name="Grace Hopper", department="Engineering", annual_salary=salary)
    payroll = better.Payroll()
    better.EmployeeRepository().save_employee(employee)
    transcript.better.append(f"Payroll computed monthly pay {payroll.calculate_pay(employee)}")
    transcript.better.append(better.ReportGenerator(payroll).generate_employee_report(employee))
    return transcript


def demonstrate_orders() -> DemoTranscript:
    transcript = DemoTranscript()
    items = [
        {"name": "Notebook", "price": Decimal("3.50"), "quantity": 2},
        {"name": "Pen", "price": Decimal("1.25"), "quantity": 4},
    ]

    order = problematic.Order()
    for item in items:
        order.add_item(problematic.Item(**item))
    order.save_order()
    transcript.problematic.append(
        f"Order totals {order.calculate_total_sum()} and saved itself"
    )

    order = better.Order()
    for item in items:
        order.add_item(better.Item(**item))
    persistence = better.OrderPersistence()
    persistence.save_order(order)
    loaded = persistence.load_order(order.order_id)
    transcript.better.append(f"Order totals {order.calculate_total_sum()}")
    transcript.better.append(
        f"OrderPersistence loaded an order with {loaded.get_item_count()} items"
    )
    transcript.better.append(better.OrderUI().show_order(loaded).splitlines()[-1])
    return transcript


def demonstrate_user_settings() -> DemoTranscript:
    transcript = DemoTranscript()

    user = problematic.User(name="alan", email="alan@example.com")
    settings = problematic.UserSettings()
    settings.change_email(user, "turing@example.com")
    settings.save_settings(user)
    transcript.problematic.append(
        f"UserSettings changed the email to {user.email} and saved it itself"
    )

    user = better.User(name="alan", email="alan@example.com")
    persistence = better.SettingsPersistence()
    persistence.save_settings(user)
    better.UserSettings().change_username(user, "turing")
    persistence.load_settings(user)
    transcript.better.append(
        f"SettingsPersistence restored the saved username {user.name}"
    )
    return transcript


LESSONS: List[Lesson] = [
    Lesson(
        slug="srp-user-management",
        principle=Principle.SRP,
        title="User Management System",
        problem=(
            "User handles both its properties and operations like saving to a "
            "database and sending email verifications. Changes in the database "
            "schema or the email process require modifying User."
        ),
        remedy=(
            "User holds properties, UserRepository deals with the database and "
            "EmailService sends emails, so each has a single reason to change."
        ),
        problematic_classes=[problematic.User],
        better_classes=[better.User, better.UserRepository, better.EmailService],
        demo=demonstrate_user_management,
    ),
    Lesson(
        slug="srp-reports",
        principle=Principle.SRP,
        title="Report Generation and Printing",
        problem=(
            "Report both generates and prints reports, so a change to either the "
            "generation or the printing mechanism modifies Report."
        ),
        remedy=(
            "Report generates and ReportPrinter prints, which simplifies "
            "maintenance of each."
        ),
        problematic_classes=[problematic.Report],
        better_classes=[better.Report, better.ReportPrinter],
        demo=demonstrate_reports,
    ),
    Lesson(
        slug="srp-employees",
        principle=Principle.SRP,
        title="Employee Management",
        problem=(
            "Employee manages its properties, calculates pay, persists itself and "
            "generates reports, which makes it complex and hard to maintain."
        ),
        remedy=(
            "Payroll, EmployeeRepository and ReportGenerator each handle one "
            "aspect while Employee only carries data."
        ),
        problematic_classes=[problematic.Employee],
        better_classes=[
            better.Employee,
            better.Payroll,
            better.EmployeeRepository,
            better.ReportGenerator,
        ],
        demo=demonstrate_employees,
    ),
    Lesson(
        slug="srp-orders",
        principle=Principle.SRP,
        title="Order Processing",
        problem=(
            "Order is overloaded: it manages items, calculates totals, persists "
            "orders and presents them."
        ),
        remedy=(
            "Order manages order data, OrderPersistence handles storage and "
            "OrderUI handles presentation."
        ),
        problematic_classes=[problematic.Order, problematic.Item],
        better_classes=[better.Order, better.Item, better.OrderPersistence, better.OrderUI],
        demo=demonstrate_orders,
    ),
    Lesson(
        slug="srp-user-settings",
        principle=Principle.SRP,
        title="User Settings Management",
        problem=(
            "UserSettings both modifies settings and persists them, so changes to "
            "either concern affect the same class."
        ),
        remedy=(
            "UserSettings manages the settings and SettingsPersistence saves and "
            "loads them, keeping each class simple to maintain and extend."
        ),
        problematic_classes=[problematic.UserSettings],
        better_classes=[better.UserSettings, better.SettingsPersistence],
        demo=demonstrate_user_settings,
    ),
]
