"""
Liskov Substitution lessons: prose and demonstrations for each example.
"""

import logging
from typing import List

from app.exceptions import AppError
from domain.enums import Principle
from domain.schemas.lesson_schemas import DemoTranscript, Lesson
from lessons.lsp import better, problematic

logger = logging.getLogger("solid.lessons.lsp")


def _attempt(label: str, action) -> str:
    """Run ``action`` and describe how it went, including a raised lesson error"""
    try:
        result = action()
    except AppError as exc:
        return f"{label} raised {type(exc).__name__}: {exc}"
    if result is None:
        return f"{label} succeeded"
    return f"{label} returned {result}"


def demonstrate_shapes() -> DemoTranscript:
    transcript = DemoTranscript()

    for shape in (problematic.Rectangle(), problematic.Square()):
        area = problematic.stretch(shape, 5, 4)
        verdict = "as expected" if area == 20 else "expected 20"
        transcript.problematic.append(
            f"{type(shape).__name__} stretched to 5x4 reports area {area} ({verdict})"
        )

    for shape in (better.Rectangle(5, 4), better.Square(4)):
        transcript.better.append(f"{type(shape).__name__} reports area {shape.get_area()}")
    return transcript


def demonstrate_birds() -> DemoTranscript:
    transcript = DemoTranscript()

    for bird in (problematic.Duck(), problematic.Ostrich()):
        transcript.problematic.append(_attempt(f"{type(bird).__name__}.fly()", bird.fly))

    flock = [better.Duck(), better.Ostrich()]
    flown = better.take_off(flock)
    transcript.better.append(
        "take_off flew " + ", ".join(type(bird).__name__ for bird in flown)
    )
    grounded = [type(b).__name__ for b in flock if not isinstance(b, better.FlyingBird)]
    transcript.better.append("stayed on the ground: " + ", ".join(grounded))
    return transcript


def demonstrate_users() -> DemoTranscript:
    transcript = DemoTranscript()

    for user in (problematic.User(), problematic.GuestUser()):
        transcript.problematic.append(
            _attempt(f"{type(user).__name__}.check_access()", user.check_access)
        )
    for user in (better.RegularUser(), better.GuestUser()):
        transcript.better.append(
            _attempt(f"{type(user).__name__}.check_access()", user.check_access)
        )
    return transcript


def demonstrate_payments() -> DemoTranscript:
    transcript = DemoTranscript()

    for payment in (problematic.CreditCardPayment(), problematic.FreeTrialPayment()):
        transcript.problematic.append(
            _attempt(f"{type(payment).__name__}.process_payment()", payment.process_payment)
        )
    for payment in (better.CreditCardPayment(), better.FreeTrialPayment()):
        transcript.better.append(
            _attempt(f"{type(payment).__name__}.process_payment()", payment.process_payment)
        )
    return transcript


def demonstrate_engines() -> DemoTranscript:
    transcript = DemoTranscript()

    for engine in (problematic.Engine(), problematic.ElectricEngine()):
        outcome = _attempt(f"{type(engine).__name__}.start_engine()", engine.start_engine)
        transcript.problematic.append(f"{outcome}; running={engine.running}")
    for engine in (better.CombustionEngine(), better.ElectricEngine()):
        outcome = _attempt(f"{type(engine).__name__}.start_engine()", engine.start_engine)
        transcript.better.append(f"{outcome}; running={engine.running}")
    return transcript


LESSONS: List[Lesson] = [
    Lesson(
        slug="lsp-shapes",
        principle=Principle.LSP,
        title="Shape Area Calculation",
        problem=(
            "A Square is not substitutable for a Rectangle because changing the "
            "width of a supposed rectangle (when it is actually a square) changes "
            "its height, which violates the expectations for a rectangle's behaviour."
        ),
        remedy=(
            "With a Shape interface exposing get_area, Rectangle and Square are "
            "independent implementations that clients can use interchangeably "
            "without knowing the concrete type."
        ),
        problematic_classes=[problematic.Rectangle, problematic.Square],
        better_classes=[better.Shape, better.Rectangle, better.Square],
        demo=demonstrate_shapes,
    ),
    Lesson(
        slug="lsp-birds",
        principle=Principle.LSP,
        title="Bird Flight",
        problem=(
            "An Ostrich is a Bird but cannot fly, so using it where a flying Bird "
            "is expected leads to runtime errors."
        ),
        remedy=(
            "Separating Bird from the FlyingBird capability means an Ostrich is "
            "never forced to implement fly, and callers check for the capability "
            "instead of catching a failure."
        ),
        problematic_classes=[problematic.Bird, problematic.Duck, problematic.Ostrich],
        better_classes=[better.Bird, better.FlyingBird, better.Duck, better.Ostrich],
        demo=demonstrate_birds,
    ),
    Lesson(
        slug="lsp-user-authentication",
        principle=Principle.LSP,
        title="User Authentication",
        problem=(
            "GuestUser throws from check_access, so it behaves differently from "
            "what is expected of a User and cannot be used wherever "
            "check_access is called."
        ),
        remedy=(
            "With User as an interface, GuestUser answers the access question "
            "with False instead of failing, so RegularUser and GuestUser are "
            "interchangeable for any client expecting a User."
        ),
        problematic_classes=[problematic.User, problematic.GuestUser],
        better_classes=[better.User, better.RegularUser, better.GuestUser],
        demo=demonstrate_users,
    ),
    Lesson(
        slug="lsp-payments",
        principle=Principle.LSP,
        title="Payment Processing",
        problem=(
            "FreeTrialPayment cannot fulfil Payment.process_payment because free "
            "trials involve no actual payment, so substituting it for a Payment fails."
        ),
        remedy=(
            "FreeTrialPayment fulfils process_payment in a way consistent with its "
            "purpose, recording the trial activation, so the substitution holds."
        ),
        problematic_classes=[
            problematic.Payment,
            problematic.CreditCardPayment,
            problematic.FreeTrialPayment,
        ],
        better_classes=[better.Payment, better.CreditCardPayment, better.FreeTrialPayment],
        demo=demonstrate_payments,
    ),
    Lesson(
        slug="lsp-engines",
        principle=Principle.LSP,
        title="Engine and Start Mechanism",
        problem=(
            "ElectricEngine overrides start_engine to throw, changing the expected "
            "behaviour of Engine.start_engine and making it not truly substitutable."
        ),
        remedy=(
            "CombustionEngine and ElectricEngine both fulfil start_engine in ways "
            "appropriate to their type, so either can be used as an Engine."
        ),
        problematic_classes=[problematic.Engine, problematic.ElectricEngine],
        better_classes=[better.Engine, better.CombustionEngine, better.ElectricEngine],
        demo=demonstrate_engines,
    ),
]
