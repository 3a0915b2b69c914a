"""
Domain enums for the lesson catalog.
"""

import enum


class Principle(str, enum.Enum):
    """Design principles covered by the lessons"""

    LSP = "lsp"
    SRP = "srp"
    OCP = "ocp"

    @property
    def display_name(self) -> str:
        return PRINCIPLE_TITLES[self]

    @property
    def definition(self) -> str:
        return PRINCIPLE_DEFINITIONS[self]


PRINCIPLE_TITLES = {
    Principle.LSP: "Liskov Substitution Principle",
    Principle.SRP: "Single Responsibility Principle",
    Principle.OCP: "Open-Closed Principle",
}

PRINCIPLE_DEFINITIONS = {
    Principle.LSP: (
        "Objects of a supertype must be replaceable with objects of a subtype "
        "without affecting the correctness of the program. A subtype that throws "
        "from an inherited method, or quietly changes what it does, cannot stand "
        "in for its base type."
    ),
    Principle.SRP: (
        "A class should have only one reason to change, meaning it should have "
        "only one job. Splitting responsibilities makes code more modular and "
        "easier to understand, maintain and test."
    ),
    Principle.OCP: (
        "Software entities should be open for extension but closed for "
        "modification. New behaviour is added by writing new implementations of "
        "an interface rather than by editing a list of cases in existing code."
    ),
}
