"""
Liskov Substitution Principle lessons.

Subtypes must be usable anywhere their supertype is expected without altering
the caller's expected correctness.
"""

from lessons.lsp.catalog import LESSONS

__all__ = ["LESSONS"]
