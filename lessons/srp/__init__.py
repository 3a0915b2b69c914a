"""
Single Responsibility Principle lessons.

A unit of code should have exactly one reason to change.
"""

from lessons.srp.catalog import LESSONS

__all__ = ["LESSONS"]
