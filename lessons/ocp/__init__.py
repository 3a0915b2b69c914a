"""
Open-Closed Principle lessons.

A unit of code should be extendable with new behaviour without modifying its
existing, already-tested code.
"""

from lessons.ocp.catalog import LESSONS

__all__ = ["LESSONS"]
