"""
Lessons package - before/after examples grouped by principle.

Each principle subpackage has a ``problematic`` module, a ``better`` module
and a ``catalog`` that registers the examples as lessons.
"""

from typing import List

from domain.schemas.lesson_schemas import Lesson
from lessons import lsp, ocp, srp


def all_lessons() -> List[Lesson]:
    """Every lesson, grouped LSP, SRP, OCP in catalog order"""
    return [*lsp.LESSONS, *srp.LESSONS, *ocp.LESSONS]


__all__ = ["all_lessons"]
