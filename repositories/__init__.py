"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.lesson_repository import LessonRepository

__all__ = [
    "BaseRepository",
    "LessonRepository",
]
