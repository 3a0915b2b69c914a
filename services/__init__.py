"""Services package - Business logic layer"""

from services.lesson_service import LessonService

__all__ = [
    "LessonService",
]
