"""
API dependencies for dependency injection
"""

from functools import lru_cache

from lessons import all_lessons
from repositories import LessonRepository


@lru_cache(maxsize=1)
def get_lesson_repository() -> LessonRepository:
    """
    Lesson catalog dependency for FastAPI routes.

    The catalog is built once and shared; lessons are read-only.

    Usage:
        @router.get("/example")
        def example(repo: LessonRepository = Depends(get_lesson_repository)):
            ...
    """
    return LessonRepository(all_lessons())
