"""
Lesson Repository - Data access layer for the lesson catalog
"""

from typing import Iterable, List, Optional

from repositories.base import BaseRepository
from domain.enums import Principle
from domain.schemas.lesson_schemas import Lesson


class LessonRepository(BaseRepository[Lesson]):
    """Repository for lessons, keyed by slug"""

    def __init__(self, lessons: Optional[Iterable[Lesson]] = None):
        super().__init__()
        for lesson in lessons or []:
            self.create(lesson)

    def key_for(self, entity: Lesson) -> str:
        return entity.slug

    def get_by_principle(self, principle: Principle) -> List[Lesson]:
        """Get all lessons for one principle, in catalog order"""
        return [
            lesson for lesson in self._entities.values() if lesson.principle == principle
        ]
